import pytest

from mdtangle.config import TangleOptions, is_known_encoding


def test_defaults():
    options = TangleOptions()
    assert options.encoding == "utf-8"
    assert options.default_directive is None
    assert options.patterns == ("*.md",)


def test_none_directive_alias():
    assert TangleOptions(default_directive="none").default_directive is None


def test_rejects_unknown_default_directive():
    with pytest.raises(ValueError):
        TangleOptions(default_directive="fortran")


def test_rejects_unknown_encoding():
    assert not is_known_encoding("no-such-codec")
    with pytest.raises(ValueError, match="unknown encoding"):
        TangleOptions(encoding="no-such-codec")


def test_accepts_codec_aliases():
    assert TangleOptions(encoding="latin-1").encoding == "latin-1"
