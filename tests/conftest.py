# conftest.py - pytest configuration
import textwrap

import pytest

from mdtangle.context import TangleContext


@pytest.fixture
def ctx():
    return TangleContext()


@pytest.fixture
def write_doc(tmp_path):
    """Write a dedented markdown document under tmp_path and return its path."""
    def _write(name: str, body: str) -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        return str(path)
    return _write
