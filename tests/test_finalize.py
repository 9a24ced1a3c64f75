import pytest

from mdtangle.config import TangleOptions
from mdtangle.finalize import BUILTIN_DIRECTIVES, c_directive, finalize_block, go_directive
from mdtangle.models import Line


def _line(text, number, document="doc.md", language="go"):
    return Line(text=text, document=document, number=number, language=language)


def test_empty_block_is_empty_text():
    assert finalize_block([]) == ""


def test_first_line_always_gets_a_directive():
    out = finalize_block([_line("package main\n", 7), _line("\n", 8)])
    assert out == "//line doc.md:7\npackage main\n\n"


def test_contiguous_lines_are_emitted_verbatim():
    block = [_line("a\n", 3), _line("b\r\n", 4), _line("c", 5)]
    assert finalize_block(block) == "//line doc.md:3\na\nb\r\nc"


def test_directive_on_line_jump():
    block = [_line("a\n", 3), _line("b\n", 10), _line("c\n", 11)]
    assert finalize_block(block) == "//line doc.md:3\na\n//line doc.md:10\nb\nc\n"


def test_directive_on_document_change():
    block = [_line("a\n", 3, "one.md"), _line("b\n", 4, "two.md")]
    assert finalize_block(block) == "//line one.md:3\na\n//line two.md:4\nb\n"


def test_line_going_backwards_is_a_jump():
    block = [_line("a\n", 5), _line("b\n", 5)]
    assert finalize_block(block).count("//line") == 2


def test_c_family_directive():
    for lang in ("c", "C", "cpp", "c++"):
        out = finalize_block([_line("int x;\n", 12, "src.md", lang)])
        assert out == '#line 12 "src.md"\nint x;\n', lang


def test_go_family_directive_argument_order():
    assert go_directive("a.md", 4) == "//line a.md:4\n"
    assert c_directive("a.md", 4) == '#line 4 "a.md"\n'
    assert finalize_block([_line("x\n", 4, "a.md", "golang")]) == "//line a.md:4\nx\n"


def test_shell_family_uses_c_style():
    out = finalize_block([_line("echo hi\n", 2, "run.md", "bash")])
    assert out == '#line 2 "run.md"\necho hi\n'


def test_unknown_language_emits_no_directive_by_default():
    block = [_line("print(1)\n", 3, language="python"), _line("x\n", 9, language="")]
    assert finalize_block(block) == "print(1)\nx\n"


def test_unknown_language_c_fallback():
    block = [_line("print(1)\n", 3, language="python"), _line("x\n", 9, language="")]
    assert finalize_block(block, default_directive="c") == (
        '#line 3 "doc.md"\nprint(1)\n#line 9 "doc.md"\nx\n'
    )


def test_directive_chosen_per_line_language():
    block = [_line("a\n", 1, language="go"), _line("b\n", 7, language="python")]
    assert finalize_block(block) == "//line doc.md:1\na\nb\n"


def test_register_directive_for_new_language():
    options = TangleOptions()
    options.register_directive("Python", lambda doc, n: f"# line {n} {doc}\n")
    out = finalize_block([_line("pass\n", 2, language="python")], directives=options.directives)
    assert out == "# line 2 doc.md\npass\n"


def test_register_directive_none_removes_language():
    options = TangleOptions()
    options.register_directive("go", None)
    assert finalize_block([_line("x\n", 1)], directives=options.directives) == "x\n"


def test_registered_directives_stay_with_their_options():
    custom = TangleOptions()
    custom.register_directive("go", None)
    custom.register_directive("python", c_directive)
    assert "python" not in TangleOptions().directives
    assert TangleOptions().directives["go"] is go_directive
    assert "python" not in BUILTIN_DIRECTIVES
    assert BUILTIN_DIRECTIVES["go"] is go_directive


def test_builtin_table_is_read_only():
    with pytest.raises(TypeError):
        BUILTIN_DIRECTIVES["python"] = c_directive
