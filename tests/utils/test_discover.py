import os

from mdtangle.utils import discover_documents, expand_inputs


def _touch(path, text=""):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_discovers_markdown_in_sorted_order(tmp_path):
    _touch(tmp_path / "b.md")
    _touch(tmp_path / "a.md")
    _touch(tmp_path / "sub" / "c.md")
    _touch(tmp_path / "notes.txt")
    found = discover_documents(str(tmp_path))
    assert [p[len(str(tmp_path)) + 1:].replace("\\", "/") for p in found] == ["a.md", "b.md", "sub/c.md"]


def test_respects_gitignore_and_skips_git_dir(tmp_path):
    _touch(tmp_path / ".gitignore", "build/\ndraft-*.md\n")
    _touch(tmp_path / "keep.md")
    _touch(tmp_path / "draft-1.md")
    _touch(tmp_path / "build" / "gen.md")
    _touch(tmp_path / ".git" / "info.md")
    found = discover_documents(str(tmp_path))
    assert [p.rsplit("/", 1)[-1].rsplit("\\", 1)[-1] for p in found] == ["keep.md"]


def test_custom_patterns(tmp_path):
    _touch(tmp_path / "a.md")
    _touch(tmp_path / "b.markdown")
    found = discover_documents(str(tmp_path), patterns=("*.markdown",))
    assert len(found) == 1 and found[0].endswith("b.markdown")


def test_expand_inputs_keeps_files_and_order(tmp_path):
    _touch(tmp_path / "dir" / "x.md")
    explicit = str(tmp_path / "explicit.txt")
    missing = str(tmp_path / "missing.md")
    out = expand_inputs([explicit, str(tmp_path / "dir"), missing])
    assert out[0] == explicit
    assert out[1].endswith("x.md")
    assert out[2] == missing


def test_symlink_back_to_ancestor_is_not_followed_twice(tmp_path):
    docs = tmp_path / "docs"
    _touch(docs / "a.md")
    os.symlink(str(docs), str(docs / "loop"), target_is_directory=True)
    found = discover_documents(str(docs))
    assert found == [str(docs / "a.md")]


def test_symlinked_sibling_directory_is_scanned_once(tmp_path):
    _touch(tmp_path / "real" / "x.md")
    os.symlink(str(tmp_path / "real"), str(tmp_path / "zlink"), target_is_directory=True)
    found = discover_documents(str(tmp_path))
    assert [os.path.basename(p) for p in found] == ["x.md"]


def test_parent_gitignore_applies_when_scanning_a_subdirectory(tmp_path):
    _touch(tmp_path / ".gitignore", "docs/drafts/\n/docs/secret.md\n")
    _touch(tmp_path / "docs" / "keep.md")
    _touch(tmp_path / "docs" / "secret.md")
    _touch(tmp_path / "docs" / "drafts" / "wip.md")
    found = discover_documents(str(tmp_path / "docs"))
    assert found == [str(tmp_path / "docs" / "keep.md")]
