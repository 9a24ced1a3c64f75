# mdtangle/utils/gitignore.py
import os
from dataclasses import dataclass
from typing import List

import pathspec

# Never read documents out of VCS metadata, whatever .gitignore says.
ALWAYS_IGNORED: List[str] = [".git/"]


@dataclass(frozen=True)
class IgnoreRules:
    """Compiled .gitignore patterns plus the directory they are relative to."""

    spec: pathspec.PathSpec
    anchor: str

    def matches(self, full_path: str) -> bool:
        """True if `full_path` is ignored. Directories are probed with a trailing '/'."""
        rel = os.path.relpath(os.path.abspath(full_path), self.anchor).replace(os.sep, "/")
        if rel == "." or rel.startswith("../"):
            # Outside the .gitignore's tree: only the built-in rules apply.
            rel = os.path.basename(os.path.abspath(full_path))
        if os.path.isdir(full_path):
            rel += "/"
        return self.spec.match_file(rel)


def load_ignore_rules(path: str) -> IgnoreRules:
    """
    Compile the nearest .gitignore at or above `path` (file or directory).

    The rules are anchored at the directory holding that .gitignore so that
    patterns like `docs/drafts/` still apply when a subdirectory is scanned.
    Without a readable .gitignore, the rules only skip `.git/`.
    """
    base = os.path.abspath(path or ".")
    if os.path.isfile(base):
        base = os.path.dirname(base)

    cur = base
    while True:
        candidate = os.path.join(cur, ".gitignore")
        if os.path.isfile(candidate):
            try:
                with open(candidate, "r", encoding="utf-8", errors="ignore") as f:
                    lines = f.read().splitlines()
            except OSError:
                lines = None
            if lines is not None:
                return IgnoreRules(_compile(ALWAYS_IGNORED + lines), cur)
        parent = os.path.dirname(cur)
        if parent == cur:
            break
        cur = parent
    return IgnoreRules(_compile(ALWAYS_IGNORED), base)


def _compile(lines: List[str]) -> pathspec.PathSpec:
    try:
        return pathspec.PathSpec.from_lines("gitwildmatch", lines)
    except Exception:
        return pathspec.PathSpec.from_lines("gitwildmatch", ALWAYS_IGNORED)
