# mdtangle/utils/discover.py
import fnmatch
import os
from typing import Iterable, List, Sequence, Set

from ..config import DEFAULT_PATTERNS
from .gitignore import load_ignore_rules


def discover_documents(root: str, patterns: Sequence[str] = DEFAULT_PATTERNS) -> List[str]:
    """
    Walk `root` and return the documents matching `patterns`, skipping paths
    ignored by the nearest .gitignore. Directories are visited in sorted order
    so the scan order (and thus replace/append results) is reproducible.

    Every directory is entered at most once, even when symlinks lead back to
    it, so no document is scanned twice.
    """
    rules = load_ignore_rules(root)
    found: List[str] = []
    visited: Set[str] = set()

    def walk(current: str) -> None:
        real = os.path.realpath(current)
        if real in visited:
            return
        visited.add(real)
        try:
            names = sorted(os.listdir(current))
        except OSError:
            return
        dirs, files = [], []
        for name in names:
            full = os.path.join(current, name)
            if rules.matches(full):
                continue
            if os.path.isdir(full):
                dirs.append(full)
            elif any(fnmatch.fnmatch(name, pat) for pat in patterns):
                files.append(full)
        found.extend(files)
        for d in dirs:
            walk(d)

    walk(root)
    return found


def expand_inputs(paths: Iterable[str], patterns: Sequence[str] = DEFAULT_PATTERNS) -> List[str]:
    """Replace directory entries of `paths` with the documents found beneath them."""
    docs: List[str] = []
    for p in paths:
        if os.path.isdir(p):
            docs.extend(discover_documents(p, patterns))
        else:
            docs.append(p)
    return docs
