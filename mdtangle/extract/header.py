# mdtangle/extract/header.py
from __future__ import annotations

import re
from typing import Optional

from ..models.fence import FenceDescriptor, Header

_FENCE = r"(?P<fence>`{3,}|~{3,})"

# ```go "macro name" +=
_NAMED_BLOCK_RE = re.compile(
    rf'^{_FENCE}\s?(?P<lang>[\w+]*)\s*"(?P<name>.+)"\s*(?P<append>\+=)?$'
)
# ```go path/to/main.go +=
_FILE_BLOCK_RE = re.compile(
    rf"^{_FENCE}\s?(?P<lang>[\w+]+)\s+(?P<path>[\w./-]+)\s*(?P<append>\+=)?$"
)
# Any line starting (after optional indentation) with a qualifying fence run.
_FENCE_OPEN_RE = re.compile(r"^(?P<prefix>[ \t]*)(?P<fence>`{3,}|~{3,})")


def match_fence_open(text: str) -> Optional[FenceDescriptor]:
    """Return the fence opened by `text`, or None when it is not a fence line."""
    m = _FENCE_OPEN_RE.match(text)
    if not m:
        return None
    fence = m.group("fence")
    return FenceDescriptor(char=fence[0], length=len(fence), prefix=m.group("prefix"))


def parse_header(text: str) -> Header:
    """
    Classify a fence-opening line as a named macro block or a target file block.

    The named-block form is tried first. A line matching neither form still
    yields a Header (with empty name and file) so the caller can skip the body.
    """
    fence = match_fence_open(text) or FenceDescriptor(char="`", length=3)
    line = text.strip()

    m = _NAMED_BLOCK_RE.match(line)
    if m:
        return Header(
            fence=fence,
            name=m.group("name"),
            append=m.group("append") is not None,
            language=m.group("lang"),
        )
    m = _FILE_BLOCK_RE.match(line)
    if m:
        return Header(
            fence=fence,
            file=m.group("path"),
            append=m.group("append") is not None,
            language=m.group("lang"),
        )
    return Header(fence=fence)
