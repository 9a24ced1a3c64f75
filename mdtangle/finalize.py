# mdtangle/finalize.py
"""
Turn an expanded block into the text of an output file.

Whenever the next line does not directly follow the previous one in the same
source document, a line directive is written first so compilers report errors
against the markdown source. The directive syntax depends on the block's
language. BUILTIN_DIRECTIVES is read-only; callers that need more languages
pass their own table (see TangleOptions.register_directive).
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

from .models import Block

DirectiveFormatter = Callable[[str, int], str]


def c_directive(document: str, number: int) -> str:
    return f'#line {number} "{document}"\n'


def go_directive(document: str, number: int) -> str:
    return f"//line {document}:{number}\n"


BUILTIN_DIRECTIVES: Mapping[str, DirectiveFormatter] = MappingProxyType({
    "go": go_directive,
    "golang": go_directive,
    "c": c_directive,
    "h": c_directive,
    "cc": c_directive,
    "cpp": c_directive,
    "c++": c_directive,
    "cxx": c_directive,
    "hpp": c_directive,
    # #line is a comment to the shell, but keeps the source position visible.
    "sh": c_directive,
    "bash": c_directive,
    "zsh": c_directive,
    "shell": c_directive,
})

_FALLBACKS: Mapping[str, DirectiveFormatter] = MappingProxyType({"c": c_directive})


def directive_for(
    language: str,
    directives: Optional[Mapping[str, DirectiveFormatter]] = None,
    default_directive: Optional[str] = None,
) -> Optional[DirectiveFormatter]:
    table = BUILTIN_DIRECTIVES if directives is None else directives
    formatter = table.get(language.lower())
    if formatter is None and default_directive is not None:
        formatter = _FALLBACKS.get(default_directive)
    return formatter


def finalize_block(
    block: Block,
    *,
    directives: Optional[Mapping[str, DirectiveFormatter]] = None,
    default_directive: Optional[str] = None,
) -> str:
    """Concatenate the block's lines, inserting directives at provenance jumps."""
    parts = []
    document: Optional[str] = None
    number = 0
    for line in block:
        if line.number != number + 1 or line.document != document:
            formatter = directive_for(line.language, directives, default_directive)
            if formatter is not None:
                parts.append(formatter(line.document, line.number))
        parts.append(line.text)
        document = line.document
        number = line.number
    return "".join(parts)
