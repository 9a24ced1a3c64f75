# mdtangle/expand.py
from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from ._logging import resolve_logger
from .context import TangleContext
from .errors import CyclicMacroReferenceError
from .models import Block, DiagnosticKind

# A whole line holding one macro reference, in either marker syntax:
#     <<<name>>>
#     //<name>>>
_REFERENCE_RE = re.compile(r"^(?P<indent>[ \t]*)(?:<<<|//<)(?P<name>.+)>>>\s*$")


def match_reference(text: str) -> Optional[Tuple[str, str]]:
    """Return (indent, name) when `text` is a macro reference line."""
    m = _REFERENCE_RE.match(text)
    if not m:
        return None
    return m.group("indent"), m.group("name")


def expand_block(
    block: Block,
    context: TangleContext,
    prefix: str = "",
    *,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> Block:
    """
    Replace every macro reference in `block` with the expanded macro body.

    The reference's own indentation is added to `prefix` for every line the
    macro expands to, so nested references compose their indentation. A
    reference to an unknown macro is kept as a literal line and reported.

    Raises CyclicMacroReferenceError if a macro ends up referencing itself.
    """
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)
    return _expand(block, context, prefix, [], lg)


def _expand(block: Block, context: TangleContext, prefix: str, path: List[str], lg) -> Block:
    out: Block = []
    for line in block:
        ref = match_reference(line.text)
        if ref is None:
            out.append(line.with_prefix(prefix))
            continue

        indent, name = ref
        body = context.blocks.get(name)
        if body is None:
            lg.warning("Block named %s referenced but not defined.", name)
            context.report(
                DiagnosticKind.UNDEFINED_BLOCK_REFERENCE,
                f"Block named {name} referenced but not defined.",
                name=name,
                document=line.document,
                line=line.number,
            )
            out.append(line)
            continue

        if name in path:
            raise CyclicMacroReferenceError(
                path[path.index(name):] + [name], document=line.document, line=line.number,
            )
        path.append(name)
        try:
            out.extend(_expand(body, context, prefix + indent, path, lg))
        finally:
            path.pop()
    return out
