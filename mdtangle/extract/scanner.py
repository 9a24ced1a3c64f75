# mdtangle/extract/scanner.py
from __future__ import annotations

import io
import logging
from typing import Iterable, Optional

from .._logging import resolve_logger
from ..config import TangleOptions
from ..context import TangleContext
from ..errors import DocumentError
from ..models import Block, DiagnosticKind, Header, Line
from .header import match_fence_open, parse_header


def scan_document(
    stream: Iterable[str],
    document: str,
    context: TangleContext,
    *,
    options: Optional[TangleOptions] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> None:
    """
    Scan one document and register its fenced code blocks in `context`.

    Lines outside fences are ignored. When a fence closes, its body is stored
    under the header's macro name and/or target path, replacing what was there
    or appending to it for `+=` headers. Unrecognised fences are skipped.

    An unterminated fence at end of input is never registered. A read failure
    raises DocumentError; blocks that closed before it stay registered.
    """
    options = options or TangleOptions()
    lg = resolve_logger(logger=logger, enabled=log, name=__name__)

    header: Optional[Header] = None
    opened_at = 0
    block: Block = []

    number = 0
    lines = iter(stream)
    while True:
        try:
            text = next(lines)
        except StopIteration:
            break
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(document, f"read failed after line {number}: {e}") from e
        number += 1

        if header is not None:
            text = text.removeprefix(header.fence.prefix)
            if header.fence.closes(text):
                _commit(context, header, block, lg)
                header = None
                block = []
                continue
            block.append(Line(text=text, document=document, number=number, language=header.language))
            continue

        if match_fence_open(text) is not None:
            header = parse_header(text)
            opened_at = number
            block = []
            lg.debug(
                "%s:%d: opened fence (file=%r, name=%r, append=%s, lang=%r)",
                document, number, header.file, header.name, header.append, header.language,
            )

    if header is not None:
        lg.debug("%s:%d: fence never closed; dropping %d line(s)", document, opened_at, len(block))
        if options.warn_unterminated and header.recognized:
            label = header.name or header.file
            context.report(
                DiagnosticKind.UNTERMINATED_FENCE,
                f"Block {label} opened at {document}:{opened_at} is never closed.",
                name=label,
                document=document,
                line=opened_at,
            )


def scan_text(
    text: str,
    document: str,
    context: TangleContext,
    **kwargs,
) -> None:
    """Convenience wrapper scanning an in-memory document."""
    scan_document(io.StringIO(text, newline=""), document, context, **kwargs)


def _commit(context: TangleContext, header: Header, block: Block, lg) -> None:
    if header.file:
        context.define_file(header.file, block, append=header.append)
        lg.debug("registered file %s (%d line(s), append=%s)", header.file, len(block), header.append)
    if header.name:
        context.define_block(header.name, block, append=header.append)
        lg.debug("registered block %r (%d line(s), append=%s)", header.name, len(block), header.append)
