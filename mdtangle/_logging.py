"""
Opt-in tracing for the scanner and the expander.

scan_document() and expand_block() accept `logger=` and `log=`. Unless the
caller hands in a logger or sets `log=True`, their trace calls land on a
NoopLogger, so tangling a large document costs no formatting work and the
library never writes to stdout/stderr on its own:

    scan_text(doc, "intro.md", ctx)                      # silent
    scan_text(doc, "intro.md", ctx, log=True)            # mdtangle.extract.scanner, DEBUG
    expand_block(block, ctx, logger=my_logger)           # your logger, your level
"""
from __future__ import annotations

import logging


class NoopLogger:
    """Stands in for a Logger when tracing is off; only the methods mdtangle calls."""

    def debug(self, *args, **kwargs):  # type: ignore[no-untyped-def]
        pass

    warning = debug


def resolve_logger(
    logger: logging.Logger | None = None,
    *,
    enabled: bool = False,
    name: str = "mdtangle",
) -> logging.Logger | NoopLogger:
    """
    Pick the trace target for one scan or expansion call.

    An explicit `logger` wins and keeps its own level. With `enabled`, the
    module logger `name` is opened at DEBUG; records propagate to the root
    handlers (the CLI's, or pytest's caplog).
    """
    if logger is not None:
        return logger
    if not enabled:
        return NoopLogger()
    lg = logging.getLogger(name)
    lg.setLevel(logging.DEBUG)
    return lg
