# mdtangle/core.py
import io
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .config import TangleOptions
from .context import TangleContext
from .errors import CyclicMacroReferenceError, DocumentError
from .expand import expand_block
from .extract import scan_document
from .finalize import finalize_block
from .models import Diagnostic, DiagnosticKind
from .utils.discover import expand_inputs

_logger = logging.getLogger(__name__)


@dataclass
class TangleResult:
    """Final text per output path plus everything reported along the way."""

    outputs: Dict[str, str] = field(default_factory=dict)
    context: TangleContext = field(default_factory=TangleContext)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self.context.diagnostics


def tangle_documents(
    paths: Iterable[str],
    *,
    options: Optional[TangleOptions] = None,
    context: Optional[TangleContext] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> TangleResult:
    """
    Scan every document in `paths`, then build the text of every target file.

    Every document is scanned before anything is expanded, since a macro may
    be used in one document and defined in a later one. A document that
    cannot be opened or read is reported and skipped; the rest still count.
    """
    options = options or TangleOptions()
    context = context if context is not None else TangleContext()

    for path in expand_inputs(paths, options.patterns):
        _scan_path(path, context, options, logger, log)

    return TangleResult(outputs=_build_outputs(context, options, logger, log), context=context)


def tangle_text(
    text: str,
    document: str = "<string>",
    *,
    options: Optional[TangleOptions] = None,
    context: Optional[TangleContext] = None,
    logger: Optional[logging.Logger] = None,
    log: bool = False,
) -> TangleResult:
    """Tangle a single in-memory document."""
    options = options or TangleOptions()
    context = context if context is not None else TangleContext()
    scan_document(
        io.StringIO(text, newline=""), document, context,
        options=options, logger=logger, log=log,
    )
    return TangleResult(outputs=_build_outputs(context, options, logger, log), context=context)


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """One line of human-readable text for a diagnostic."""
    if diagnostic.is_error:
        return f"error: {diagnostic.message}"
    where = ""
    if diagnostic.document and diagnostic.line:
        where = f"{diagnostic.document}:{diagnostic.line}: "
    return f"{where}Warning: {diagnostic.message}"


def _scan_path(path: str, context: TangleContext, options: TangleOptions, lg, log: bool) -> None:
    try:
        # newline="" keeps CRLF terminators so output stays byte-for-byte
        with open(path, "r", encoding=options.encoding, newline="") as f:
            scan_document(f, path, context, options=options, logger=lg, log=log)
    except DocumentError as e:
        _logger.info("%s", e)
        context.report(DiagnosticKind.DOCUMENT_ERROR, str(e), document=path)
    except (OSError, LookupError) as e:
        # LookupError: unknown codec
        _logger.info("Could not open %s: %s", path, e)
        context.report(DiagnosticKind.DOCUMENT_ERROR, f"{path}: {e}", document=path)


def _build_outputs(context: TangleContext, options: TangleOptions, lg, log: bool) -> Dict[str, str]:
    outputs: Dict[str, str] = {}
    for path, block in context.files.items():
        try:
            expanded = expand_block(block, context, logger=lg, log=log)
        except CyclicMacroReferenceError as e:
            _logger.info("Skipping %s: %s", path, e)
            context.report(
                DiagnosticKind.CYCLIC_MACRO_REFERENCE,
                f"{e} (while building {path})",
                name=e.name,
                document=e.document,
                line=e.line,
            )
            continue
        outputs[path] = finalize_block(
            expanded, directives=options.directives, default_directive=options.default_directive,
        )
    return outputs
