from .commit import Output, WriteSummary, write_outputs
from .config import TangleOptions
from .context import TangleContext
from .core import TangleResult, render_diagnostic, tangle_documents, tangle_text
from .expand import expand_block, match_reference
from .finalize import BUILTIN_DIRECTIVES, finalize_block
from .models import Block, Diagnostic, DiagnosticKind, FenceDescriptor, Header, Line
from .utils import discover_documents
from .errors import (
    CyclicMacroReferenceError,
    DocumentError,
    PathViolation,
    TangleError,
    WriteError,
)
from .extract import parse_header, scan_document, scan_text

__version__ = "0.1.0"

__all__ = [
    "tangle_documents",
    "tangle_text",
    "render_diagnostic",
    "parse_header",
    "scan_document",
    "scan_text",
    "expand_block",
    "match_reference",
    "finalize_block",
    "BUILTIN_DIRECTIVES",
    "write_outputs",
    "discover_documents",
    "Output",
    "WriteSummary",
    "TangleOptions",
    "TangleContext",
    "TangleResult",
    "Block",
    "Line",
    "Diagnostic",
    "DiagnosticKind",
    "FenceDescriptor",
    "Header",
    "TangleError",
    "DocumentError",
    "CyclicMacroReferenceError",
    "WriteError",
    "PathViolation",
]
