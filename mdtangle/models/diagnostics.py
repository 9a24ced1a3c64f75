from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DiagnosticKind(str, Enum):
    UNDEFINED_BLOCK_REFERENCE = "undefined_block_reference"
    CYCLIC_MACRO_REFERENCE = "cyclic_macro_reference"
    UNTERMINATED_FENCE = "unterminated_fence"
    DOCUMENT_ERROR = "document_error"
    WRITE_ERROR = "write_error"


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while tangling, kept for the caller to render."""

    kind: DiagnosticKind
    message: str
    name: Optional[str] = None
    document: Optional[str] = None
    line: Optional[int] = None

    @property
    def is_error(self) -> bool:
        return self.kind in (DiagnosticKind.DOCUMENT_ERROR, DiagnosticKind.WRITE_ERROR)
