from .document import DocumentError
from .expand import CyclicMacroReferenceError
from .path import PathViolation
from .tangle import TangleError
from .write import WriteError

__all__ = [
    "TangleError",
    "DocumentError",
    "CyclicMacroReferenceError",
    "WriteError",
    "PathViolation",
]
