from typing import Optional, Sequence

from .tangle import TangleError


class CyclicMacroReferenceError(TangleError):
    """A macro references itself, directly or through other macros."""

    def __init__(self, path: Sequence[str], document: Optional[str] = None, line: Optional[int] = None):
        self.path = list(path)
        self.document = document
        self.line = line
        super().__init__("Cyclic reference: " + " -> ".join(self.path))

    @property
    def name(self) -> str:
        return self.path[-1]
