from dataclasses import dataclass, replace
from typing import List


@dataclass(frozen=True)
class Line:
    """One physical line of a code region, tagged with where it came from."""

    text: str       # raw text including its line terminator
    document: str   # identifier of the source document
    number: int     # 1-based line number within the document
    language: str = ""

    def with_prefix(self, prefix: str) -> "Line":
        """Return a copy indented by `prefix`; bare line terminators stay bare."""
        if not prefix or self.text in ("\n", "\r\n"):
            return self
        return replace(self, text=prefix + self.text)


# A block is an ordered run of lines. Its name or target path is the registry
# key it is stored under, never part of the value itself.
Block = List[Line]
