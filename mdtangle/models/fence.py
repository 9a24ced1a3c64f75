from dataclasses import dataclass


@dataclass(frozen=True)
class FenceDescriptor:
    """The opening run of 3+ backticks or 3+ tildes of a code region."""
    char: str             # '`' or '~'
    length: int           # run length (>=3)
    prefix: str = ""      # whitespace before the fence on the opening line

    def closes(self, text: str) -> bool:
        """True when `text` (block prefix already removed) closes this fence."""
        stripped = text.strip()
        if len(stripped) < self.length:
            return False
        return stripped == self.char * len(stripped)


@dataclass(frozen=True)
class Header:
    """Classification of a fence-opening line."""
    fence: FenceDescriptor
    file: str = ""        # target file path, "" unless a file block
    name: str = ""        # macro name, "" unless a named block
    append: bool = False  # trailing "+=" on the header
    language: str = ""

    @property
    def recognized(self) -> bool:
        return bool(self.file or self.name)
