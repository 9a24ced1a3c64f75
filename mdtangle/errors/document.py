from .tangle import TangleError


class DocumentError(TangleError):
    """A source document could not be opened or read."""

    def __init__(self, document: str, message: str):
        super().__init__(f"{document}: {message}")
        self.document = document
