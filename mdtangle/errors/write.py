from .tangle import TangleError


class WriteError(TangleError):
    """An output file could not be written."""
