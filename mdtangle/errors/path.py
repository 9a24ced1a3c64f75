from .write import WriteError


class PathViolation(WriteError):
    """An output path resolves outside the output directory."""
