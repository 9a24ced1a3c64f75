class TangleError(Exception):
    """Base class for every error raised by mdtangle."""
