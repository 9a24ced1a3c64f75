from .blocks import Block, Line
from .diagnostics import Diagnostic, DiagnosticKind
from .fence import FenceDescriptor, Header

__all__ = ["Block", "Line", "Diagnostic", "DiagnosticKind", "FenceDescriptor", "Header"]
