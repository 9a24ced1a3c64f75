from .core import Output, WriteSummary, write_outputs

__all__ = ["Output", "WriteSummary", "write_outputs"]
