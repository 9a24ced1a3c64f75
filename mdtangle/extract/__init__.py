from .header import match_fence_open, parse_header
from .scanner import scan_document, scan_text

__all__ = [
    "match_fence_open",
    "parse_header",
    "scan_document",
    "scan_text",
]
