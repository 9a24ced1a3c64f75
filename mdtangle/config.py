# mdtangle/config.py
from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .finalize import BUILTIN_DIRECTIVES, DirectiveFormatter

DEFAULT_ENCODING = "utf-8"
DEFAULT_PATTERNS: Tuple[str, ...] = ("*.md",)
DIRECTIVE_CHOICES = ("none", "c")


def is_known_encoding(name: str) -> bool:
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True


@dataclass
class TangleOptions:
    """Knobs shared by the scanner, finalizer and orchestrator."""

    encoding: str = DEFAULT_ENCODING
    # Directive style for languages without a registered one: None emits
    # nothing, "c" falls back to a C-style #line directive.
    default_directive: Optional[str] = None
    warn_unterminated: bool = True
    # Globs used when a directory is passed as a document.
    patterns: Tuple[str, ...] = DEFAULT_PATTERNS
    # Language tag (lowercase) -> directive formatter, private to these options.
    directives: Dict[str, DirectiveFormatter] = field(default_factory=lambda: dict(BUILTIN_DIRECTIVES))

    def __post_init__(self) -> None:
        if self.default_directive == "none":
            self.default_directive = None
        if self.default_directive not in (None, "c"):
            raise ValueError("default_directive must be one of {None, 'none', 'c'}")
        if not is_known_encoding(self.encoding):
            raise ValueError(f"unknown encoding: {self.encoding}")
        self.patterns = tuple(self.patterns)
        self.directives = {lang.lower(): fmt for lang, fmt in self.directives.items()}

    def register_directive(self, language: str, formatter: Optional[DirectiveFormatter]) -> None:
        """Set (or with None, remove) the directive formatter for `language`."""
        key = language.lower()
        if formatter is None:
            self.directives.pop(key, None)
        else:
            self.directives[key] = formatter
