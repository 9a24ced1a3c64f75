# mdtangle/utils/__init__.py
from .discover import discover_documents, expand_inputs
from .gitignore import IgnoreRules, load_ignore_rules

__all__ = [
    "discover_documents",
    "expand_inputs",
    "IgnoreRules",
    "load_ignore_rules",
]
