# mdtangle/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .models import Block, Diagnostic, DiagnosticKind


@dataclass
class TangleContext:
    """
    Registries for one tangle run.

    `blocks` maps macro names and `files` maps output paths to their blocks.
    Both are filled while scanning and only read while expanding. Diagnostics
    raised anywhere during the run are collected in `diagnostics`.
    """

    blocks: Dict[str, Block] = field(default_factory=dict)
    files: Dict[str, Block] = field(default_factory=dict)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def define_block(self, name: str, block: Block, *, append: bool = False) -> None:
        _store(self.blocks, name, block, append)

    def define_file(self, path: str, block: Block, *, append: bool = False) -> None:
        _store(self.files, path, block, append)

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        *,
        name: Optional[str] = None,
        document: Optional[str] = None,
        line: Optional[int] = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, message=message, name=name, document=document, line=line)
        self.diagnostics.append(diagnostic)
        return diagnostic


def _store(registry: Dict[str, Block], key: str, block: Block, append: bool) -> None:
    if not key:
        return
    if append and key in registry:
        registry[key] = registry[key] + block
    else:
        registry[key] = list(block)
