"""Mutable state written by the parser's semantic actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class CompilerState:
    """Symbol table, HTML fragment buffer and captured head title.

    One instance lives for exactly one compilation.
    """

    symbols: Dict[str, str] = field(default_factory=dict)
    fragments: List[str] = field(default_factory=list)
    title: Optional[str] = None

    def declare(self, name: str, value: str) -> None:
        # Redeclaration overwrites the previous value.
        self.symbols[name] = value

    def is_declared(self, name: str) -> bool:
        return name in self.symbols

    def emit(self, fragment: str) -> None:
        self.fragments.append(fragment)
