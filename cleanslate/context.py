"""Analysis context shared across checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from .tree import LineIndex, SyntaxNode
from .utils import iter_nodes

MAX_FUNCTION_LENGTH = 50  # lines between a function's first and last line
MAX_NESTING_LEVEL = 3


@dataclass(frozen=True)
class AnalysisSettings:
    max_function_length: int = MAX_FUNCTION_LENGTH
    max_nesting_level: int = MAX_NESTING_LEVEL


@dataclass(frozen=True)
class AnalysisContext:
    """Immutable input handed to every check for one file."""
    root: SyntaxNode
    source_bytes: bytes
    file_path: str
    lines: LineIndex
    settings: AnalysisSettings = field(default_factory=AnalysisSettings)

    def line_of(self, node: SyntaxNode) -> int:
        return self.lines.line_of(node.start)

    def iter_nodes(self) -> Iterator[SyntaxNode]:
        return iter_nodes(self.root)
