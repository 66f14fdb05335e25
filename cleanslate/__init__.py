"""
CleanSlate - code hygiene analysis for JavaScript sources.

Provides a single-file analysis engine built on tree-sitter:
- Pending-work (TODO/FIXME) comments
- Unused variable and function declarations
- Long functions and deeply nested control flow
- Unreachable statements after a return

plus the batch scanner, markdown reporter and inline annotator around it.
"""

from cleanslate.context import AnalysisContext, AnalysisSettings
from cleanslate.finder import HygieneFinder, find_issues, scan_source
from cleanslate.issues import Issue, IssueKind, sort_issues
from cleanslate.scanner import (
    ScanError,
    ScanResult,
    find_source_files,
    scan_directory,
    scan_file,
    scan_files,
)
from cleanslate.tree import LineIndex, NodeKind, SyntaxNode, adapt

__all__ = [
    # Engine
    "HygieneFinder",
    "find_issues",
    "scan_source",
    "AnalysisContext",
    "AnalysisSettings",

    # Data model
    "Issue",
    "IssueKind",
    "sort_issues",

    # Tree adapter
    "LineIndex",
    "NodeKind",
    "SyntaxNode",
    "adapt",

    # Batch scanning
    "ScanError",
    "ScanResult",
    "find_source_files",
    "scan_directory",
    "scan_file",
    "scan_files",
]
