"""Coordinator that runs all hygiene checks against one parsed file."""

from __future__ import annotations

import logging
from typing import Optional

import tree_sitter

from .checks import CHECKS
from .context import AnalysisContext, AnalysisSettings
from .issues import Issue, IssueKind
from .tree import LineIndex, adapt, locate_syntax_error
from .utils import create_javascript_parser

log = logging.getLogger(__name__)


class HygieneFinder:
    """
    Runs the registered checks over one file.

    A tree containing a syntax error produces a single SyntaxError issue
    and no other checks are run for that file.
    """

    def __init__(
        self,
        tree: tree_sitter.Tree,
        source_bytes: bytes,
        file_path: str,
        settings: Optional[AnalysisSettings] = None,
    ):
        self.file_path = file_path
        self.lines = LineIndex(source_bytes)
        self.issues: list[Issue] = []

        error = locate_syntax_error(tree, source_bytes, self.lines)
        if error is not None:
            log.debug("syntax error in %s at line %d: %s", file_path, error.line, error.message)
            self.issues.append(
                Issue(
                    kind=IssueKind.SYNTAX_ERROR,
                    file_path=file_path,
                    line=error.line,
                    message=error.message,
                    snippet=self.lines.snippet(error.line),
                )
            )
            return

        self.context = AnalysisContext(
            root=adapt(tree.root_node, source_bytes),
            source_bytes=source_bytes,
            file_path=file_path,
            lines=self.lines,
            settings=settings or AnalysisSettings(),
        )
        self._run_checks()

    def _run_checks(self):
        for check in CHECKS:
            new_issues = check(self.context)
            for issue in new_issues:
                log.debug("hygiene: %s", issue)
            self.issues.extend(new_issues)


def find_issues(
    tree: tree_sitter.Tree,
    source_bytes: bytes,
    file_path: str,
    settings: Optional[AnalysisSettings] = None,
) -> list[Issue]:
    return HygieneFinder(tree, source_bytes, file_path, settings).issues


def scan_source(
    source_bytes: bytes,
    file_path: str,
    parser: Optional[tree_sitter.Parser] = None,
    settings: Optional[AnalysisSettings] = None,
) -> list[Issue]:
    """Parse JavaScript source and run every check on it."""
    parser = parser or create_javascript_parser()
    tree = parser.parse(source_bytes)
    return find_issues(tree, source_bytes, file_path, settings)
