"""Insert explanatory comments above the lines that carry issues."""

from __future__ import annotations

import logging
from collections import defaultdict
from pathlib import Path
from typing import Iterable

from .issues import Issue, IssueKind

log = logging.getLogger(__name__)

COMMENT_PREFIX = "// CLEAN-SLATE: "

_EXPLANATIONS = {
    IssueKind.UNUSED_FUNCTION: "This function is unused. Consider removing it or documenting why it's needed.",
    IssueKind.UNUSED_VARIABLE: "This variable is unused. Consider removing it or documenting why it's needed.",
    IssueKind.LONG_FUNCTION: "This function is too long. Consider breaking it down into smaller, more focused functions.",
    IssueKind.DEEP_NESTING: "This code is deeply nested. Consider extracting some logic into separate functions or using early returns to reduce nesting.",
    IssueKind.UNREACHABLE_CODE: "This code is unreachable (after a return statement). It should be removed.",
    IssueKind.PENDING_WORK: "Don't forget to address this TODO/FIXME comment. Consider adding more context or a deadline.",
}


def comment_for(issue: Issue) -> str:
    return COMMENT_PREFIX + _EXPLANATIONS.get(issue.kind, issue.message)


def annotate_source(text: str, issues: Iterable[Issue]) -> str:
    """
    Return ``text`` with one comment inserted above each issue's line.

    Insertions happen bottom-up so earlier ones do not shift the lines of
    later ones. The comment copies the indentation of the line it explains.
    Issues pointing outside the file are skipped.
    """
    lines = text.split("\n")
    for issue in sorted(issues, key=lambda i: i.line, reverse=True):
        index = issue.line - 1
        if index < 0 or index >= len(lines):
            continue
        target = lines[index]
        indent = target[: len(target) - len(target.lstrip())]
        ending = "\r" if target.endswith("\r") else ""
        lines.insert(index, indent + comment_for(issue) + ending)
    return "\n".join(lines)


def add_inline_comments(issues: Iterable[Issue]) -> int:
    """Annotate every file that has issues in place. Returns the number of files modified."""
    by_file: dict[str, list[Issue]] = defaultdict(list)
    for issue in issues:
        by_file[issue.file_path].append(issue)

    modified = 0
    for file_path, file_issues in sorted(by_file.items()):
        path = Path(file_path)
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        annotated = annotate_source(text, file_issues)
        if annotated == text:
            continue
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(annotated)
        log.debug("annotated %d issues in %s", len(file_issues), path)
        modified += 1
    return modified
