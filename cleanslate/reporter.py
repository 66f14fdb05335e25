"""Markdown report of a scan's issues."""

from __future__ import annotations

import logging
import os
from collections import Counter, defaultdict
from pathlib import Path
from typing import Iterable, Optional

from .issues import Issue, IssueKind

log = logging.getLogger(__name__)

REPORT_FILENAME = "report.md"


def _relative(path: str | Path, start: Path) -> str:
    return os.path.relpath(str(path), str(start))


def _is_are(count: int) -> str:
    return "are" if count > 1 else "is"


def _recommendations(counts: Counter) -> list[str]:
    lines = []
    unused_functions = counts[IssueKind.UNUSED_FUNCTION]
    unused_variables = counts[IssueKind.UNUSED_VARIABLE]
    if unused_functions or unused_variables:
        lines.append(
            f"- **Remove unused code**: There {_is_are(unused_functions + unused_variables)} "
            f"{unused_functions} unused function(s) and {unused_variables} unused variable(s). "
            "Removing them will make your code cleaner and more maintainable."
        )

    count = counts[IssueKind.LONG_FUNCTION]
    if count:
        lines.append(
            f"- **Refactor long functions**: There {_is_are(count)} {count} function(s) that are "
            "too long. Consider breaking them down into smaller, more focused functions."
        )

    count = counts[IssueKind.DEEP_NESTING]
    if count:
        lines.append(
            f"- **Simplify nested code**: There {_is_are(count)} {count} instance(s) of deeply "
            "nested code. Consider extracting some logic into separate functions or using early "
            "returns to reduce nesting."
        )

    count = counts[IssueKind.UNREACHABLE_CODE]
    if count:
        lines.append(
            f"- **Remove unreachable code**: There {_is_are(count)} {count} instance(s) of code "
            "that will never execute. Remove this code to improve clarity."
        )

    count = counts[IssueKind.PENDING_WORK]
    if count:
        lines.append(
            f"- **Address TODO comments**: There {_is_are(count)} {count} TODO/FIXME comment(s) "
            "in your code. Consider addressing these issues."
        )

    count = counts[IssueKind.SYNTAX_ERROR]
    if count:
        lines.append(
            f"- **Fix syntax errors**: {count} file(s) could not be parsed and were not analyzed "
            "any further."
        )
    return lines


def render_report(
    issues: Iterable[Issue],
    scanned_directory: str | Path,
    cwd: Optional[Path] = None,
) -> str:
    """Render issues as markdown, grouped by file and sorted by line."""
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    issues = list(issues)

    by_file: dict[str, list[Issue]] = defaultdict(list)
    for issue in issues:
        by_file[issue.file_path].append(issue)
    counts = Counter(issue.kind for issue in issues)

    out = ["# CleanSlate Code Hygiene Report", ""]
    out += ["## Summary", ""]
    out.append(f"- **Directory scanned**: `{_relative(scanned_directory, cwd)}`")
    out.append(f"- **Total issues found**: {len(issues)}")
    out.append(f"- **Files with issues**: {len(by_file)}")
    out.append("")

    out += ["### Issues by Type", ""]
    for kind in IssueKind:
        if counts[kind]:
            out.append(f"- **{kind.label}**: {counts[kind]}")

    out += ["", "## Issues by File", ""]
    for file_path in sorted(by_file):
        out += [f"### {_relative(file_path, cwd)}", ""]
        out.append("| Line | Type | Message |")
        out.append("| ---- | ---- | ------- |")
        for issue in sorted(by_file[file_path], key=lambda i: i.line):
            message = issue.message.replace("|", "\\|")
            out.append(f"| {issue.line} | {issue.kind.label} | {message} |")
        out.append("")

    out += ["## Recommendations", ""]
    out += _recommendations(counts)

    out += ["", "## Next Steps", ""]
    out.append(
        "Run `clean-slate comment --inline` to add helpful comments to your code "
        "that explain these issues in more detail."
    )
    return "\n".join(out) + "\n"


def write_report(
    issues: Iterable[Issue],
    scanned_directory: str | Path,
    output: Optional[Path] = None,
) -> Path:
    output = Path(output) if output is not None else Path.cwd() / REPORT_FILENAME
    output.write_text(render_report(issues, scanned_directory), encoding="utf-8")
    log.debug("report written to %s", output)
    return output
