"""Detect pending-work markers (TODO / FIXME) in line comments."""

from __future__ import annotations

import re

from ..context import AnalysisContext
from ..issues import Issue, IssueKind, make_issue

# Purely lexical: markers inside string literals match as well.
PENDING_WORK_RE = re.compile(rb"//[ \t]*(TODO|FIXME)\b[: \t]*([^\r\n]*)", re.IGNORECASE)


def run_pending_work(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for match in PENDING_WORK_RE.finditer(ctx.source_bytes):
        marker = match.group(1).decode("ascii")
        note = match.group(2).decode("utf-8", errors="replace").strip()
        issues.append(
            make_issue(
                ctx,
                IssueKind.PENDING_WORK,
                match.start(),
                f"Found {marker} comment: {note or 'No description provided'}",
            )
        )
    return issues
