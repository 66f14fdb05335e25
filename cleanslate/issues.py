"""Issue data model for hygiene findings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, TYPE_CHECKING

if TYPE_CHECKING:
    from .context import AnalysisContext


class IssueKind(Enum):
    UNUSED_VARIABLE = "UnusedVariable"
    UNUSED_FUNCTION = "UnusedFunction"
    LONG_FUNCTION = "LongFunction"
    DEEP_NESTING = "DeepNesting"
    UNREACHABLE_CODE = "UnreachableCode"
    PENDING_WORK = "PendingWork"
    SYNTAX_ERROR = "SyntaxError"

    @property
    def label(self) -> str:
        """Human-readable name used in reports and console output."""
        return _LABELS[self]


_LABELS = {
    IssueKind.UNUSED_VARIABLE: "Unused Variable",
    IssueKind.UNUSED_FUNCTION: "Unused Function",
    IssueKind.LONG_FUNCTION: "Long Function",
    IssueKind.DEEP_NESTING: "Deeply Nested Code",
    IssueKind.UNREACHABLE_CODE: "Dead Code",
    IssueKind.PENDING_WORK: "TODO/FIXME Comment",
    IssueKind.SYNTAX_ERROR: "Syntax Error",
}


@dataclass(frozen=True)
class Issue:
    """A single hygiene problem anchored at a source line."""

    kind: IssueKind
    file_path: str
    line: int
    message: str
    snippet: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "file_path": self.file_path,
            "line": self.line,
            "message": self.message,
            "snippet": self.snippet,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Issue:
        return cls(
            kind=IssueKind(data["kind"]),
            file_path=data["file_path"],
            line=int(data["line"]),
            message=data["message"],
            snippet=data.get("snippet", ""),
        )


def make_issue(ctx: AnalysisContext, kind: IssueKind, offset: int, message: str) -> Issue:
    """Create an Issue anchored at the line containing the byte offset."""
    return issue_at_line(ctx, kind, ctx.lines.line_of(offset), message)


def issue_at_line(ctx: AnalysisContext, kind: IssueKind, line: int, message: str) -> Issue:
    return Issue(
        kind=kind,
        file_path=ctx.file_path,
        line=line,
        message=message,
        snippet=ctx.lines.snippet(line),
    )


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Order issues by file, then line; stable for issues sharing a line."""
    return sorted(issues, key=lambda issue: (issue.file_path, issue.line))
