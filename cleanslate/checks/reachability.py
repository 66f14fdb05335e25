"""Statements that can never run because they follow a return in the same block."""

from __future__ import annotations

from ..context import AnalysisContext
from ..issues import Issue, IssueKind, make_issue
from ..tree import NodeKind


def run_unreachable_code(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    for node in ctx.iter_nodes():
        if node.kind is not NodeKind.BLOCK or len(node.children) <= 1:
            continue

        return_line = None
        for statement in node.children:
            if return_line is not None:
                # only the first unreachable statement of a block is reported
                issues.append(
                    make_issue(
                        ctx,
                        IssueKind.UNREACHABLE_CODE,
                        statement.start,
                        f"Unreachable code after return statement at line {return_line}",
                    )
                )
                break

            if statement.kind is NodeKind.RETURN:
                return_line = ctx.line_of(statement)
    return issues
