"""Structural metrics: function length and control-flow nesting depth."""

from __future__ import annotations

from typing import Optional

from ..context import AnalysisContext
from ..issues import Issue, IssueKind, make_issue
from ..tree import CONTROL_FLOW_KINDS, FUNCTION_KINDS, NodeKind, SyntaxNode
from ..utils import iter_with_parent

# Slots of a control-flow construct that count as one level deeper.
NESTED_SLOTS = frozenset({"body", "consequence", "alternative"})

_FUNCTION_LABELS = {
    NodeKind.FUNCTION_DECLARATION: "Function",
    NodeKind.FUNCTION_EXPRESSION: "Function",
    NodeKind.ARROW_FUNCTION: "Arrow function",
    NodeKind.METHOD: "Method",
}


def run_long_functions(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    limit = ctx.settings.max_function_length
    for node, parent in iter_with_parent(ctx.root):
        if node.kind not in FUNCTION_KINDS:
            continue

        length = ctx.lines.line_of(node.end) - ctx.line_of(node)
        if length <= limit:
            continue

        name = function_name(node, parent) or "anonymous"
        issues.append(
            make_issue(
                ctx,
                IssueKind.LONG_FUNCTION,
                node.start,
                f"{_FUNCTION_LABELS[node.kind]} '{name}' is too long ({length} lines)",
            )
        )
    return issues


def run_deep_nesting(ctx: AnalysisContext) -> list[Issue]:
    issues: list[Issue] = []
    limit = ctx.settings.max_nesting_level
    stack: list[tuple[SyntaxNode, int]] = [(ctx.root, 0)]
    while stack:
        node, level = stack.pop()
        is_control_flow = node.kind in CONTROL_FLOW_KINDS
        if is_control_flow and level >= limit:
            issues.append(
                make_issue(
                    ctx,
                    IssueKind.DEEP_NESTING,
                    node.start,
                    f"Code is nested too deeply ({level + 1} levels)",
                )
            )

        for child in reversed(node.children):
            if is_control_flow and child.slot in NESTED_SLOTS:
                stack.append((child, level + 1))
            else:
                stack.append((child, level))
    return issues


def function_name(node: SyntaxNode, parent: Optional[SyntaxNode]) -> Optional[str]:
    """
    Best-effort name for a function-like node.

    Declarations and methods carry their own name. Expressions are named
    after the binding they initialize (``const handler = () => ...``,
    ``obj.handler = function () ...``, ``{ handler: () => ... }``), falling
    back to the expression's own name if it has one.
    """
    if node.kind in (NodeKind.FUNCTION_DECLARATION, NodeKind.METHOD):
        return _leaf_text(node.child("name"))

    if parent is not None:
        if parent.kind is NodeKind.VARIABLE_DECLARATOR and node.slot == "value":
            name = _leaf_text(parent.child("name"))
            if name:
                return name
        elif parent.kind is NodeKind.ASSIGNMENT and node.slot == "right":
            target = parent.child("left")
            if target is not None and target.type == "member_expression":
                target = target.child("property")
            name = _leaf_text(target)
            if name:
                return name
        elif parent.kind is NodeKind.PROPERTY and node.slot == "value":
            name = _leaf_text(parent.child("key"))
            if name:
                return name

    return _leaf_text(node.child("name"))


def _leaf_text(node: Optional[SyntaxNode]) -> Optional[str]:
    if node is None or node.children:
        return None
    return node.text or None
