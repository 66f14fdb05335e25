"""
Unused variable and function declarations.

Names live in one flat, file-wide table: there is no block or function
scoping, so a name shadowed in a nested scope is treated as the same name.
That can hide an unused declaration but never invents one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..context import AnalysisContext
from ..issues import Issue, IssueKind, issue_at_line
from ..tree import NodeKind, SyntaxNode
from ..utils import iter_with_parent

# Names provided by the host environment (CommonJS module surface).
HOST_NAMES = frozenset({"exports", "module", "require"})

_NAMED_BINDINGS = frozenset({
    NodeKind.VARIABLE_DECLARATOR,
    NodeKind.FUNCTION_DECLARATION,
    NodeKind.FUNCTION_EXPRESSION,
    NodeKind.CLASS,
})

_LOOP_BINDINGS = frozenset({NodeKind.FOR_IN, NodeKind.FOR_OF})


class DeclarationKind(Enum):
    VARIABLE = "variable"
    FUNCTION = "function"


@dataclass(frozen=True)
class DeclarationRecord:
    name: str
    kind: DeclarationKind
    declared_at_line: int
    referenced: bool = False
    exported: bool = False


def run_unused_declarations(ctx: AnalysisContext) -> list[Issue]:
    records = collect_declarations(ctx)
    referenced = collect_references(ctx, records)
    records = {
        name: replace(record, referenced=name in referenced)
        for name, record in records.items()
    }

    issues: list[Issue] = []
    for name, record in records.items():
        # exported names are used by other modules
        if record.referenced or record.exported or name in HOST_NAMES:
            continue
        kind = (
            IssueKind.UNUSED_FUNCTION
            if record.kind is DeclarationKind.FUNCTION
            else IssueKind.UNUSED_VARIABLE
        )
        issues.append(
            issue_at_line(
                ctx,
                kind,
                record.declared_at_line,
                f"Unused {record.kind.value} '{name}'",
            )
        )
    return issues


def collect_declarations(ctx: AnalysisContext) -> dict[str, DeclarationRecord]:
    """
    First pass: every simple variable binding and named function declaration.

    Variable bindings come from declarators and from loop headers that
    declare their variable (``for (const x of xs)``). Declarations made
    inside an ``export`` statement are flagged as exported.
    """
    records: dict[str, DeclarationRecord] = {}
    exported_ids: set[int] = set()
    for node, parent in iter_with_parent(ctx.root):
        if node.type == "export_statement":
            declaration = node.child("declaration")
            if declaration is not None:
                exported_ids.add(id(declaration))
            continue

        if node.kind is NodeKind.VARIABLE_DECLARATOR:
            kind = DeclarationKind.VARIABLE
            name_node = node.child("name")
            exported = parent is not None and id(parent) in exported_ids
        elif node.kind is NodeKind.FUNCTION_DECLARATION:
            kind = DeclarationKind.FUNCTION
            name_node = node.child("name")
            exported = id(node) in exported_ids
        elif node.kind in _LOOP_BINDINGS and node.keyword:
            kind = DeclarationKind.VARIABLE
            name_node = node.child("left")
            exported = False
        else:
            continue

        if name_node is None or name_node.type != "identifier":
            continue
        # last declaration of a name wins
        records[name_node.text] = DeclarationRecord(
            name_node.text, kind, ctx.line_of(name_node), exported=exported
        )
    return records


def collect_references(
    ctx: AnalysisContext,
    records: dict[str, DeclarationRecord],
) -> frozenset[str]:
    """Second pass: names of known declarations that are used somewhere."""
    referenced: set[str] = set()
    stack: list[tuple[SyntaxNode, Optional[SyntaxNode], Optional[SyntaxNode]]] = [
        (ctx.root, None, None)
    ]
    while stack:
        node, parent, grandparent = stack.pop()
        stack.extend((child, node, parent) for child in reversed(node.children))

        if node.kind is not NodeKind.IDENTIFIER or node.text not in records:
            continue
        if _is_binding_occurrence(node, parent, grandparent):
            continue
        referenced.add(node.text)
    return frozenset(referenced)


def _is_binding_occurrence(
    node: SyntaxNode,
    parent: Optional[SyntaxNode],
    grandparent: Optional[SyntaxNode],
) -> bool:
    if parent is None:
        return False
    if parent.kind in _NAMED_BINDINGS and node.slot == "name":
        return True
    if parent.kind is NodeKind.PARAMETERS:
        return True
    if parent.kind in (NodeKind.ARROW_FUNCTION, NodeKind.CATCH) and node.slot == "parameter":
        return True
    if parent.kind in _LOOP_BINDINGS and parent.keyword and node.slot == "left":
        return True

    # default (`x = 1`) and rest (`...x`) parameters
    in_parameters = grandparent is not None and grandparent.kind is NodeKind.PARAMETERS
    if in_parameters and parent.type == "assignment_pattern" and node.slot == "left":
        return True
    if in_parameters and parent.type == "rest_pattern":
        return True
    return False
