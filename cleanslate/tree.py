"""
cleanslate/tree.py

Adapter from Tree-sitter JavaScript trees to a closed set of node kinds.

The raw grammar exposes a few hundred node types. The checks only care about
a handful of them (functions, declarations, identifiers, control flow,
blocks and returns), so the tree is converted once into ``SyntaxNode``
objects tagged with a ``NodeKind``; everything else becomes ``OTHER`` and is
kept only so traversal still reaches the nodes below it.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

import tree_sitter

from .utils import node_text


class NodeKind(Enum):
    """Node kinds the hygiene checks know about."""
    PROGRAM = auto()
    BLOCK = auto()
    IF = auto()
    FOR = auto()
    FOR_IN = auto()
    FOR_OF = auto()
    WHILE = auto()
    DO_WHILE = auto()
    FUNCTION_DECLARATION = auto()
    FUNCTION_EXPRESSION = auto()
    ARROW_FUNCTION = auto()
    METHOD = auto()
    CLASS = auto()
    VARIABLE_DECLARATOR = auto()
    ASSIGNMENT = auto()
    PROPERTY = auto()
    PARAMETERS = auto()
    CATCH = auto()
    IDENTIFIER = auto()
    RETURN = auto()
    OTHER = auto()


CONTROL_FLOW_KINDS = frozenset({
    NodeKind.IF,
    NodeKind.FOR,
    NodeKind.FOR_IN,
    NodeKind.FOR_OF,
    NodeKind.WHILE,
    NodeKind.DO_WHILE,
})

FUNCTION_KINDS = frozenset({
    NodeKind.FUNCTION_DECLARATION,
    NodeKind.FUNCTION_EXPRESSION,
    NodeKind.ARROW_FUNCTION,
    NodeKind.METHOD,
})

_KINDS_BY_TYPE = {
    "program": NodeKind.PROGRAM,
    "statement_block": NodeKind.BLOCK,
    "if_statement": NodeKind.IF,
    "for_statement": NodeKind.FOR,
    "while_statement": NodeKind.WHILE,
    "do_statement": NodeKind.DO_WHILE,
    "function_declaration": NodeKind.FUNCTION_DECLARATION,
    "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
    "function_expression": NodeKind.FUNCTION_EXPRESSION,
    "function": NodeKind.FUNCTION_EXPRESSION,
    "generator_function": NodeKind.FUNCTION_EXPRESSION,
    "arrow_function": NodeKind.ARROW_FUNCTION,
    "method_definition": NodeKind.METHOD,
    "class_declaration": NodeKind.CLASS,
    "class": NodeKind.CLASS,
    "variable_declarator": NodeKind.VARIABLE_DECLARATOR,
    "assignment_expression": NodeKind.ASSIGNMENT,
    "pair": NodeKind.PROPERTY,
    "formal_parameters": NodeKind.PARAMETERS,
    "catch_clause": NodeKind.CATCH,
    "identifier": NodeKind.IDENTIFIER,
    "shorthand_property_identifier": NodeKind.IDENTIFIER,
    "return_statement": NodeKind.RETURN,
}

# Comments are scanned lexically, never as tree nodes.
_DROPPED_TYPES = frozenset({"comment", "html_comment", "hash_bang_line"})


@dataclass
class SyntaxNode:
    """
    Adapted syntax node.

    ``slot`` is the grammar field name this node occupies under its parent
    ("body", "consequence", "alternative", "name", ...), or None for
    positional children. ``text`` is only filled in for leaf nodes.
    ``keyword`` holds the declaration keyword (const, let, var) of a
    for-in / for-of loop that declares its loop variable.
    """
    kind: NodeKind
    type: str
    start: int
    end: int
    slot: Optional[str] = None
    text: str = ""
    keyword: str = ""
    children: list[SyntaxNode] = field(default_factory=list)

    def child(self, slot: str) -> Optional[SyntaxNode]:
        """Return the first child in ``slot``, or None when the slot is empty."""
        for node in self.children:
            if node.slot == slot:
                return node
        return None

    @classmethod
    def from_ts_node(
        cls,
        ts_node: tree_sitter.Node,
        source_bytes: bytes,
        slot: Optional[str] = None,
    ) -> SyntaxNode:
        """Create a childless SyntaxNode from a tree-sitter node."""
        kind = _KINDS_BY_TYPE.get(ts_node.type, NodeKind.OTHER)
        keyword = ""
        if ts_node.type == "for_in_statement":
            operator = ts_node.child_by_field_name("operator")
            if operator is not None and operator.type == "of":
                kind = NodeKind.FOR_OF
            else:
                kind = NodeKind.FOR_IN
            declaration = ts_node.child_by_field_name("kind")
            if declaration is not None:
                keyword = declaration.type

        text = ""
        if ts_node.named_child_count == 0:
            text = node_text(ts_node, source_bytes)

        return cls(
            kind=kind,
            type=ts_node.type,
            start=ts_node.start_byte,
            end=ts_node.end_byte,
            slot=slot,
            text=text,
            keyword=keyword,
        )


def adapt(root: tree_sitter.Node, source_bytes: bytes) -> SyntaxNode:
    """Convert a tree-sitter tree into SyntaxNodes without recursion."""
    adapted = SyntaxNode.from_ts_node(root, source_bytes)
    stack = [(root, adapted)]
    while stack:
        ts_node, node = stack.pop()
        for index, ts_child in enumerate(ts_node.children):
            if not ts_child.is_named or ts_child.type in _DROPPED_TYPES:
                continue

            slot = ts_node.field_name_for_child(index)
            if ts_child.type == "else_clause":
                ts_child = _else_statement(ts_child)
                if ts_child is None:
                    continue

            child = SyntaxNode.from_ts_node(ts_child, source_bytes, slot)
            node.children.append(child)
            stack.append((ts_child, child))
    return adapted


def _else_statement(clause: tree_sitter.Node) -> Optional[tree_sitter.Node]:
    for child in clause.named_children:
        if child.type not in _DROPPED_TYPES:
            return child
    return None


class LineIndex:
    """Maps byte offsets to 1-based line numbers and back to source lines."""

    def __init__(self, source_bytes: bytes):
        self._newlines = [m.start() for m in re.finditer(b"\n", source_bytes)]
        self._lines = source_bytes.decode("utf-8", errors="replace").split("\n")

    def line_of(self, offset: int) -> int:
        # number of newlines strictly before the offset, plus one
        return bisect.bisect_left(self._newlines, offset) + 1

    def snippet(self, line: int) -> str:
        if 1 <= line <= len(self._lines):
            return self._lines[line - 1].rstrip("\r")
        return ""


@dataclass(frozen=True)
class SyntaxErrorLocation:
    line: int
    message: str


def locate_syntax_error(
    tree: tree_sitter.Tree,
    source_bytes: bytes,
    lines: LineIndex,
) -> Optional[SyntaxErrorLocation]:
    """
    Find the first syntax error in a parsed tree.

    Tree-sitter recovers from errors instead of failing: a broken file
    still yields a tree, with ERROR or missing nodes where parsing failed.
    Returns None when the tree is clean.
    """
    root = tree.root_node
    if not root.has_error:
        return None

    stack = [root]
    while stack:
        node = stack.pop()
        line = lines.line_of(node.start_byte)
        if node.is_missing:
            return SyntaxErrorLocation(line, f"Syntax error: missing '{node.type}'")
        if node.type == "ERROR":
            fragment = node_text(node, source_bytes).strip().splitlines()
            if fragment:
                token = fragment[0][:40]
                return SyntaxErrorLocation(line, f"Syntax error: unexpected '{token}'")
            return SyntaxErrorLocation(line, "Syntax error: unexpected end of input")
        stack.extend(
            child
            for child in reversed(node.children)
            if child.has_error or child.is_missing
        )

    return SyntaxErrorLocation(1, "Syntax error")
