"""Shared utilities for Tree-sitter parsing and node traversal."""

from __future__ import annotations

from typing import Any, Iterator, Optional

import tree_sitter
import tree_sitter_javascript

JAVASCRIPT_LANGUAGE = tree_sitter.Language(tree_sitter_javascript.language())


def create_javascript_parser() -> tree_sitter.Parser:
    """Create a Tree-sitter parser configured for JavaScript."""
    return tree_sitter.Parser(JAVASCRIPT_LANGUAGE)


def node_text(node: tree_sitter.Node, source_bytes: bytes) -> str:
    """Decode the bytes that correspond to a node."""
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def iter_nodes(root: Any) -> Iterator[Any]:
    """
    Iterative preorder traversal of a syntax tree.

    Works for both raw tree-sitter nodes and adapted SyntaxNodes; anything
    exposing a ``children`` sequence will do.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def iter_with_parent(root: Any) -> Iterator[tuple[Any, Optional[Any]]]:
    """Preorder traversal yielding each node together with its parent."""
    stack = [(root, None)]
    while stack:
        node, parent = stack.pop()
        yield node, parent
        stack.extend((child, node) for child in reversed(node.children))
