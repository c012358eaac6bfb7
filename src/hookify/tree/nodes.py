"""Small read-only helpers over tree-sitter nodes."""

from __future__ import annotations

from tree_sitter import Node


class MalformedTreeError(ValueError):
    """A node lacks a part every well-formed tree has (e.g. a class body)."""

    def __init__(self, message: str, node: Node | None = None) -> None:
        if node is not None:
            message = f"{message} (line {line_of(node)})"
        super().__init__(message)
        self.node = node


def node_text(node: Node | None) -> str:
    """Return the source text covered by ``node`` ("" for None)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def string_value(node: Node | None) -> str | None:
    """Return a string literal's value with its quotes stripped."""
    if node is None or node.type != "string":
        return None
    raw = node_text(node)
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "'\"":
        return raw[1:-1]
    return raw


def line_of(node: Node) -> int:
    """1-based line number of the node's first character."""
    return node.start_point[0] + 1


def child(node: Node, key: str) -> Node | None:
    """Field child ``key``, else the first named child whose type is ``key``."""
    found = node.child_by_field_name(key)
    if found is not None:
        return found
    for c in node.named_children:
        if c.type == key:
            return c
    return None
