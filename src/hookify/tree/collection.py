"""Collection: the one generic "find nodes of shape S, filtered by P" primitive.

Every structural check in the analyzer is written as a ``find`` over a
Collection followed by ``filter`` / ``size`` / ``first``; nothing else walks
the tree.

Shapes are plain dicts:

    {"type": "member_expression",
     "object": {"type": "identifier", "text": "React"},
     "property": "Component"}

- ``"type"`` compares ``node.type``
- ``"text"`` compares the node's source text
- any other key names a child (field name first, then child type); a string
  value compares that child's text, a dict is matched recursively and a
  callable is called with the child (possibly None)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Callable, Union

from tree_sitter import Node, Tree

from hookify.tree.nodes import child, node_text

Shape = dict[str, Any]
NodeTypes = Union[str, set[str], frozenset[str], tuple[str, ...]]


def matches(node: Node | None, shape: Shape | None) -> bool:
    """Return True when ``node`` has the given shape."""
    if node is None:
        return False
    if not shape:
        return True
    for key, expected in shape.items():
        if key == "type":
            if node.type != expected:
                return False
            continue
        if key == "text":
            if node_text(node) != expected:
                return False
            continue

        sub = child(node, key)
        if callable(expected):
            if not expected(sub):
                return False
        elif isinstance(expected, dict):
            if not matches(sub, expected):
                return False
        elif sub is None or node_text(sub) != expected:
            return False
    return True


def _type_matcher(node_type: NodeTypes | None) -> Callable[[Node], bool]:
    if node_type is None:
        return lambda n: True
    if isinstance(node_type, str):
        return lambda n: n.type == node_type
    types = frozenset(node_type)
    return lambda n: n.type in types


def _descendants(root: Node) -> Iterator[Node]:
    """Pre-order (document order) walk of everything below ``root``."""
    stack = list(reversed(root.children))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


class Collection:
    """An ordered, duplicate-free, immutable list of tree nodes."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        seen: set[int] = set()
        kept: list[Node] = []
        for n in nodes:
            if n.id in seen:
                continue
            seen.add(n.id)
            kept.append(n)
        self._nodes: tuple[Node, ...] = tuple(kept)

    @classmethod
    def of(cls, source: Tree | Node | Collection) -> Collection:
        """Wrap a tree (via its root node), a single node or a Collection."""
        if isinstance(source, Collection):
            return source
        if isinstance(source, Tree):
            return cls([source.root_node])
        return cls([source])

    # ── Queries ──────────────────────────────────────────────────────────

    def find(self, node_type: NodeTypes | None = None, shape: Shape | None = None) -> Collection:
        """All descendants of the held nodes with the given type and shape.

        The held nodes themselves are never part of the result, so
        ``Collection.of(jsx_node).find("jsx_element")`` does not return
        ``jsx_node``; query from its parent or the whole tree instead.
        """
        type_ok = _type_matcher(node_type)
        found: list[Node] = []
        for root in self._nodes:
            for node in _descendants(root):
                if type_ok(node) and matches(node, shape):
                    found.append(node)
        return Collection(found)

    def filter(self, pred: Callable[[Node], bool]) -> Collection:
        return Collection(n for n in self._nodes if pred(n))

    def at(self, index: int) -> Collection:
        """A Collection holding only the node at ``index`` (empty if none)."""
        try:
            return Collection([self._nodes[index]])
        except IndexError:
            return Collection()

    def first(self) -> Node | None:
        return self._nodes[0] if self._nodes else None

    def nodes(self) -> list[Node]:
        return list(self._nodes)

    def size(self) -> int:
        return len(self._nodes)

    # ── Container protocol ───────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __add__(self, other: Collection) -> Collection:
        return Collection([*self._nodes, *other._nodes])

    def __repr__(self) -> str:
        types = ", ".join(n.type for n in self._nodes[:5])
        more = ", ..." if len(self._nodes) > 5 else ""
        return f"Collection([{types}{more}])"
