"""Structural predicates over a file or a single class.

All predicates are pure: they read the tree, never modify it, and give the
same answer every time for the same tree.
"""

from __future__ import annotations

from tree_sitter import Node, Tree

from hookify.tree.collection import Collection
from hookify.tree.nodes import MalformedTreeError, node_text

BLOCKING_LIFECYCLE_METHODS: tuple[str, ...] = ("componentDidCatch", "getDerivedStateFromError")

MARKUP_NODE_TYPES = frozenset({"jsx_element", "jsx_self_closing_element"})

# The grammar names a plain (non-computed, non-private) method key this way.
_PLAIN_KEY = "property_identifier"


# ── Markup ──────────────────────────────────────────────────────────────────

def find_markup(node: Tree | Node | Collection) -> Collection:
    """JSX elements (including self-closing ones) anywhere below ``node``."""
    return Collection.of(node).find(MARKUP_NODE_TYPES)


def has_markup(node: Tree | Node | Collection) -> bool:
    return find_markup(node).size() > 0


# ── Methods ─────────────────────────────────────────────────────────────────

def class_body(class_node: Node) -> Node:
    """The class body; a class without one is malformed."""
    body = class_node.child_by_field_name("body")
    if body is None or body.is_missing:
        raise MalformedTreeError("Class declaration has no body", class_node)
    return body


def class_methods(class_node: Node) -> Collection:
    """Method definitions declared directly in the class body."""
    body = class_body(class_node)
    return Collection(c for c in body.named_children if c.type == "method_definition")


def method_key_name(method: Node) -> str | None:
    """The method's name when its key is a plain identifier."""
    key = method.child_by_field_name("name")
    if key is None or key.type != _PLAIN_KEY:
        return None
    return node_text(key)


def is_render_method(node: Node) -> bool:
    return node.type == "method_definition" and method_key_name(node) == "render"


def has_only_render_method(class_node: Node) -> bool:
    """True iff the class has at least one method and every method is ``render``."""
    methods = class_methods(class_node)
    renders = methods.filter(is_render_method)
    return methods.size() > 0 and renders.size() == methods.size()


def find_lifecycle_method(class_node: Node, method_name: str) -> Collection:
    """Methods of the class named ``method_name`` (plain identifier keys only)."""
    return class_methods(class_node).filter(lambda m: method_key_name(m) == method_name)


def has_lifecycle_method(class_node: Node, method_name: str) -> bool:
    return find_lifecycle_method(class_node, method_name).size() > 0


def find_blocking_methods(
    class_node: Node,
    blocking: tuple[str, ...] | list[str] = BLOCKING_LIFECYCLE_METHODS,
) -> list[tuple[str, Node]]:
    """(name, method node) for every blocking hook the class defines."""
    found: list[tuple[str, Node]] = []
    for name in blocking:
        for method in find_lifecycle_method(class_node, name):
            found.append((name, method))
    return found


# ── File-level hook lookups ─────────────────────────────────────────────────

def find_methods_named(root: Tree | Node | Collection, method_name: str) -> Collection:
    """Every method definition named ``method_name`` anywhere below ``root``."""
    return Collection.of(root).find("method_definition").filter(
        lambda m: method_key_name(m) == method_name
    )


def find_component_did_catch(root: Tree | Node | Collection) -> Collection:
    return find_methods_named(root, "componentDidCatch")


def has_component_did_catch(root: Tree | Node | Collection) -> bool:
    return find_component_did_catch(root).size() > 0


def find_get_derived_state_from_error(root: Tree | Node | Collection) -> Collection:
    return find_methods_named(root, "getDerivedStateFromError")


def has_get_derived_state_from_error(root: Tree | Node | Collection) -> bool:
    return find_get_derived_state_from_error(root).size() > 0


# ── Names ───────────────────────────────────────────────────────────────────

def get_class_name(class_node: Node) -> str | None:
    """Declared class name, or None for an anonymous class."""
    name = class_node.child_by_field_name("name")
    if name is None or name.is_missing:
        return None
    return node_text(name) or None
