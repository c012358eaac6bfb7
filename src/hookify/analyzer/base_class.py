"""Locate class declarations whose superclass is the framework's base component.

Two superclass forms denote the same base class:

    import { Component as Base } from "react";   class A extends Base {}
    import React from "react";                     class A extends React.Component {}

The named import, once resolved, is authoritative for the file; the
qualified ``<namespace>.<Parent>`` form is only searched when no named
import of the parent exists.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from tree_sitter import Node, Tree

from hookify.analyzer.imports import (
    FRAMEWORK_MODULES,
    framework_is_imported,
    resolve_alias_for,
    resolve_namespace,
)
from hookify.tree.collection import Collection, Shape, matches
from hookify.tree.nodes import child, node_text

log = logging.getLogger(__name__)

BASE_CLASS_NAMES: tuple[str, ...] = ("Component", "PureComponent")


def _is_default_exported_class(node: Node) -> bool:
    return node.parent is not None and node.parent.type == "export_statement"


def find_class_declarations(tree: Tree | Node | Collection) -> Collection:
    """Class declarations, plus anonymous ``export default class ...`` classes."""
    return Collection.of(tree).find({"class_declaration", "class"}).filter(
        lambda n: n.type == "class_declaration" or _is_default_exported_class(n)
    )


def superclass_of(class_node: Node) -> Node | None:
    """The expression after ``extends`` (None for a class without one)."""
    heritage = child(class_node, "class_heritage")
    if heritage is None or not heritage.named_children:
        return None
    return heritage.named_children[0]


def superclass_shape(
    tree: Tree | Node | Collection,
    parent_name: str,
    modules: Iterable[str] = FRAMEWORK_MODULES,
    namespace_fallback: str = "React",
) -> Shape:
    """Shape a superclass expression must have to denote ``parent_name``."""
    modules = tuple(modules)
    alias = resolve_alias_for(tree, parent_name, modules)
    if alias:
        return {"type": "identifier", "text": alias}
    namespace = resolve_namespace(tree, modules, fallback=namespace_fallback)
    return {
        "type": "member_expression",
        "object": {"type": "identifier", "text": namespace},
        "property": {"type": "property_identifier", "text": parent_name},
    }


def find_component_classes_by_parent(
    tree: Tree | Node | Collection,
    parent_name: str,
    modules: Iterable[str] = FRAMEWORK_MODULES,
    namespace_fallback: str = "React",
) -> Collection:
    """Classes extending the framework's ``parent_name`` (e.g. "PureComponent")."""
    modules = tuple(modules)
    if not framework_is_imported(tree, modules):
        return Collection()
    shape = superclass_shape(tree, parent_name, modules, namespace_fallback)
    return find_class_declarations(tree).filter(lambda n: matches(superclass_of(n), shape))


def find_component_classes(
    tree: Tree | Node | Collection,
    modules: Iterable[str] = FRAMEWORK_MODULES,
    parents: Sequence[str] = BASE_CLASS_NAMES,
    union: bool = False,
    namespace_fallback: str = "React",
) -> Collection:
    """Classes extending any framework base class.

    Parents are tried in order and the first non-empty tier is returned;
    with ``union=True`` every tier's classes are returned together.
    """
    modules = tuple(modules)
    if not framework_is_imported(tree, modules):
        log.debug("Framework not imported; no component classes")
        return Collection()

    found = Collection()
    for parent in parents:
        tier = find_component_classes_by_parent(tree, parent, modules, namespace_fallback)
        if not tier:
            continue
        if not union:
            return tier
        found = found + tier
    return found


def find_broken_component_classes(
    tree: Tree | Node | Collection,
    modules: Iterable[str] = FRAMEWORK_MODULES,
    parents: Sequence[str] = BASE_CLASS_NAMES,
    namespace_fallback: str = "React",
) -> Collection:
    """``extends`` clauses of framework classes the parser could not recover.

    A class missing its body ends up inside an ERROR node rather than a
    class declaration; its ``class_heritage`` is all that remains.
    """
    modules = tuple(modules)
    root = Collection.of(tree)
    if not any(n.has_error for n in root) or not framework_is_imported(tree, modules):
        return Collection()
    shapes = [superclass_shape(tree, p, modules, namespace_fallback) for p in parents]
    return root.find("class_heritage").filter(
        lambda h: h.parent is not None
        and h.parent.type == "ERROR"
        and bool(h.named_children)
        and any(matches(h.named_children[0], s) for s in shapes)
    )


def recovered_class_name(heritage: Node) -> str | None:
    """Name written before ``extends`` in a broken class, if any."""
    prev = heritage.prev_named_sibling
    if prev is None or prev.type != "identifier":
        return None
    return node_text(prev) or None


def has_component_class(
    tree: Tree | Node | Collection,
    modules: Iterable[str] = FRAMEWORK_MODULES,
) -> bool:
    return find_component_classes(tree, modules).size() > 0


def located_parent(
    tree: Tree | Node | Collection,
    class_node: Node,
    modules: Iterable[str] = FRAMEWORK_MODULES,
    parents: Sequence[str] = BASE_CLASS_NAMES,
    namespace_fallback: str = "React",
) -> str | None:
    """Which base class ``class_node`` was located through, if any."""
    modules = tuple(modules)
    for parent in parents:
        tier = find_component_classes_by_parent(tree, parent, modules, namespace_fallback)
        if any(n.id == class_node.id for n in tier):
            return parent
    return None
