"""Import resolution: which local identifier names a framework export.

Downstream code never compares a superclass against a hard-coded name; it
compares against whatever local name ``resolve_alias_for`` returns, so
``import { Component as Base } from "react"`` and
``import { Component } from "react"`` are classified the same way.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from tree_sitter import Node, Tree

from hookify.tree.collection import Collection
from hookify.tree.nodes import child, node_text, string_value

FRAMEWORK_MODULES: tuple[str, ...] = ("React", "react", "react-native")

DEFAULT_EXPORT = "default"
NAMESPACE_EXPORT = "*"


@dataclass(frozen=True)
class ImportBinding:
    local: str      # identifier bound in this file
    module: str     # import source literal
    exported: str   # exported name, "default" or "*"


def _import_source(node: Node) -> str | None:
    return string_value(node.child_by_field_name("source"))


def find_module(tree: Tree | Node | Collection, module: str) -> Collection:
    """Import statements whose source literal is exactly ``module``."""
    return (
        Collection.of(tree)
        .find("import_statement", {"source": {"type": "string"}})
        .filter(lambda n: _import_source(n) == module)
    )


def module_is_imported(tree: Tree | Node | Collection, module: str) -> bool:
    """True iff exactly one import statement imports ``module``.

    Importing the same module twice is ambiguous and counts as not imported.
    """
    return find_module(tree, module).size() == 1


def framework_is_imported(
    tree: Tree | Node | Collection,
    modules: Iterable[str] = FRAMEWORK_MODULES,
) -> bool:
    return any(module_is_imported(tree, m) for m in modules)


def find_framework_imports(
    tree: Tree | Node | Collection,
    modules: Iterable[str] = FRAMEWORK_MODULES,
) -> Collection:
    """Import statements of the framework (empty unless it is imported).

    Only spellings imported exactly once take part; a spelling imported
    twice is ambiguous even when another spelling is imported cleanly.
    """
    imported = {m for m in modules if module_is_imported(tree, m)}
    if not imported:
        return Collection()
    return (
        Collection.of(tree)
        .find("import_statement", {"source": {"type": "string"}})
        .filter(lambda n: _import_source(n) in imported)
    )


def _specifier_local(spec: Node) -> str:
    alias = spec.child_by_field_name("alias")
    return node_text(alias if alias is not None else spec.child_by_field_name("name"))


def _specifier_exported(spec: Node) -> str:
    name = spec.child_by_field_name("name")
    return string_value(name) or node_text(name)


def resolve_alias_for(
    tree: Tree | Node | Collection,
    exported_name: str,
    modules: Iterable[str] = FRAMEWORK_MODULES,
) -> str | None:
    """Local identifier bound to the framework's ``exported_name``, if any.

    ``import { Component as Base } from "react"`` resolves "Component" to
    "Base"; without a named import of ``exported_name`` the result is None.
    """
    spec = (
        find_framework_imports(tree, modules)
        .find("import_specifier")
        .filter(lambda s: _specifier_exported(s) == exported_name)
        .first()
    )
    return _specifier_local(spec) if spec is not None else None


def resolve_namespace(
    tree: Tree | Node | Collection,
    modules: Iterable[str] = FRAMEWORK_MODULES,
    fallback: str = "React",
) -> str:
    """Local name of the framework's default or namespace import.

    ``import R from "react"`` resolves to "R"; ``fallback`` when the file has
    neither form.
    """
    for imp in find_framework_imports(tree, modules):
        for binding in _bindings_of(imp):
            if binding.exported in (DEFAULT_EXPORT, NAMESPACE_EXPORT):
                return binding.local
    return fallback


def _bindings_of(imp: Node) -> list[ImportBinding]:
    module = _import_source(imp) or ""
    clause = child(imp, "import_clause")
    if clause is None:
        return []

    bindings: list[ImportBinding] = []
    for part in clause.named_children:
        if part.type == "identifier":
            bindings.append(ImportBinding(node_text(part), module, DEFAULT_EXPORT))
        elif part.type == "namespace_import":
            ident = child(part, "identifier")
            if ident is not None:
                bindings.append(ImportBinding(node_text(ident), module, NAMESPACE_EXPORT))
        elif part.type == "named_imports":
            for spec in part.named_children:
                if spec.type == "import_specifier":
                    bindings.append(
                        ImportBinding(_specifier_local(spec), module, _specifier_exported(spec))
                    )
    return bindings


def collect_bindings(tree: Tree | Node | Collection) -> dict[str, ImportBinding]:
    """Per-file binding table: local identifier -> ImportBinding.

    One entry per local name; a later import of the same name replaces an
    earlier one, as module scoping would.
    """
    table: dict[str, ImportBinding] = {}
    for imp in Collection.of(tree).find("import_statement"):
        for binding in _bindings_of(imp):
            table[binding.local] = binding
    return table
