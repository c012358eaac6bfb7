"""Component-class detection for class-to-function migration.

Usage:
    from hookify.tree import parse_source
    from hookify.analyzer import classify_tree, framework_is_imported

    tree = parse_source(source)
    if framework_is_imported(tree):
        for outcome in classify_tree(tree):
            ...
"""

from __future__ import annotations

from hookify.analyzer.base_class import (
    BASE_CLASS_NAMES,
    find_broken_component_classes,
    find_class_declarations,
    find_component_classes,
    find_component_classes_by_parent,
    has_component_class,
    superclass_of,
)
from hookify.analyzer.classify import (
    Disqualified,
    DisqualifyReason,
    Eligible,
    Malformed,
    Outcome,
    classify_class,
    classify_tree,
    is_migration_eligible,
    log_diagnostic,
)
from hookify.analyzer.imports import (
    FRAMEWORK_MODULES,
    ImportBinding,
    collect_bindings,
    find_module,
    framework_is_imported,
    module_is_imported,
    resolve_alias_for,
    resolve_namespace,
)
from hookify.analyzer.predicates import (
    BLOCKING_LIFECYCLE_METHODS,
    find_component_did_catch,
    find_get_derived_state_from_error,
    find_lifecycle_method,
    find_markup,
    get_class_name,
    has_component_did_catch,
    has_get_derived_state_from_error,
    has_lifecycle_method,
    has_markup,
    has_only_render_method,
    is_render_method,
)

__all__ = [
    "BASE_CLASS_NAMES",
    "BLOCKING_LIFECYCLE_METHODS",
    "FRAMEWORK_MODULES",
    "Disqualified",
    "DisqualifyReason",
    "Eligible",
    "ImportBinding",
    "Malformed",
    "Outcome",
    "classify_class",
    "classify_tree",
    "collect_bindings",
    "find_broken_component_classes",
    "find_class_declarations",
    "find_component_classes",
    "find_component_classes_by_parent",
    "find_component_did_catch",
    "find_get_derived_state_from_error",
    "find_lifecycle_method",
    "find_markup",
    "find_module",
    "framework_is_imported",
    "get_class_name",
    "has_component_class",
    "has_component_did_catch",
    "has_get_derived_state_from_error",
    "has_lifecycle_method",
    "has_markup",
    "has_only_render_method",
    "is_migration_eligible",
    "is_render_method",
    "log_diagnostic",
    "module_is_imported",
    "resolve_alias_for",
    "resolve_namespace",
    "superclass_of",
]
