"""Classification facade: is a class ready for class-to-function migration?

A class is eligible iff the framework is imported, the class is located as
extending a framework base class, and it defines none of the blocking
lifecycle hooks. Every other outcome is a tagged ``Disqualified`` (with a
diagnostic handed to the sink) or ``Malformed`` (the tree could not be
analysed), never an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Union

from tree_sitter import Node, Tree

from hookify.analyzer.base_class import (
    find_broken_component_classes,
    find_component_classes,
    located_parent,
    recovered_class_name,
)
from hookify.analyzer.models import Diagnostic
from hookify.analyzer.predicates import (
    find_blocking_methods,
    get_class_name,
    has_only_render_method,
)
from hookify.schemas.settings import AnalyzerSettings
from hookify.tree.collection import Collection
from hookify.tree.nodes import MalformedTreeError, line_of

log = logging.getLogger(__name__)

ANONYMOUS = "<anonymous>"


class DisqualifyReason(str, Enum):
    NOT_A_COMPONENT = "not_a_component"
    BLOCKING_LIFECYCLE = "blocking_lifecycle"
    ANONYMOUS_CLASS = "anonymous_class"
    EXTRA_METHODS = "extra_methods"


@dataclass(frozen=True)
class Eligible:
    class_node: Node
    name: str
    base: str | None = None
    status: ClassVar[str] = "eligible"


@dataclass(frozen=True)
class Disqualified:
    class_node: Node
    reason: DisqualifyReason
    diagnostic: Diagnostic
    status: ClassVar[str] = "disqualified"


@dataclass(frozen=True)
class Malformed:
    class_node: Node | None
    error: MalformedTreeError
    name: str | None = None
    status: ClassVar[str] = "malformed"


Outcome = Union[Eligible, Disqualified, Malformed]
DiagnosticSink = Callable[[Diagnostic], None]


def log_diagnostic(diagnostic: Diagnostic) -> None:
    """Default sink: report the skip as a logging warning."""
    where = f"{diagnostic.file}:{diagnostic.line}: " if diagnostic.file else ""
    log.warning("%s%s", where, diagnostic.message)


def discard_diagnostic(diagnostic: Diagnostic) -> None:
    """Sink for callers that only want the answer."""


def _located(tree: Tree | Node | Collection, settings: AnalyzerSettings) -> Collection:
    return find_component_classes(
        tree,
        settings.framework_modules,
        settings.base_classes,
        union=settings.union_base_classes,
        namespace_fallback=settings.namespace_fallback,
    )


def _disqualify(
    class_node: Node,
    reason: DisqualifyReason,
    message: str,
    sink: DiagnosticSink,
    filename: str,
    *,
    line: int | None = None,
    method: str | None = None,
) -> Disqualified:
    diagnostic = Diagnostic(
        code=reason.value,
        message=message,
        file=filename,
        line=line if line is not None else line_of(class_node),
        class_name=get_class_name(class_node),
        method=method,
    )
    sink(diagnostic)
    return Disqualified(class_node, reason, diagnostic)


def _classify(
    tree: Tree | Node | Collection,
    class_node: Node,
    settings: AnalyzerSettings,
    sink: DiagnosticSink,
    filename: str,
    located: Collection,
) -> Outcome:
    name = get_class_name(class_node)
    label = name or ANONYMOUS

    if not any(n.id == class_node.id for n in located):
        return _disqualify(
            class_node, DisqualifyReason.NOT_A_COMPONENT,
            f"Class '{label}' does not extend a framework component class; skipping",
            sink, filename,
        )

    blocking = find_blocking_methods(class_node, settings.blocking_methods)
    if blocking:
        hooks = ", ".join(dict.fromkeys(hook for hook, _ in blocking))
        first_hook, first_method = blocking[0]
        return _disqualify(
            class_node, DisqualifyReason.BLOCKING_LIFECYCLE,
            f"Class '{label}' defines {hooks}, which has no function-component "
            f"equivalent; skipping",
            sink, filename, line=line_of(first_method), method=first_hook,
        )

    if name is None:
        return _disqualify(
            class_node, DisqualifyReason.ANONYMOUS_CLASS,
            "Anonymous component classes are not supported; skipping",
            sink, filename,
        )

    if settings.require_render_only and not has_only_render_method(class_node):
        return _disqualify(
            class_node, DisqualifyReason.EXTRA_METHODS,
            f"Class '{label}' has methods other than render; skipping",
            sink, filename,
        )

    base = located_parent(
        tree, class_node, settings.framework_modules, settings.base_classes,
        settings.namespace_fallback,
    )
    return Eligible(class_node, name, base)


def classify_class(
    tree: Tree | Node | Collection,
    class_node: Node,
    settings: AnalyzerSettings | None = None,
    sink: DiagnosticSink = log_diagnostic,
    filename: str = "",
) -> Outcome:
    """Classify one class declaration of ``tree``."""
    settings = settings or AnalyzerSettings()
    try:
        return _classify(tree, class_node, settings, sink, filename, _located(tree, settings))
    except MalformedTreeError as exc:
        log.debug("Malformed class in %s: %s", filename or "<source>", exc)
        return Malformed(class_node, exc)


def classify_tree(
    tree: Tree | Node | Collection,
    settings: AnalyzerSettings | None = None,
    sink: DiagnosticSink = log_diagnostic,
    filename: str = "",
) -> list[Outcome]:
    """Classify every framework component class in the file."""
    settings = settings or AnalyzerSettings()
    located = _located(tree, settings)
    outcomes: list[Outcome] = []
    for class_node in located:
        try:
            outcomes.append(_classify(tree, class_node, settings, sink, filename, located))
        except MalformedTreeError as exc:
            log.debug("Malformed class in %s: %s", filename or "<source>", exc)
            outcomes.append(Malformed(class_node, exc))

    for heritage in find_broken_component_classes(
        tree, settings.framework_modules, settings.base_classes, settings.namespace_fallback,
    ):
        name = recovered_class_name(heritage)
        exc = MalformedTreeError(
            f"Class '{name or ANONYMOUS}' could not be parsed (missing class body)", heritage,
        )
        log.warning("%s: %s", filename or "<source>", exc)
        outcomes.append(Malformed(heritage, exc, name))
    return outcomes


def is_migration_eligible(
    tree: Tree | Node | Collection,
    class_node: Node,
    settings: AnalyzerSettings | None = None,
) -> bool:
    return isinstance(classify_class(tree, class_node, settings, sink=discard_diagnostic), Eligible)
