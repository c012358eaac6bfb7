"""Scanner: classify every component class in a set of files or directories."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from tree_sitter import Node, Tree

from hookify.analyzer.base_class import located_parent
from hookify.analyzer.classify import (
    DiagnosticSink,
    Eligible,
    Malformed,
    Outcome,
    classify_tree,
    log_diagnostic,
)
from hookify.analyzer.imports import collect_bindings, framework_is_imported
from hookify.analyzer.models import (
    BindingInfo,
    ClassReport,
    Diagnostic,
    Evidence,
    FileReport,
    ScanReport,
)
from hookify.analyzer.predicates import (
    find_blocking_methods,
    get_class_name,
    has_markup,
    has_only_render_method,
)
from hookify.schemas.settings import AnalyzerSettings
from hookify.tree.nodes import MalformedTreeError, line_of
from hookify.tree.parser import parse_source
from hookify.utils import discover_files, snippet

log = logging.getLogger(__name__)


def scan_source(
    source: str,
    filename: str = "<source>",
    settings: AnalyzerSettings | None = None,
    sink: DiagnosticSink = log_diagnostic,
) -> FileReport:
    """Parse and classify a single source text."""
    settings = settings or AnalyzerSettings()
    tree = parse_source(source, filename=filename)

    diagnostics: list[Diagnostic] = []

    def collect(diagnostic: Diagnostic) -> None:
        diagnostics.append(diagnostic)
        sink(diagnostic)

    outcomes = classify_tree(tree, settings, sink=collect, filename=filename)
    modules = set(settings.framework_modules)

    return FileReport(
        file=filename,
        framework_imported=framework_is_imported(tree, settings.framework_modules),
        has_markup=has_markup(tree),
        has_component_class=bool(outcomes),
        bindings=[
            BindingInfo(local=b.local, module=b.module, exported=b.exported)
            for b in collect_bindings(tree).values()
            if b.module in modules
        ],
        classes=[_class_report(tree, o, source, filename, settings) for o in outcomes],
        diagnostics=diagnostics,
    )


def _class_report(
    tree: Tree,
    outcome: Outcome,
    source: str,
    filename: str,
    settings: AnalyzerSettings,
) -> ClassReport:
    node: Node = outcome.class_node
    line = line_of(node)
    evidence = [Evidence(file=filename, line=line, snippet=snippet(source, line))]

    if isinstance(outcome, Malformed):
        return ClassReport(
            name=outcome.name or get_class_name(node),
            line=line,
            status="malformed",
            reason=str(outcome.error),
            has_markup=has_markup(node),
            evidence=evidence,
        )

    try:
        render_only: bool | None = has_only_render_method(node)
        blocking = list(dict.fromkeys(
            name for name, _ in find_blocking_methods(node, settings.blocking_methods)
        ))
    except MalformedTreeError:
        render_only, blocking = None, []

    if isinstance(outcome, Eligible):
        base = outcome.base
        reason = None
    else:
        base = located_parent(
            tree, node, settings.framework_modules, settings.base_classes,
            settings.namespace_fallback,
        )
        reason = outcome.reason.value

    return ClassReport(
        name=get_class_name(node),
        line=line,
        base=base,
        status=outcome.status,
        reason=reason,
        render_only=render_only,
        has_markup=has_markup(node),
        blocking_methods=blocking,
        evidence=evidence,
    )


def scan_file(
    path: Path,
    workspace: Path | None = None,
    settings: AnalyzerSettings | None = None,
    sink: DiagnosticSink = log_diagnostic,
) -> FileReport:
    """Classify one file; a read failure is recorded on the report."""
    rel = str(path.relative_to(workspace)) if workspace else str(path)
    try:
        source = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        log.warning("Cannot read %s: %s", rel, exc)
        return FileReport(file=rel, error=f"Cannot read file: {exc}")
    return scan_source(source, filename=rel, settings=settings, sink=sink)


def _expand(paths: Sequence[Path], settings: AnalyzerSettings) -> list[tuple[Path, Path]]:
    """(file, workspace) pairs for every file to scan."""
    targets: list[tuple[Path, Path]] = []
    for p in paths:
        if p.is_dir():
            for f in discover_files(p, settings.extensions, settings.skip_dirs):
                targets.append((f, p))
        else:
            targets.append((p, p.parent))
    return targets


def scan(
    paths: Path | Sequence[Path],
    settings: AnalyzerSettings | None = None,
    sink: DiagnosticSink = log_diagnostic,
) -> ScanReport:
    """Scan files and directories; one file's failure never stops the others."""
    if isinstance(paths, Path):
        paths = [paths]
    settings = settings or AnalyzerSettings()

    report = ScanReport(root=str(paths[0]) if len(paths) == 1 else "")
    for fpath, workspace in _expand(paths, settings):
        log.debug("Scanning %s", fpath)
        try:
            report.files.append(scan_file(fpath, workspace, settings, sink))
        except Exception as exc:
            log.exception("Classification failed for %s", fpath)
            report.files.append(FileReport(file=str(fpath.relative_to(workspace)), error=str(exc)))

    log.info(
        "Scan complete: %d files, %d eligible, %d disqualified, %d malformed",
        len(report.files), report.eligible_count, report.disqualified_count,
        report.malformed_count,
    )
    return report
