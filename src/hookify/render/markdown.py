"""Render scan results as a Markdown report."""

from __future__ import annotations

from hookify.analyzer.models import ScanReport

_STATUS_BADGE = {
    "eligible": "eligible",
    "disqualified": "skipped",
    "malformed": "malformed",
}


def render_markdown(report: ScanReport) -> str:
    """Produce a full Markdown report from a ScanReport."""
    sections: list[str] = []
    title = report.root or "selected files"

    # ── Title ────────────────────────────────────────────────────────────
    sections.append(f"# Component Migration Report: {title}\n")

    # ── Summary box ──────────────────────────────────────────────────────
    with_components = [f for f in report.files if f.has_component_class]
    summary_lines = [
        f"- **Files scanned**: {len(report.files)}",
        f"- **Files with component classes**: {len(with_components)}",
        f"- **Eligible classes**: {report.eligible_count}",
        f"- **Skipped classes**: {report.disqualified_count}",
        f"- **Malformed classes**: {report.malformed_count}",
    ]
    if report.error_count:
        summary_lines.append(f"- **Unreadable files**: {report.error_count}")
    sections.append("\n".join(summary_lines) + "\n")

    # ── Classes ──────────────────────────────────────────────────────────
    if with_components:
        sections.append("## Classes\n")
        sections.append("| File | Class | Line | Base | Status | Reason |")
        sections.append("|---|---|---|---|---|---|")
        for f in with_components:
            for c in f.classes:
                name = f"`{c.name}`" if c.name else "_anonymous_"
                base = c.base or "-"
                reason = c.reason or ""
                sections.append(
                    f"| `{f.file}` | {name} | {c.line} | {base} "
                    f"| {_STATUS_BADGE[c.status]} | {reason} |"
                )
        sections.append("")

    # ── Diagnostics ──────────────────────────────────────────────────────
    diagnostics = [d for f in report.files for d in f.diagnostics]
    if diagnostics:
        sections.append("## Diagnostics\n")
        for d in diagnostics:
            sections.append(f"- `{d.file}:{d.line}` {d.message}")
        sections.append("")

    # ── Errors ───────────────────────────────────────────────────────────
    errors = [f for f in report.files if f.error]
    if errors:
        sections.append("## Errors\n")
        for f in errors:
            sections.append(f"- `{f.file}`: {f.error}")
        sections.append("")

    return "\n".join(sections)
