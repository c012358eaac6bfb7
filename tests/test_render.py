"""Tests for the Markdown report renderer."""

from __future__ import annotations

from hookify.analyzer.models import ClassReport, Diagnostic, FileReport, ScanReport
from hookify.render.markdown import render_markdown


def make_report() -> ScanReport:
    return ScanReport(
        root="/work/app",
        files=[
            FileReport(
                file="src/Hello.jsx",
                framework_imported=True,
                has_component_class=True,
                classes=[
                    ClassReport(name="Hello", line=3, base="Component", status="eligible"),
                ],
            ),
            FileReport(
                file="src/Boundary.jsx",
                framework_imported=True,
                has_component_class=True,
                classes=[
                    ClassReport(
                        name="Boundary", line=4, base="Component",
                        status="disqualified", reason="blocking_lifecycle",
                        blocking_methods=["componentDidCatch"],
                    ),
                ],
                diagnostics=[
                    Diagnostic(
                        code="blocking_lifecycle",
                        message="Class 'Boundary' defines componentDidCatch, which has no "
                                "function-component equivalent; skipping",
                        file="src/Boundary.jsx", line=5, class_name="Boundary",
                        method="componentDidCatch",
                    ),
                ],
            ),
            FileReport(file="src/broken.js", error="Cannot read file: denied"),
        ],
    )


class TestRenderMarkdown:
    def test_title_and_summary(self):
        md = render_markdown(make_report())
        assert md.startswith("# Component Migration Report: /work/app")
        assert "- **Files scanned**: 3" in md
        assert "- **Eligible classes**: 1" in md
        assert "- **Skipped classes**: 1" in md
        assert "- **Unreadable files**: 1" in md

    def test_class_table(self):
        md = render_markdown(make_report())
        assert "| `src/Hello.jsx` | `Hello` | 3 | Component | eligible |  |" in md
        assert "| `src/Boundary.jsx` | `Boundary` | 4 | Component | skipped | blocking_lifecycle |" in md

    def test_diagnostics_and_errors(self):
        md = render_markdown(make_report())
        assert "## Diagnostics" in md
        assert "`src/Boundary.jsx:5` Class 'Boundary' defines componentDidCatch" in md
        assert "## Errors" in md
        assert "- `src/broken.js`: Cannot read file: denied" in md

    def test_empty_report(self):
        md = render_markdown(ScanReport())
        assert "# Component Migration Report: selected files" in md
        assert "## Classes" not in md
        assert "## Diagnostics" not in md

    def test_anonymous_class(self):
        report = ScanReport(files=[FileReport(
            file="a.js", has_component_class=True,
            classes=[ClassReport(line=1, status="disqualified", reason="anonymous_class")],
        )])
        assert "_anonymous_" in render_markdown(report)
