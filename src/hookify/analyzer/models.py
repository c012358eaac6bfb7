"""Pydantic models for classification reports."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


# ── Shared ──────────────────────────────────────────────────────────────────

class Evidence(BaseModel):
    file: str
    line: int
    snippet: str


class Diagnostic(BaseModel):
    code: str           # "blocking_lifecycle", "anonymous_class", "extra_methods", ...
    message: str
    file: str = ""
    line: int = 0
    class_name: str | None = None
    method: str | None = None   # blocking hook that caused the skip, if any


# ── Per-file ────────────────────────────────────────────────────────────────

class BindingInfo(BaseModel):
    local: str
    module: str
    exported: str       # exported name, "default" or "*"


class ClassReport(BaseModel):
    name: str | None = None      # None for an anonymous class
    line: int
    base: str | None = None      # "Component" / "PureComponent"
    status: Literal["eligible", "disqualified", "malformed"]
    reason: str | None = None
    render_only: bool | None = None
    has_markup: bool = False
    blocking_methods: list[str] = Field(default_factory=list)
    evidence: list[Evidence] = Field(default_factory=list)


class FileReport(BaseModel):
    file: str
    framework_imported: bool = False
    has_markup: bool = False
    has_component_class: bool = False
    bindings: list[BindingInfo] = Field(default_factory=list)
    classes: list[ClassReport] = Field(default_factory=list)
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    error: str | None = None


# ── Whole scan ──────────────────────────────────────────────────────────────

class ScanReport(BaseModel):
    root: str = ""
    files: list[FileReport] = Field(default_factory=list)

    @computed_field
    @property
    def eligible_count(self) -> int:
        return sum(1 for f in self.files for c in f.classes if c.status == "eligible")

    @computed_field
    @property
    def disqualified_count(self) -> int:
        return sum(1 for f in self.files for c in f.classes if c.status == "disqualified")

    @computed_field
    @property
    def malformed_count(self) -> int:
        return sum(1 for f in self.files for c in f.classes if c.status == "malformed")

    @computed_field
    @property
    def error_count(self) -> int:
        return sum(1 for f in self.files if f.error)
