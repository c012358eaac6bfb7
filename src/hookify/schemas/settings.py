"""Pydantic model for the .hookify.yaml settings file."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

DEFAULT_SETTINGS_FILE = ".hookify.yaml"


class SettingsError(ValueError):
    """The settings file is missing, unreadable or invalid."""


class AnalyzerSettings(BaseModel):
    # Accepted spellings of the framework module, compared by exact equality.
    framework_modules: list[str] = Field(
        default_factory=lambda: ["React", "react", "react-native"]
    )
    # Base classes tried in order; the first tier with matches wins.
    base_classes: list[str] = Field(default_factory=lambda: ["Component", "PureComponent"])
    namespace_fallback: str = "React"
    # Methods with no function-component equivalent.
    blocking_methods: list[str] = Field(
        default_factory=lambda: ["componentDidCatch", "getDerivedStateFromError"]
    )
    union_base_classes: bool = False
    require_render_only: bool = False
    extensions: list[str] = Field(default_factory=lambda: [".js", ".jsx", ".mjs", ".cjs"])
    skip_dirs: list[str] = Field(default_factory=list)


def load_settings(path: Path | None = None) -> AnalyzerSettings:
    """Load settings from a YAML file.

    ``None`` returns the defaults. A file that does not exist, is not a YAML
    mapping, or has invalid values raises SettingsError.
    """
    if path is None:
        return AnalyzerSettings()

    try:
        raw = yaml.safe_load(path.read_text())
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise SettingsError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return AnalyzerSettings()
    if not isinstance(raw, dict):
        raise SettingsError(f"{path}: expected a mapping at the top level")

    try:
        return AnalyzerSettings.model_validate(raw)
    except ValidationError as exc:
        raise SettingsError(f"{path}: {exc}") from exc


def find_settings_file(directory: Path) -> Path | None:
    """Return ``directory/.hookify.yaml`` if it exists."""
    candidate = directory / DEFAULT_SETTINGS_FILE
    return candidate if candidate.is_file() else None
