"""Shared utilities for hookify."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def snippet(source: str, lineno: int, max_len: int = 160) -> str:
    """Return the source line at lineno (1-based), stripped and truncated."""
    lines = source.splitlines()
    if 0 < lineno <= len(lines):
        return lines[lineno - 1].strip()[:max_len]
    return ""

# Directories to skip during file discovery
SKIP_DIRS = {
    ".git", "node_modules", "bower_components", "dist", "build", "coverage",
    ".next", ".cache", ".turbo", "out", "__pycache__", ".venv", "venv",
}

# Maximum file size to read (skip bundles and generated code)
MAX_FILE_SIZE = 2 * 1024 * 1024  # 2 MB


def discover_files(
    workspace: Path,
    extensions: Iterable[str] | None = None,
    skip_dirs: Iterable[str] = (),
) -> list[Path]:
    """Walk workspace, skipping ignored dirs and large files.

    With ``extensions`` only files with one of those suffixes are returned.
    """
    skip = SKIP_DIRS | set(skip_dirs)
    wanted = {e.lower() for e in extensions} if extensions is not None else None
    files: list[Path] = []
    for item in sorted(workspace.rglob("*")):
        if item.is_dir():
            continue
        if any(part in skip for part in item.relative_to(workspace).parts):
            continue
        if wanted is not None and item.suffix.lower() not in wanted:
            continue
        try:
            if item.stat().st_size > MAX_FILE_SIZE:
                continue
        except OSError:
            continue
        files.append(item)
    return files
