"""tree-sitter frontend: JavaScript/JSX source text -> syntax tree."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

import tree_sitter_javascript
from tree_sitter import Language, Parser, Tree

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def javascript_language() -> Language:
    """The JavaScript grammar (JSX included)."""
    return Language(tree_sitter_javascript.language())


def parse_source(source: str | bytes, filename: str = "<source>") -> Tree:
    """Parse JavaScript/JSX source into a tree.

    A tree containing syntax errors is still returned: tree-sitter recovers
    around the error and the remaining structure is usable.
    """
    data = source.encode("utf-8") if isinstance(source, str) else source
    # One parser per call; nothing is shared between callers.
    parser = Parser(javascript_language())
    tree = parser.parse(data)
    if tree.root_node.has_error:
        log.debug("Syntax errors while parsing %s; continuing with recovered tree", filename)
    return tree


def parse_file(path: Path) -> Tree:
    """Read a file (UTF-8, undecodable bytes replaced) and parse it."""
    return parse_source(path.read_text(encoding="utf-8", errors="replace"), filename=str(path))
