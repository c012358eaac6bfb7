"""Syntax tree package for hookify.

Provides:
    parse_source(text) -> tree_sitter.Tree
    Collection.of(tree).find(node_type, shape)
"""

from __future__ import annotations

from hookify.tree.collection import Collection, matches
from hookify.tree.nodes import MalformedTreeError
from hookify.tree.parser import parse_file, parse_source

__all__ = ["Collection", "MalformedTreeError", "matches", "parse_file", "parse_source"]
