"""Tree-sitter based parser for JavaScript sources.

Produces trees in the ``tree-sitter`` dialect for callers that do not bring
their own parser backend.
"""

from __future__ import annotations

from dataclasses import dataclass

from tree_sitter import Parser, Tree

from .dialects import TreeSitterAdapter
from .models import TaggedAst
from .ts_lang import load_javascript_language


@dataclass
class ParsedSource:
    tree: Tree
    source_bytes: bytes

    def tagged(self) -> TaggedAst:
        return TaggedAst(dialect=TreeSitterAdapter.name, tree=self.tree)


class JavaScriptParser:
    def __init__(self) -> None:
        self._parser = Parser(load_javascript_language())

    def parse_bytes(self, source_bytes: bytes) -> ParsedSource:
        tree = self._parser.parse(source_bytes)
        return ParsedSource(tree=tree, source_bytes=source_bytes)

    def parse_text(self, source_text: str) -> ParsedSource:
        return self.parse_bytes(source_text.encode("utf-8"))

    def parse_file(self, path: str) -> ParsedSource:
        with open(path, "rb") as handle:
            source_bytes = handle.read()
        return self.parse_bytes(source_bytes)
