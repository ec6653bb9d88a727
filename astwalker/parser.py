"""Tree-Sitter Parsing Layer: source text → ESTree program."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from tree_sitter import Tree

from .frontends import get_frontend

logger = logging.getLogger(__name__)


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


class Parser:
    """Parses source with tree-sitter and converts the result to ESTree dicts."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse_tree(self, source: str, language: str) -> Tree:
        """Return the raw tree-sitter tree for *source*."""
        parser = self._factory.get_parser(language)
        return parser.parse(source.encode("utf-8"))

    def parse(self, source: str, language: str) -> dict[str, Any]:
        """Return an ESTree ``Program`` for *source*."""
        frontend = get_frontend(language)
        tree = self.parse_tree(source, language)
        logger.debug("Parsed %d bytes of %s", len(source), language)
        return frontend.build(tree, source.encode("utf-8"))
