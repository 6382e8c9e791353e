"""Tree-Sitter parsing layer for markup-capable grammars."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

# Grammars whose trees contain jsx_* nodes
MARKUP_LANGUAGES: tuple[str, ...] = ("javascript", "tsx")


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
    """Parses source text into a tree-sitter tree containing markup nodes."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: str, language: str):
        if language not in MARKUP_LANGUAGES:
            raise ValueError(
                f"Language {language!r} has no markup syntax; "
                f"expected one of {', '.join(MARKUP_LANGUAGES)}"
            )
        logger.debug("Parsing %d chars of %s", len(source), language)
        parser = self._factory.get_parser(language)
        return parser.parse(source.encode("utf-8"))
