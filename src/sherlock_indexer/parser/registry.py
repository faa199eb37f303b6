"""Grammar registry: one tree-sitter grammar per supported language."""

import logging
import threading
from typing import Optional

from tree_sitter import Language, Parser, Tree
from tree_sitter_language_pack import get_language

from .errors import ParseFailure, UnsupportedLanguage
from .languages import LANGUAGE_REGISTRY

logger = logging.getLogger(__name__)


class GrammarRegistry:
    """Loaded grammars keyed by language identifier.

    Built once and only read afterwards, so a single instance can serve
    any number of concurrent requests. Parsers are created per call.
    """

    def __init__(self, languages: Optional[list[str]] = None):
        if languages is None:
            languages = list(LANGUAGE_REGISTRY)

        self._grammars: dict[str, Language] = {}
        for language in languages:
            spec = LANGUAGE_REGISTRY[language]
            self._grammars[language] = get_language(spec.ts_language)

        logger.debug("Loaded grammars: %s", ", ".join(self._grammars))

    def __contains__(self, language: str) -> bool:
        return language in self._grammars

    @property
    def languages(self) -> list[str]:
        return list(self._grammars)

    def grammar_for(self, language: str) -> Language:
        """Return the grammar for a language identifier.

        Raises:
            UnsupportedLanguage: No grammar is loaded for the language.
        """
        grammar = self._grammars.get(language)
        if grammar is None:
            raise UnsupportedLanguage(f"Language parser not available: {language}")
        return grammar

    def parse(self, source: bytes, language: str) -> Tree:
        """Parse source bytes with the language's grammar.

        Raises:
            UnsupportedLanguage: No grammar is loaded for the language.
            ParseFailure: tree-sitter did not produce a tree.
        """
        parser = Parser(self.grammar_for(language))
        try:
            tree = parser.parse(source)
        except (ValueError, TypeError) as e:
            raise ParseFailure(f"Failed to parse file: {e}") from e

        if tree is None:
            raise ParseFailure("Failed to parse file")
        return tree


_default_registry: Optional[GrammarRegistry] = None
_default_registry_lock = threading.Lock()


def get_registry() -> GrammarRegistry:
    """Return the process-wide registry, loading grammars on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = GrammarRegistry()
    return _default_registry
