"""Parser package for extracting symbols from source code."""

from .errors import (
    IndexerError,
    UnsupportedLanguage,
    ReadFailure,
    ParseFailure,
    TextDecodeFailure,
    InvalidRange,
)
from .symbols import CodeSymbol, ExtractRequest, make_symbol_id
from .languages import LanguageSpec, LANGUAGE_REGISTRY, LANGUAGE_EXTENSIONS, detect_language
from .registry import GrammarRegistry, get_registry
from .extractor import (
    extract_symbols,
    extract_dependencies,
    extract_from_tree,
    parse_source,
    read_source,
)
from .hierarchy import SymbolNode, build_symbol_tree, flatten_tree

__all__ = [
    "IndexerError",
    "UnsupportedLanguage",
    "ReadFailure",
    "ParseFailure",
    "TextDecodeFailure",
    "InvalidRange",
    "CodeSymbol",
    "ExtractRequest",
    "make_symbol_id",
    "LanguageSpec",
    "LANGUAGE_REGISTRY",
    "LANGUAGE_EXTENSIONS",
    "detect_language",
    "GrammarRegistry",
    "get_registry",
    "extract_symbols",
    "extract_dependencies",
    "extract_from_tree",
    "parse_source",
    "read_source",
    "SymbolNode",
    "build_symbol_tree",
    "flatten_tree",
]
