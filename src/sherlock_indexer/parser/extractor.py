"""Generic syntax tree symbol extractor using tree-sitter."""

from pathlib import Path
from typing import Optional

from .errors import ReadFailure, TextDecodeFailure, UnsupportedLanguage
from .languages import LANGUAGE_REGISTRY, LanguageSpec, detect_language
from .registry import GrammarRegistry, get_registry
from .symbols import CodeSymbol, build_symbol


def read_source(file_path: str) -> str:
    """Read a file as UTF-8 text.

    Raises:
        ReadFailure: The file is missing, unreadable or not valid UTF-8.
    """
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ReadFailure(f"Failed to read file {file_path}: {e}") from e


def extract_symbols(
    file_path: str,
    registry: Optional[GrammarRegistry] = None,
    spans: Optional[list] = None,
) -> list[CodeSymbol]:
    """Read, parse and extract symbols from a source file.

    Args:
        file_path: Path to the source file; also recorded on every symbol
        registry: Grammar registry (defaults to the process-wide one)
        spans: When given, receives (start_byte, end_byte) per symbol

    Returns:
        Symbols in pre-order visitation order

    Raises:
        UnsupportedLanguage, ReadFailure, ParseFailure, TextDecodeFailure
    """
    language = detect_language(file_path)
    if language is None:
        raise UnsupportedLanguage(f"Unsupported file type: {file_path}")

    if registry is None:
        registry = get_registry()
    registry.grammar_for(language)

    content = read_source(file_path)
    return parse_source(content, file_path, language, registry, spans)


def parse_source(
    content: str,
    file_path: str,
    language: str,
    registry: Optional[GrammarRegistry] = None,
    spans: Optional[list] = None,
) -> list[CodeSymbol]:
    """Parse source text and extract symbols.

    Args:
        content: Raw source code
        file_path: File path (for IDs and the symbol records)
        language: Language identifier (must be in LANGUAGE_REGISTRY)
        registry: Grammar registry (defaults to the process-wide one)
        spans: When given, receives (start_byte, end_byte) per symbol
    """
    spec = LANGUAGE_REGISTRY.get(language)
    if spec is None:
        raise UnsupportedLanguage(f"Unsupported language: {language}")

    if registry is None:
        registry = get_registry()

    source_bytes = content.encode("utf-8")
    tree = registry.parse(source_bytes, language)

    return extract_from_tree(tree.root_node, spec, source_bytes, file_path, spans)


def extract_from_tree(
    root,
    spec: LanguageSpec,
    source_bytes: bytes,
    file_path: str,
    spans: Optional[list] = None,
) -> list[CodeSymbol]:
    """Walk a parsed tree and collect symbols in pre-order.

    spans, when given, receives each symbol's node byte range in the
    same order, for callers that need exact nesting.
    """
    symbols: list[CodeSymbol] = []
    _walk_tree(root, spec, source_bytes, file_path, symbols, spans)
    return symbols


def extract_dependencies(file_path: str) -> list[CodeSymbol]:
    """Dependency extraction is not implemented yet.

    The empty result means "not implemented", not "no dependencies".
    """
    return []


def _walk_tree(
    node,
    spec: LanguageSpec,
    source_bytes: bytes,
    file_path: str,
    symbols: list,
    spans: Optional[list] = None,
):
    """Recursively walk the tree, pre-order, visiting every child."""
    symbol = _extract_symbol(node, spec, source_bytes, file_path)
    if symbol is not None:
        symbols.append(symbol)
        if spans is not None:
            spans.append((node.start_byte, node.end_byte))

    for child in node.children:
        _walk_tree(child, spec, source_bytes, file_path, symbols, spans)


def _extract_symbol(
    node, spec: LanguageSpec, source_bytes: bytes, file_path: str
) -> Optional[CodeSymbol]:
    """Extract a CodeSymbol from a node, or None if it is not a symbol."""
    symbol_type = spec.symbol_node_types.get(node.type)
    if symbol_type is None:
        return None

    name_node = node.child_by_field_name(spec.name_field)
    if name_node is None:
        return None

    name = node_text(name_node, source_bytes)

    if spec.strict_signature:
        signature = extract_signature(node, source_bytes)
    else:
        try:
            signature = extract_signature(node, source_bytes)
        except TextDecodeFailure:
            signature = None

    exported = _is_exported(node, name, spec)

    return build_symbol(
        node,
        name=name,
        symbol_type=symbol_type,
        file_path=file_path,
        signature=signature,
        exported=exported,
        visibility=_visibility(exported, spec),
    )


def node_text(node, source_bytes: bytes) -> str:
    """Decode a node's byte range.

    Raises:
        TextDecodeFailure: The range is not valid UTF-8.
    """
    try:
        return source_bytes[node.start_byte:node.end_byte].decode("utf-8")
    except UnicodeDecodeError as e:
        raise TextDecodeFailure(
            f"Invalid UTF-8 in {node.type} at bytes {node.start_byte}-{node.end_byte}"
        ) from e


def extract_signature(node, source_bytes: bytes) -> str:
    """Return the first line of a node's text, stripped.

    A textual approximation: multi-line declarations are cut at the
    first newline.
    """
    text = node_text(node, source_bytes)
    first_line = text.split("\n", 1)[0]
    return first_line.strip()


def _is_exported(node, name: str, spec: LanguageSpec) -> bool:
    if spec.export_strategy == "visibility_modifier":
        return node.child_count > 0 and node.children[0].type == "visibility_modifier"
    elif spec.export_strategy == "uppercase_name":
        return bool(name) and name[0].isupper()
    elif spec.export_strategy == "always":
        return True
    return False


def _visibility(exported: bool, spec: LanguageSpec) -> Optional[str]:
    if spec.visibility_strategy == "from_export":
        return "public" if exported else "private"
    elif spec.visibility_strategy == "public":
        return "public"
    return None
