"""Get file outline - symbols in a specific file, nested."""

import logging
from typing import Optional

from ..parser import IndexerError, build_symbol_tree, detect_language, extract_symbols
from .extract_symbols import INTERNAL_ERROR
from .paths import resolve_file_path

logger = logging.getLogger(__name__)


def get_file_outline(
    repo_path: str,
    file_path: str,
    repos_root: Optional[str] = None
) -> dict:
    """Get symbols in a file with hierarchical structure.

    Args:
        repo_path: Repository directory
        file_path: Path to the file within the repository
        repos_root: Base directory for relative repository paths

    Returns:
        Dict with symbols outline
    """
    full_path = resolve_file_path(repo_path, file_path, repos_root)

    try:
        spans = []
        symbols = extract_symbols(full_path, spans=spans)
    except IndexerError as e:
        logger.error("Failed to build outline: %s: %s", type(e).__name__, e)
        return {"success": False, "error": INTERNAL_ERROR}

    tree = build_symbol_tree(symbols, spans)

    return {
        "file": full_path,
        "language": detect_language(full_path),
        "symbols": [_node_to_dict(n) for n in tree],
        "success": True,
    }


def _node_to_dict(node) -> dict:
    """Convert SymbolNode to output dict."""
    result = {
        "id": node.symbol.id,
        "symbol_type": node.symbol.symbol_type,
        "symbol_name": node.symbol.symbol_name,
        "signature": node.symbol.signature,
        "exported": node.symbol.exported,
        "line_start": node.symbol.line_start,
        "line_end": node.symbol.line_end,
    }

    if node.children:
        result["children"] = [_node_to_dict(c) for c in node.children]

    return result
