"""Extract symbols - declarations in a single file."""

import logging
from typing import Optional

from ..parser import IndexerError, ExtractRequest, extract_symbols as extract_file_symbols
from .paths import resolve_file_path

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def extract_symbols(
    repo_path: str,
    file_path: str,
    request: Optional[ExtractRequest] = None,
    repos_root: Optional[str] = None
) -> dict:
    """Extract symbols from one file of a repository.

    Args:
        repo_path: Repository directory
        file_path: Path to the file within the repository
        request: Optional line bounds (accepted, not used for extraction)
        repos_root: Base directory for relative repository paths

    Returns:
        Dict with symbols and success flag
    """
    full_path = resolve_file_path(repo_path, file_path, repos_root)

    try:
        symbols = extract_file_symbols(full_path)
    except IndexerError as e:
        logger.error("Failed to extract symbols: %s: %s", type(e).__name__, e)
        return {"success": False, "error": INTERNAL_ERROR}

    return {
        "symbols": [s.to_dict() for s in symbols],
        "success": True,
    }
