"""Get chunk hash - fingerprint a line range of a file."""

import logging
from typing import Optional

from ..hashing import get_chunk_hash as hash_file_chunk
from ..parser import IndexerError, ExtractRequest
from .extract_symbols import INTERNAL_ERROR
from .paths import resolve_file_path

logger = logging.getLogger(__name__)


def get_chunk_hash(
    repo_path: str,
    file_path: str,
    request: Optional[ExtractRequest] = None,
    repos_root: Optional[str] = None
) -> dict:
    """Hash a line range of one file.

    Args:
        repo_path: Repository directory
        file_path: Path to the file within the repository
        request: start_line/end_line bounds, 1-based and inclusive
        repos_root: Base directory for relative repository paths

    Returns:
        Dict with hex hash and success flag
    """
    request = request or ExtractRequest()
    full_path = resolve_file_path(repo_path, file_path, repos_root)

    try:
        digest = hash_file_chunk(full_path, request.start_line, request.end_line)
    except IndexerError as e:
        logger.error("Failed to get chunk hash: %s: %s", type(e).__name__, e)
        return {"success": False, "error": INTERNAL_ERROR}

    return {
        "hash": digest,
        "success": True,
    }
