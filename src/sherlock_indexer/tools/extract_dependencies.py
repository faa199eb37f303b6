"""Extract dependencies - placeholder until import analysis exists."""

from typing import Optional

from ..parser import ExtractRequest, extract_dependencies as extract_file_dependencies
from .paths import resolve_file_path


def extract_dependencies(
    repo_path: str,
    file_path: str,
    request: Optional[ExtractRequest] = None,
    repos_root: Optional[str] = None
) -> dict:
    """Extract dependencies from one file of a repository.

    Always returns an empty list: callers must read this as "not
    implemented", not as "no dependencies".
    """
    full_path = resolve_file_path(repo_path, file_path, repos_root)
    deps = extract_file_dependencies(full_path)

    return {
        "symbols": [d.to_dict() for d in deps],
        "success": True,
    }
