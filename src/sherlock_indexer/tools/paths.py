"""Request path resolution shared by the file tools."""

import os
from typing import Optional


def resolve_file_path(
    repo_path: str,
    file_path: str,
    repos_root: Optional[str] = None
) -> str:
    """Join a repository path and a file path.

    A relative repo_path is placed beneath repos_root when one is
    configured. The file is not checked for existence.
    Example: ("repos/api", "src/main.go") -> "repos/api/src/main.go"
    """
    if repos_root and not os.path.isabs(repo_path):
        repo_path = os.path.join(repos_root, repo_path)
    return f"{repo_path.rstrip('/')}/{file_path.lstrip('/')}"
