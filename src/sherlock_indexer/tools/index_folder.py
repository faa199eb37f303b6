"""Index local folder tool - walk, extract, collect."""

import logging
from pathlib import Path

from ..parser import IndexerError, LANGUAGE_EXTENSIONS, detect_language, extract_symbols

logger = logging.getLogger(__name__)


# Directory names to skip while walking
SKIP_DIRS = {
    "node_modules", "vendor", "venv", ".venv", "__pycache__",
    "dist", "build", ".git", ".tox", ".mypy_cache",
    "target", ".gradle",
}


def should_skip_file(rel_path: str) -> bool:
    """Check if a relative path lies inside a skipped directory."""
    parts = rel_path.replace("\\", "/").split("/")[:-1]
    return any(part in SKIP_DIRS for part in parts)


def discover_local_files(
    folder_path: Path, max_files: int = 500
) -> tuple[list[Path], bool]:
    """Discover supported source files in a local folder.

    Args:
        folder_path: Root folder to scan
        max_files: Maximum number of files to return

    Returns:
        (sorted source file paths, whether more files were left out)
    """
    files = []
    truncated = False

    for file_path in sorted(folder_path.rglob("*")):
        if not file_path.is_file():
            continue

        rel_path = file_path.relative_to(folder_path).as_posix()
        if should_skip_file(rel_path):
            continue

        if file_path.suffix.lower() not in LANGUAGE_EXTENSIONS:
            continue

        if len(files) >= max_files:
            truncated = True
            break

        files.append(file_path)

    return files, truncated


def index_folder(path: str, max_files: int = 500) -> dict:
    """Extract symbols from every supported file in a folder.

    Files whose extraction fails are skipped with a warning.

    Args:
        path: Path to local folder (absolute or relative)
        max_files: Maximum number of files to index

    Returns:
        Dict with indexing results
    """
    folder_path = Path(path).expanduser().resolve()

    if not folder_path.exists():
        return {"success": False, "error": f"Folder not found: {path}"}

    if not folder_path.is_dir():
        return {"success": False, "error": f"Path is not a directory: {path}"}

    source_files, truncated = discover_local_files(folder_path, max_files=max_files)
    logger.info("Found %d code files to index in %s", len(source_files), folder_path)

    warnings = []
    all_symbols = []
    languages: dict[str, int] = {}
    parsed_files = []

    for file_path in source_files:
        rel_path = file_path.relative_to(folder_path).as_posix()

        try:
            symbols = extract_symbols(str(file_path))
        except IndexerError as e:
            logger.warning("Failed to extract symbols from %s, skipping: %s", rel_path, e)
            warnings.append(f"Failed to extract {rel_path}: {type(e).__name__}")
            continue

        language = detect_language(rel_path)
        languages[language] = languages.get(language, 0) + 1
        parsed_files.append(rel_path)
        all_symbols.extend(symbols)

    logger.info(
        "Folder indexing completed: %d files, %d symbols",
        len(parsed_files), len(all_symbols),
    )

    result = {
        "success": True,
        "folder_path": str(folder_path),
        "file_count": len(parsed_files),
        "symbol_count": len(all_symbols),
        "languages": languages,
        "symbols": [s.to_dict() for s in all_symbols],
    }

    if warnings:
        result["warnings"] = warnings

    if truncated:
        result["note"] = f"Folder has many files; indexed first {max_files}"

    return result
