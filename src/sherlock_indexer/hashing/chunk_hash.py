"""Deterministic line-range hashing for change detection."""

from typing import Optional

import xxhash

from ..parser.errors import InvalidRange
from ..parser.extractor import read_source


def split_lines(text: str) -> list[str]:
    """Split text on "\\n", dropping a trailing "\\r" from each line.

    A final newline does not produce an empty last line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def hash_lines(
    lines: list[str],
    start_line: Optional[int] = None,
    end_line: Optional[int] = None,
) -> str:
    """Hash an inclusive, 1-based line range of already split lines.

    Bounds default to the whole file and are clamped to it.

    Raises:
        InvalidRange: The clamped range is empty or outside the file.
    """
    total = len(lines)
    start = max(start_line if start_line is not None else 1, 1) - 1
    end = min(end_line if end_line is not None else total, total)

    if start >= total or end < 0 or end > total or start >= end:
        raise InvalidRange(
            f"Invalid line range: start_line={start_line}, end_line={end_line}, total_lines={total}"
        )

    chunk = "\n".join(lines[start:end])
    return xxhash.xxh64(chunk.encode("utf-8")).hexdigest()


def get_chunk_hash(
    file_path: str,
    start_line: Optional[int] = None,
    end_line: Optional[int] = None,
) -> str:
    """Hash lines start_line..end_line (inclusive) of a file.

    Args:
        file_path: Path to the file
        start_line: First line, 1-based (default 1)
        end_line: Last line, 1-based (default: last line of the file)

    Returns:
        Lowercase hex xxh64 digest (seed 0)

    Raises:
        ReadFailure: The file could not be read.
        InvalidRange: The clamped range is empty or outside the file.
    """
    content = read_source(file_path)
    return hash_lines(split_lines(content), start_line, end_line)
