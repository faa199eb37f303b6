"""Hashing package for chunk change detection."""

from .chunk_hash import get_chunk_hash, hash_lines, split_lines

__all__ = ["get_chunk_hash", "hash_lines", "split_lines"]
