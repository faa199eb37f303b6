"""Error taxonomy for extraction and hashing requests.

Every error is terminal for the request that raised it. The tools layer
logs the concrete type and reports a generic failure to the caller.
"""


class IndexerError(Exception):
    """Base class for all indexer failures."""


class UnsupportedLanguage(IndexerError):
    """File extension is unknown, or no grammar is loaded for the language."""


class ReadFailure(IndexerError):
    """Source file could not be read as UTF-8 text."""


class ParseFailure(IndexerError):
    """tree-sitter did not produce a syntax tree."""


class TextDecodeFailure(IndexerError):
    """A node's byte range is not valid UTF-8."""


class InvalidRange(IndexerError):
    """Chunk bounds are empty or outside the file."""
