"""Multi-language code symbol extraction and chunk hashing."""

__version__ = "0.1.0"
