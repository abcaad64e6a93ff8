from __future__ import annotations


class CacheError(Exception):
    """Base error for the cache."""


class EncodingError(CacheError):
    """Raised when a value cannot be turned into bytes."""


class DecodingError(CacheError):
    """Raised when stored bytes cannot be read back as the requested shape."""


class ConfigError(CacheError):
    """Raised when cache settings are invalid."""
