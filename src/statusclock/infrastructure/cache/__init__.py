"""Caching implementations for statusclock."""

from statusclock.infrastructure.cache.format_cache import FormatCache

__all__ = [
    "FormatCache",
]
