"""Single-entry cache for compiled time formatters.

A status clock only ever needs the formatters for its current settings, so
the cache remembers exactly one key. Setting a new key evicts the old entry
and a lookup with any other key misses.
"""

from statusclock.domain.protocols import Cache, K, V


class FormatCache(Cache[K, V]):
    """Cache holding the value for the most recently stored key only.

    Example:
        >>> cache = FormatCache[str, int]()
        >>> cache.set("h:mm a", 1)
        >>> cache.get("h:mm a")
        1
        >>> cache.set("HH:mm", 2)
        >>> cache.get("h:mm a") is None
        True
    """

    def __init__(self) -> None:
        self._key: K | None = None
        self._value: V | None = None

    @property
    def last_key(self) -> K | None:
        """The key of the cached entry, or None when empty."""
        return self._key

    def get(self, key: K) -> V | None:
        if self._value is None or key != self._key:
            return None
        return self._value

    def set(self, key: K, value: V) -> None:
        self._key = key
        self._value = value

    def clear(self) -> None:
        self._key = None
        self._value = None
