"""Cache protocol."""

from typing import Protocol, TypeVar

__all__ = ["Cache", "K", "V"]

# Type variables for generic Cache protocol
# Note: Invariant (default) is correct for Cache since we both read and write
K = TypeVar("K", contravariant=False)
V = TypeVar("V", contravariant=False)


class Cache(Protocol[K, V]):
    """Protocol for caching implementations.

    Type Parameters:
        K: The key type
        V: The value type
    """

    def get(self, key: K) -> V | None:
        """Get a value from the cache.

        Args:
            key: The cache key

        Returns:
            The cached value if found, None otherwise
        """
        ...

    def set(self, key: K, value: V) -> None:
        """Set a value in the cache.

        Args:
            key: The cache key
            value: The value to cache
        """
        ...

    def clear(self) -> None:
        """Drop every cached entry."""
        ...

