"""Cache storage protocol.

Defines the interface for a key-value store holding string-encoded JSON
values with a TTL. The default implementation is Redis.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for key-value cache backends.

    Similar to Go's interface pattern - any type that implements these
    methods satisfies the protocol, no explicit inheritance needed.

    Every method raises ``CacheError`` when the backend fails.

    Example:
        ```python
        from todo_api.protocols import CacheStore

        cache: CacheStore = RedisCacheRepository.create()
        ```
    """

    def get(self, key: str) -> str:
        """Get the value stored under a key.

        Args:
            key: The cache key

        Returns:
            The stored value, or an empty string when the key is missing
        """
        ...

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value under a key.

        Args:
            key: The cache key
            value: The string-encoded value
            ttl: Time-to-live in seconds
        """
        ...

    def delete(self, key: str) -> None:
        """Delete a key. Deleting a missing key is not an error.

        Args:
            key: The cache key
        """
        ...

    def health_check(self) -> bool:
        """Check if the cache is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
