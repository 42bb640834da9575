"""Redis implementation of CacheStore.

Values are plain strings (JSON produced by the service layer) stored with
``SET ... EX``. It's the default implementation and satisfies the
CacheStore protocol.
"""

import redis

from todo_api.config import get_redis_client
from todo_api.errors import CacheError


class RedisCacheRepository:
    """Redis implementation of the string key-value cache.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    The per-call deadline comes from the client's ``socket_timeout``
    (see ``get_redis_client``), so a hung Redis surfaces as ``CacheError``
    after a fixed delay instead of blocking the request.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize the Redis cache repository.

        Args:
            redis_client: Redis client instance. If None, creates default.
        """
        self._client = redis_client or get_redis_client()

    @classmethod
    def create(cls) -> "RedisCacheRepository":
        """Factory method to create RedisCacheRepository with defaults.

        Returns:
            Configured RedisCacheRepository
        """
        return cls()

    def get(self, key: str) -> str:
        """Get the value stored under a key.

        Args:
            key: The cache key

        Returns:
            The stored value, or "" when the key does not exist

        Raises:
            CacheError: If Redis fails or times out
        """
        try:
            value = self._client.get(key)
        except redis.RedisError as e:
            raise CacheError(f"failed to get cache key {key!r}: {e}") from e

        if value is None:
            return ""
        if isinstance(value, bytes):
            return value.decode()
        return value

    def set(self, key: str, value: str, ttl: int) -> None:
        """Store a value with an expiry.

        Args:
            key: The cache key
            value: The string-encoded value
            ttl: Time-to-live in seconds

        Raises:
            CacheError: If Redis fails or times out
        """
        try:
            self._client.set(key, value, ex=ttl)
        except redis.RedisError as e:
            raise CacheError(f"failed to set cache key {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        """Delete a key.

        Args:
            key: The cache key

        Raises:
            CacheError: If Redis fails or times out
        """
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise CacheError(f"failed to delete cache key {key!r}: {e}") from e

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
