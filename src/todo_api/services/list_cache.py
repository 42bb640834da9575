"""Read-through cache for "list all" queries.

Both entity services keep their full listing under one fixed key. Reads go
through the cache; successful writes invalidate the key so the next read
repopulates it from the database.

Policy:
    - A failing cache lookup propagates (the loader is not called).
    - A value that cannot be decoded is treated as a miss.
    - Populating and invalidating are best-effort: failures are logged,
      never raised.

A read that loaded stale rows can still repopulate the key after a
concurrent write invalidated it. That race is accepted.
"""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

import pydantic
from pydantic import TypeAdapter

from todo_api.config import settings
from todo_api.errors import CacheError
from todo_api.protocols import CacheStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ListCache(Generic[T]):
    """Read-through cache for one entity listing.

    Example:
        ```python
        todos = ListCache(cache, "todo-api:todos:find-all", TodoEntity)
        items = todos.find_all(repository.find_all)
        todos.invalidate()
        ```
    """

    def __init__(
        self,
        cache: CacheStore,
        key: str,
        item_type: type[T],
        ttl: int | None = None,
        exclude_fields: set[str] | None = None,
    ) -> None:
        """Initialize the list cache.

        Args:
            cache: Cache storage backend (required).
            key: Fixed cache key for the listing.
            item_type: Entity type of each list element.
            ttl: Time-to-live in seconds. Defaults to settings.
            exclude_fields: Entity fields never written to the cache.
        """
        self._cache = cache
        self._key = key
        self._ttl = ttl or settings.cache_list_ttl
        self._adapter = TypeAdapter(list[item_type])
        self._exclude = {"__all__": exclude_fields} if exclude_fields else None

    @property
    def key(self) -> str:
        """Get the cache key."""
        return self._key

    def find_all(self, loader: Callable[[], list[T]]) -> list[T]:
        """Return the cached listing, loading it on a miss.

        Args:
            loader: Fetches the full listing from persistence.

        Returns:
            The decoded cache hit, or the loader result

        Raises:
            CacheError: If the cache lookup fails
        """
        data = self._cache.get(self._key)

        if data:
            try:
                items = self._adapter.validate_json(data)
            except pydantic.ValidationError as e:
                logger.warning("Discarding undecodable cache entry %s: %s", self._key, e)
            else:
                logger.debug("Cache hit for %s", self._key)
                return items

        logger.debug("Cache miss for %s", self._key)
        items = loader()

        encoded = self._adapter.dump_json(items, exclude=self._exclude).decode()
        try:
            self._cache.set(self._key, encoded, self._ttl)
        except CacheError as e:
            logger.warning("Failed to populate cache %s: %s", self._key, e)

        return items

    def invalidate(self) -> None:
        """Drop the cached listing."""
        try:
            self._cache.delete(self._key)
        except CacheError as e:
            logger.warning("Failed to invalidate cache %s: %s", self._key, e)
