"""Todo service: CRUD over todos with a cached listing."""

from dataclasses import replace

from todo_api.config import settings
from todo_api.entities import TodoEntity
from todo_api.errors import ValidationError
from todo_api.protocols import CacheStore, TodoStore
from todo_api.services.list_cache import ListCache


class TodoService:
    """Orchestrates todo persistence and the read-through listing cache.

    Every successful mutation invalidates the listing; failed mutations
    leave the cache alone.
    """

    def __init__(self, repository: TodoStore, cache: CacheStore) -> None:
        """Initialize the todo service.

        Args:
            repository: Todo persistence (required).
            cache: Cache backend for the todo listing (required).
        """
        self._repository = repository
        self._list_cache = ListCache(
            cache,
            key=f"{settings.cache_key_prefix}:todos:find-all",
            item_type=TodoEntity,
        )

    def find_all(self) -> list[TodoEntity]:
        """Return every todo, served from cache when possible."""
        return self._list_cache.find_all(self._repository.find_all)

    def find_by_id(self, todo_id: int) -> TodoEntity:
        """Return a single todo (not cached)."""
        _check_id(todo_id)
        return self._repository.find_by_id(todo_id)

    def create(self, todo: TodoEntity) -> TodoEntity:
        """Persist a new todo."""
        created = self._repository.create(todo)
        self._list_cache.invalidate()
        return created

    def update(self, todo_id: int, todo: TodoEntity) -> TodoEntity:
        """Apply a partial update to an existing todo.

        Empty strings and a missing due date keep the stored values;
        ``completed`` is always taken from ``todo``.

        Raises:
            ValidationError: If ``todo_id`` is not positive
            TodoNotFoundError: If no such todo exists
        """
        _check_id(todo_id)
        existing = self._repository.find_by_id(todo_id)

        merged = replace(
            existing,
            title=todo.title or existing.title,
            content=todo.content or existing.content,
            due_date=todo.due_date if todo.due_date is not None else existing.due_date,
            completed=todo.completed,
        )

        updated = self._repository.update(merged)
        self._list_cache.invalidate()
        return updated

    def delete(self, todo_id: int) -> None:
        """Delete a todo.

        Raises:
            ValidationError: If ``todo_id`` is not positive
            TodoNotFoundError: If no such todo exists
        """
        _check_id(todo_id)
        self._repository.find_by_id(todo_id)
        self._repository.delete(todo_id)
        self._list_cache.invalidate()

    @property
    def list_cache(self) -> ListCache[TodoEntity]:
        """Get the listing cache (for testing)."""
        return self._list_cache


def _check_id(todo_id: int) -> None:
    if todo_id <= 0:
        raise ValidationError("invalid todo id")
