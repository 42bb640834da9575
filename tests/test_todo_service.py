"""
Tests for TodoService: read-through listing cache and partial updates.
"""

import json
from datetime import datetime

import pytest
from pydantic import TypeAdapter

from todo_api.entities import TodoEntity
from todo_api.errors import CacheError, DatabaseError, TodoNotFoundError, ValidationError
from todo_api.services import TodoService

TODOS = [
    TodoEntity(id=1, title="Test Todo 1", content="first", user_id=7),
    TodoEntity(id=2, title="Test Todo 2", due_date=datetime(2030, 1, 2, 3, 4, 5), completed=True, user_id=7),
]


def encode(todos: list[TodoEntity]) -> str:
    return TypeAdapter(list[TodoEntity]).dump_json(todos).decode()


@pytest.fixture
def service(todo_repository, cache):
    return TodoService(repository=todo_repository, cache=cache)


def test_list_cache_key(service):
    """The listing lives under a fixed todos key."""
    assert service.list_cache.key.endswith(":todos:find-all")


def test_find_all_cache_hit(service, todo_repository, cache):
    """A valid cached listing is returned without touching the database."""
    cache.get.return_value = encode(TODOS)

    todos = service.find_all()

    assert todos == TODOS
    cache.get.assert_called_once_with(service.list_cache.key)
    todo_repository.find_all.assert_not_called()
    cache.set.assert_not_called()


def test_find_all_cache_miss_populates_cache(service, todo_repository, cache):
    """A miss loads from the database and caches for five minutes."""
    todo_repository.find_all.return_value = TODOS

    todos = service.find_all()

    assert todos == TODOS
    todo_repository.find_all.assert_called_once_with()
    key, value, ttl = cache.set.call_args.args
    assert key == service.list_cache.key
    assert ttl == 300
    assert TypeAdapter(list[TodoEntity]).validate_json(value) == TODOS


@pytest.mark.parametrize("cached", ["not json", '{"id": 1}', "[1, 2, 3]"])
def test_find_all_undecodable_cache_is_a_miss(service, todo_repository, cache, cached):
    """Garbage in the cache falls through to the database."""
    cache.get.return_value = cached
    todo_repository.find_all.return_value = TODOS

    assert service.find_all() == TODOS
    todo_repository.find_all.assert_called_once()
    cache.set.assert_called_once()


def test_find_all_cache_error_propagates(service, todo_repository, cache):
    """A failing cache lookup is surfaced and the database is skipped."""
    cache.get.side_effect = CacheError("cache error")

    with pytest.raises(CacheError, match="cache error"):
        service.find_all()

    todo_repository.find_all.assert_not_called()


def test_find_all_repository_error_propagates(service, todo_repository, cache):
    todo_repository.find_all.side_effect = DatabaseError("repository error")

    with pytest.raises(DatabaseError, match="repository error"):
        service.find_all()

    cache.set.assert_not_called()


def test_find_all_ignores_cache_set_failure(service, todo_repository, cache):
    """Failing to populate the cache does not fail the read."""
    todo_repository.find_all.return_value = TODOS
    cache.set.side_effect = CacheError("set failed")

    assert service.find_all() == TODOS


def test_find_all_caches_empty_listing(service, todo_repository, cache):
    todo_repository.find_all.return_value = []

    assert service.find_all() == []
    assert json.loads(cache.set.call_args.args[1]) == []


def test_create_invalidates_cache(service, todo_repository, cache):
    created = TodoEntity(id=3, title="New", user_id=7)
    todo_repository.create.return_value = created

    result = service.create(TodoEntity(title="New", user_id=7))

    assert result == created
    cache.delete.assert_called_once_with(service.list_cache.key)


def test_create_failure_keeps_cache(service, todo_repository, cache):
    todo_repository.create.side_effect = DatabaseError("insert failed")

    with pytest.raises(DatabaseError):
        service.create(TodoEntity(title="New"))

    cache.delete.assert_not_called()


def test_create_ignores_cache_delete_failure(service, todo_repository, cache):
    todo_repository.create.return_value = TodoEntity(id=3, title="New")
    cache.delete.side_effect = CacheError("delete failed")

    assert service.create(TodoEntity(title="New")).id == 3


def test_update_merges_partial_fields(service, todo_repository, cache):
    """Empty strings keep stored values; completed always overwrites."""
    todo_repository.find_by_id.return_value = TodoEntity(
        id=1, title="A", content="B", completed=False, user_id=7
    )
    todo_repository.update.side_effect = lambda todo: todo

    result = service.update(1, TodoEntity(title="", content="C", completed=True))

    assert result == TodoEntity(id=1, title="A", content="C", completed=True, user_id=7)
    todo_repository.update.assert_called_once_with(result)
    cache.delete.assert_called_once_with(service.list_cache.key)


def test_update_completed_false_overwrites(service, todo_repository):
    todo_repository.find_by_id.return_value = TodoEntity(id=1, title="A", completed=True)
    todo_repository.update.side_effect = lambda todo: todo

    assert service.update(1, TodoEntity()).completed is False


def test_update_due_date(service, todo_repository):
    """A missing due date keeps the stored one; a given one replaces it."""
    stored = datetime(2030, 1, 1)
    todo_repository.find_by_id.return_value = TodoEntity(id=1, title="A", due_date=stored)
    todo_repository.update.side_effect = lambda todo: todo

    assert service.update(1, TodoEntity(due_date=None)).due_date == stored

    new_date = datetime(2031, 6, 1)
    assert service.update(1, TodoEntity(due_date=new_date)).due_date == new_date


def test_update_not_found(service, todo_repository, cache):
    """Updating a missing todo touches neither the store nor the cache."""
    todo_repository.find_by_id.side_effect = TodoNotFoundError()

    with pytest.raises(TodoNotFoundError):
        service.update(99, TodoEntity(title="X"))

    todo_repository.update.assert_not_called()
    cache.delete.assert_not_called()


def test_update_repository_failure_keeps_cache(service, todo_repository, cache):
    todo_repository.find_by_id.return_value = TodoEntity(id=1, title="A")
    todo_repository.update.side_effect = DatabaseError("update failed")

    with pytest.raises(DatabaseError):
        service.update(1, TodoEntity(title="B"))

    cache.delete.assert_not_called()


@pytest.mark.parametrize("todo_id", [0, -1])
def test_invalid_id(service, todo_repository, todo_id):
    with pytest.raises(ValidationError):
        service.update(todo_id, TodoEntity())
    with pytest.raises(ValidationError):
        service.delete(todo_id)
    with pytest.raises(ValidationError):
        service.find_by_id(todo_id)

    todo_repository.find_by_id.assert_not_called()


def test_delete_invalidates_cache(service, todo_repository, cache):
    todo_repository.find_by_id.return_value = TodoEntity(id=1)

    service.delete(1)

    todo_repository.delete.assert_called_once_with(1)
    cache.delete.assert_called_once_with(service.list_cache.key)


def test_delete_not_found(service, todo_repository, cache):
    todo_repository.find_by_id.side_effect = TodoNotFoundError()

    with pytest.raises(TodoNotFoundError):
        service.delete(1)

    todo_repository.delete.assert_not_called()
    cache.delete.assert_not_called()


def test_delete_failure_keeps_cache(service, todo_repository, cache):
    todo_repository.find_by_id.return_value = TodoEntity(id=1)
    todo_repository.delete.side_effect = DatabaseError("delete failed")

    with pytest.raises(DatabaseError):
        service.delete(1)

    cache.delete.assert_not_called()


def test_mutation_then_read_repopulates(todo_repository, memory_cache):
    """After a write the next read goes back to the database."""
    service = TodoService(repository=todo_repository, cache=memory_cache)
    todo_repository.find_all.return_value = TODOS[:1]
    assert service.find_all() == TODOS[:1]
    assert service.find_all() == TODOS[:1]
    assert todo_repository.find_all.call_count == 1

    todo_repository.create.return_value = TODOS[1]
    service.create(TodoEntity(title="Test Todo 2"))
    todo_repository.find_all.return_value = TODOS

    assert service.find_all() == TODOS
    assert todo_repository.find_all.call_count == 2
