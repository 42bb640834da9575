"""Persistence protocols for users and todos.

Implementations raise the entity's not-found error (``UserNotFoundError``,
``TodoNotFoundError``) when a record is absent and ``DatabaseError`` for
any other storage failure, so callers can branch on not-found without
inspecting driver exceptions.
"""

from typing import Protocol, runtime_checkable

from todo_api.entities import TodoEntity, UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user persistence."""

    def find_all(self) -> list[UserEntity]:
        """Return every stored user."""
        ...

    def find_by_id(self, user_id: int) -> UserEntity:
        """Return the user with the given id."""
        ...

    def find_by_username(self, username: str) -> UserEntity:
        """Return the user with the given username."""
        ...

    def create(self, user: UserEntity) -> UserEntity:
        """Insert a user and return it with its assigned id.

        Raises ``UsernameTakenError`` if the username violates the unique
        constraint.
        """
        ...

    def update(self, user: UserEntity) -> UserEntity:
        """Persist every field of ``user`` and return the stored record."""
        ...

    def delete(self, user_id: int) -> None:
        """Delete the user with the given id."""
        ...

    def health_check(self) -> bool:
        """Check if the database is accessible."""
        ...


@runtime_checkable
class TodoStore(Protocol):
    """Protocol for todo persistence."""

    def find_all(self) -> list[TodoEntity]:
        """Return every stored todo."""
        ...

    def find_by_id(self, todo_id: int) -> TodoEntity:
        """Return the todo with the given id."""
        ...

    def create(self, todo: TodoEntity) -> TodoEntity:
        """Insert a todo and return it with its assigned id."""
        ...

    def update(self, todo: TodoEntity) -> TodoEntity:
        """Persist every field of ``todo`` and return the stored record."""
        ...

    def delete(self, todo_id: int) -> None:
        """Delete the todo with the given id."""
        ...
