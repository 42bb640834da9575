"""Service layer for business logic.

This layer contains the core business logic and orchestration.
Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from todo_api.services import TodoService

    todos = TodoService(repository=SqlTodoRepository(session_factory), cache=cache)
    ```
"""

from .list_cache import ListCache
from .todo_service import TodoService
from .token_service import JwtTokenService
from .user_service import UserService

__all__ = [
    "JwtTokenService",
    "ListCache",
    "TodoService",
    "UserService",
]
