"""Todo API - authenticated CRUD over users and todos.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (CacheStore, UserStore, TodoStore, TokenIssuer)
    - repositories: Data access implementations (Redis, SQLAlchemy)
    - services: Business logic, including the read-through list cache
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from todo_api.services import TodoService

    todos = TodoService(repository=todo_repository, cache=cache)
    todos.find_all()
    ```

For HTTP API:
    ```python
    from todo_api.api.app import app
    ```
"""

from todo_api.config import get_redis_client, settings
from todo_api.dto import LoginRequest, RegisterRequest
from todo_api.entities import TodoEntity, TokenClaims, UserEntity
from todo_api.handlers import TodoHandler, UserHandler
from todo_api.protocols import CacheStore, TodoStore, TokenIssuer, UserStore
from todo_api.repositories import RedisCacheRepository, SqlTodoRepository, SqlUserRepository
from todo_api.services import JwtTokenService, ListCache, TodoService, UserService

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "CacheStore",
    "TodoStore",
    "TokenIssuer",
    "UserStore",
    # Services (business logic)
    "JwtTokenService",
    "ListCache",
    "TodoService",
    "UserService",
    # Handlers (HTTP)
    "TodoHandler",
    "UserHandler",
    # Repositories (data access)
    "RedisCacheRepository",
    "SqlTodoRepository",
    "SqlUserRepository",
    # Entities (domain models)
    "TodoEntity",
    "TokenClaims",
    "UserEntity",
    # DTOs (API contracts)
    "LoginRequest",
    "RegisterRequest",
]
