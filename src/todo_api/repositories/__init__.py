"""Repository layer for data access.

This layer abstracts external dependencies (Redis, relational database)
behind protocol-based interfaces. This enables:
- Easy swapping of implementations (SQLite -> PostgreSQL, Redis -> anything
  that speaks get/set/delete)
- Unit testing with mock implementations
- Clear separation of concerns

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from todo_api.protocols import CacheStore, TodoStore, UserStore

from .models import Base, TodoModel, UserModel
from .redis_repository import RedisCacheRepository
from .todo_repository import SqlTodoRepository
from .user_repository import SqlUserRepository

__all__ = [
    "Base",
    "CacheStore",
    "RedisCacheRepository",
    "SqlTodoRepository",
    "SqlUserRepository",
    "TodoModel",
    "TodoStore",
    "UserModel",
    "UserStore",
]
