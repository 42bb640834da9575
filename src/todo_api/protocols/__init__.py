"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (Redis -> Memcached, SQLite -> PostgreSQL, etc.)
- Unit testing with mock implementations
- Clear separation of concerns

Usage:
    ```python
    from todo_api.protocols import CacheStore, TodoStore

    # Type hints work with any implementation
    cache: CacheStore = RedisCacheRepository.create()
    todos: TodoStore = SqlTodoRepository(session_factory)
    ```
"""

from .cache_store import CacheStore
from .stores import TodoStore, UserStore
from .token_issuer import TokenIssuer

__all__ = [
    "CacheStore",
    "TodoStore",
    "TokenIssuer",
    "UserStore",
]
