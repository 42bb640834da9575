"""
Shared fixtures for the todo API tests.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from todo_api.config import get_session_factory
from todo_api.protocols import CacheStore, TodoStore, TokenIssuer, UserStore
from todo_api.repositories import Base


class InMemoryCache:
    """Dict-backed CacheStore used where a working cache is needed."""

    def __init__(self) -> None:
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    def get(self, key: str) -> str:
        return self.values.get(key, "")

    def set(self, key: str, value: str, ttl: int) -> None:
        self.values[key] = value
        self.ttls[key] = ttl

    def delete(self, key: str) -> None:
        self.values.pop(key, None)
        self.ttls.pop(key, None)

    def health_check(self) -> bool:
        return True


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across sessions."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return get_session_factory(engine)


@pytest.fixture
def cache():
    """Mock cache that always misses."""
    mock = MagicMock(spec=CacheStore)
    mock.get.return_value = ""
    return mock


@pytest.fixture
def memory_cache():
    return InMemoryCache()


@pytest.fixture
def todo_repository():
    return MagicMock(spec=TodoStore)


@pytest.fixture
def user_repository():
    return MagicMock(spec=UserStore)


@pytest.fixture
def token_issuer():
    mock = MagicMock(spec=TokenIssuer)
    mock.generate_access_token.return_value = "signed-token"
    return mock
