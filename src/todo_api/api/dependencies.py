"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

import logging
from collections.abc import Callable
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import sessionmaker

from todo_api.config import get_engine, get_session_factory
from todo_api.entities import TokenClaims
from todo_api.errors import UnauthorizedError
from todo_api.handlers import TodoHandler, UserHandler
from todo_api.protocols import CacheStore
from todo_api.repositories import (
    Base,
    RedisCacheRepository,
    SqlTodoRepository,
    SqlUserRepository,
)
from todo_api.services import JwtTokenService, TodoService, UserService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_STATE_KEYS = (
    "user_handler",
    "todo_handler",
    "user_service",
    "todo_service",
    "token_service",
    "cache",
    "user_repository",
)


def init_state(
    app: FastAPI,
    session_factory: sessionmaker,
    cache: CacheStore,
    token_service: JwtTokenService,
) -> None:
    """Build every layer and store it in app.state.

    1. Repositories (data access)
    2. Services (business logic)
    3. Handlers (HTTP endpoints)

    Args:
        app: The FastAPI application instance
        session_factory: SQLAlchemy session factory
        cache: Cache backend shared by both services
        token_service: Access token signer and verifier
    """
    user_repository = SqlUserRepository(session_factory)
    todo_repository = SqlTodoRepository(session_factory)

    user_service = UserService(
        repository=user_repository,
        token_issuer=token_service,
        cache=cache,
    )
    todo_service = TodoService(repository=todo_repository, cache=cache)

    app.state.user_handler = UserHandler(user_service=user_service)
    app.state.todo_handler = TodoHandler(todo_service=todo_service)
    app.state.user_service = user_service
    app.state.todo_service = todo_service
    app.state.token_service = token_service
    app.state.cache = cache
    app.state.user_repository = user_repository


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Creates the database tables if missing, wires all layers into
    app.state, and disposes of the engine on shutdown.
    """
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables checked at %s", engine.url.render_as_string(hide_password=True))

    cache = RedisCacheRepository.create()
    if not cache.health_check():
        logger.warning("Redis is not reachable; cached listings will fail until it is")

    init_state(app, get_session_factory(engine), cache, JwtTokenService())
    logger.info("Todo API initialized")

    yield

    for key in _STATE_KEYS:
        delattr(app.state, key)
    engine.dispose()
    logger.info("Todo API shut down")


def _from_state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check lifespan setup.")
    return value


def get_user_handler(request: Request) -> UserHandler:
    """Dependency injection for UserHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    return _from_state(request, "user_handler")


def get_todo_handler(request: Request) -> TodoHandler:
    """Dependency injection for TodoHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    return _from_state(request, "todo_handler")


def get_token_service(request: Request) -> JwtTokenService:
    """Dependency injection for JwtTokenService from app.state."""
    return _from_state(request, "token_service")


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[JwtTokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Decode the bearer token of the current request.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return token_service.decode_access_token(credentials.credentials)
    except UnauthorizedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from e


def role_required(*allowed_roles: str) -> Callable[..., TokenClaims]:
    """Build a dependency that admits only the given roles.

    Use as ``dependencies=[Depends(role_required("admin"))]`` on a route.

    Raises:
        HTTPException: 403 if the caller's role is not allowed
    """

    def _wrapper(claims: Annotated[TokenClaims, Depends(get_current_claims)]) -> TokenClaims:
        if claims.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return claims

    return _wrapper


# Type aliases for cleaner dependency injection
UserHandlerDep = Annotated[UserHandler, Depends(get_user_handler)]
TodoHandlerDep = Annotated[TodoHandler, Depends(get_todo_handler)]
