"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
They are used for request/response validation and serialization.

Internal domain logic should use entities from the entities package.
"""

from .requests import (
    CreateTodoRequest,
    LoginRequest,
    RegisterRequest,
    UpdateTodoRequest,
    UpdateUserRequest,
)
from .responses import (
    ApiResponse,
    ErrorResponse,
    HealthCheckResponse,
    TodoResponse,
    TokenResponse,
    UserResponse,
)

__all__ = [
    "LoginRequest",
    "RegisterRequest",
    "UpdateUserRequest",
    "CreateTodoRequest",
    "UpdateTodoRequest",
    "ApiResponse",
    "ErrorResponse",
    "HealthCheckResponse",
    "TodoResponse",
    "TokenResponse",
    "UserResponse",
]
