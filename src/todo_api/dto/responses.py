"""Response DTOs for API endpoints.

Every response is wrapped in an envelope: ``ApiResponse`` on success and
``ErrorResponse`` on failure.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Success envelope."""

    message: str = Field(..., description="Human-readable status message")
    data: DataT | None = Field(None, description="Response payload")


class ErrorResponse(BaseModel):
    """Failure envelope."""

    code: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Human-readable error message")


class UserResponse(BaseModel):
    """A user as exposed to clients (never includes the password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    role: str
    full_name: str


class TodoResponse(BaseModel):
    """A todo as exposed to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    due_date: datetime | None = None
    completed: bool
    user_id: int


class TokenResponse(BaseModel):
    """Payload of a successful login."""

    token: str = Field(..., description="Signed bearer token")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    database_healthy: bool = Field(..., description="Whether the database is reachable")
