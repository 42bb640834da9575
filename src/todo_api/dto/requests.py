"""Request DTOs for API endpoints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

Role = Literal["admin", "user"]


class LoginRequest(BaseModel):
    """Request DTO for POST /login."""

    username: str = Field(..., description="Login name", min_length=1)
    password: str = Field(..., description="Plain-text password", min_length=1)


class RegisterRequest(BaseModel):
    """Request DTO for POST /register.

    bcrypt only looks at the first 72 bytes, so longer passwords are refused.
    """

    username: str = Field(..., description="Unique login name", min_length=1, max_length=100)
    password: str = Field(..., description="Plain-text password", min_length=1, max_length=72)
    full_name: str = Field("", description="Display name", max_length=255)
    role: Role = Field("user", description="Either 'admin' or 'user'")


class UpdateUserRequest(BaseModel):
    """Request DTO for PUT /users/{id}.

    Every field is optional; omitted or empty fields keep their stored value.
    """

    username: str = Field("", max_length=100)
    password: str = Field("", description="New password; empty keeps the current one", max_length=72)
    full_name: str = Field("", max_length=255)
    role: Role | None = None


class CreateTodoRequest(BaseModel):
    """Request DTO for POST /todos."""

    title: str = Field("", max_length=255)
    content: str = ""
    due_date: datetime | None = None
    completed: bool = False
    user_id: int = Field(0, description="Owner id", ge=0)


class UpdateTodoRequest(BaseModel):
    """Request DTO for PUT /todos/{id}.

    Empty strings and a null due date keep the stored value. ``completed``
    is always applied, defaulting to false when omitted.
    """

    title: str = Field("", max_length=255)
    content: str = ""
    due_date: datetime | None = None
    completed: bool = False
