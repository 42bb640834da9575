"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.

Zero values carry meaning for partial updates: an empty string or a
``None`` due date means "leave unchanged".
"""

from .todo import TodoEntity
from .token_claims import TokenClaims
from .user import ROLE_ADMIN, ROLE_USER, ROLES, UserEntity

__all__ = [
    "ROLE_ADMIN",
    "ROLE_USER",
    "ROLES",
    "TodoEntity",
    "TokenClaims",
    "UserEntity",
]
