"""User domain entity."""

from dataclasses import dataclass, field

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)


@dataclass(frozen=True)
class UserEntity:
    """Domain entity for an application user.

    Attributes:
        id: Primary key (0 until persisted)
        username: Unique login name
        password: bcrypt hash once stored; plain text only on the way in
        role: Either "admin" or "user"
        full_name: Display name
    """

    id: int = 0
    username: str = ""
    password: str = field(default="", repr=False)
    role: str = ""
    full_name: str = ""
