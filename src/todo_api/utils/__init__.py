"""Utility modules for todo_api."""

from .security import hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
]
