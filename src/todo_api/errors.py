"""Application error taxonomy.

Services and repositories raise these; handlers map them to HTTP status
codes. Messages are stable and safe to return to clients, except for
``UpstreamError`` subclasses whose messages carry driver context and are
only logged.
"""


class AppError(Exception):
    """Base class for all application errors."""

    default_message = "internal error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(AppError):
    default_message = "resource not found"


class UserNotFoundError(NotFoundError):
    default_message = "user not found"


class TodoNotFoundError(NotFoundError):
    default_message = "todo not found"


class ConflictError(AppError):
    default_message = "resource already exists"


class UsernameTakenError(ConflictError):
    default_message = "username already taken"


class ValidationError(AppError):
    default_message = "invalid request"


class UnauthorizedError(AppError):
    default_message = "unauthorized"


class InvalidCredentialsError(UnauthorizedError):
    default_message = "invalid username or password"


class UpstreamError(AppError):
    """A backing dependency (database, cache) failed."""

    default_message = "upstream dependency failed"


class DatabaseError(UpstreamError):
    default_message = "database error"


class CacheError(UpstreamError):
    default_message = "cache error"
