"""Mapping from application errors to HTTP errors."""

import logging

from fastapi import HTTPException, status

from todo_api.errors import (
    AppError,
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[AppError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
]


def to_http_exception(error: AppError, failure_message: str) -> HTTPException:
    """Translate an application error into an HTTPException.

    Known client-facing errors keep their own message. Anything else
    (database or cache failures) is logged and replaced by
    ``failure_message`` with a 500 status.

    Args:
        error: The error raised by the service layer
        failure_message: Message returned for unexpected failures

    Returns:
        The HTTPException to raise
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            headers = {"WWW-Authenticate": "Bearer"} if status_code == status.HTTP_401_UNAUTHORIZED else None
            return HTTPException(status_code=status_code, detail=error.message, headers=headers)

    logger.error("%s: %s", failure_message, error, exc_info=error)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=failure_message,
    )
