"""
Error kinds raised by handlers and the error boundary wrapping them.

Every classified failure is an ``ApiError`` carrying the HTTP status
and the pieces of the response envelope.  ``error_boundary`` is the
single decorator applied to post handlers: classified errors and
FastAPI ``HTTPException`` pass through unchanged, anything else is
logged and converted into an ``UnexpectedError`` with an
operation-specific message.  The application registers exception
handlers (see ``main.py``) that render these errors as envelopes.
"""

import logging
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

from fastapi import HTTPException, status


class ApiError(Exception):
    """Base class for errors rendered as an envelope response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[Dict[str, List[str]]] = None,
        error: Optional[str] = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors
        self.error = error
        super().__init__(self.message)


class ValidationError(ApiError):
    status_code = 422
    default_message = "Validation failed"


class AuthorizationError(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "This action is unauthorized"


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class UnexpectedError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"


def error_boundary(message: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Wrap an async handler so unclassified failures become ``UnexpectedError``.

    ``message`` is the envelope message reported for such failures
    (e.g. ``"Failed to create post"``); the raw exception text goes
    into the ``error`` field.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        logger = logging.getLogger(func.__module__)

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except (ApiError, HTTPException):
                raise
            except Exception as exc:
                logger.exception("%s: %s", message, exc)
                raise UnexpectedError(message, error=str(exc)) from exc

        return wrapper

    return decorator
