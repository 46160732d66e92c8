"""
Uniform JSON envelope used by every post endpoint and error response.

The envelope has the shape::

    {"success": bool, "message"?: str, "data"?: {...},
     "errors"?: {field: [message, ...]}, "error"?: str}

Optional keys are omitted when they carry no value.
"""

from typing import Any, Dict, List, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .config import settings
from .errors import ApiError, UnexpectedError


def envelope(
    success: bool,
    message: Optional[str] = None,
    data: Optional[Dict[str, Any]] = None,
    errors: Optional[Dict[str, List[str]]] = None,
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """Build the envelope dictionary, dropping empty optional keys."""
    body: Dict[str, Any] = {"success": success}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if errors is not None:
        body["errors"] = errors
    if error is not None:
        body["error"] = error
    return body


def success_response(
    data: Optional[Dict[str, Any]] = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Return a successful envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(envelope(True, message=message, data=data)),
    )


def error_response(exc: ApiError) -> JSONResponse:
    """Render a classified error as a failed envelope response."""
    error = exc.error
    if isinstance(exc, UnexpectedError) and not settings.expose_error_details:
        error = None
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(False, message=exc.message, errors=exc.errors, error=error),
    )
