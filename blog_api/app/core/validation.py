"""
Payload validation producing a field -> messages map.

Request payloads are validated against pydantic models declared in
``schemas``.  Pydantic's error list is translated into the structure
returned to clients under ``errors``::

    {"title": ["The title field is required."]}

``validate_payload`` raises ``ValidationError`` with that map so the
envelope can be rendered by the application's exception handlers.
"""

import json
from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar

import pydantic
from fastapi import Request
from pydantic import BaseModel
from pydantic_core import PydanticCustomError

from .errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Location prefixes FastAPI adds to request validation errors.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}

_MESSAGES = {
    "missing": "The {field} field is required.",
    "blank": "The {field} field is required.",
    "string_type": "The {field} field must be a string.",
    "string_too_long": "The {field} field must not be greater than {max_length} characters.",
    "too_long": "The {field} field must not be greater than {max_length} characters.",
    "string_too_short": "The {field} field must be at least {min_length} characters.",
    "int_parsing": "The {field} field must be an integer.",
    "int_type": "The {field} field must be an integer.",
    "model_attributes_type": "The {field} field must be an object.",
    "dict_type": "The {field} field must be an object.",
}


def not_blank(value: str) -> str:
    """Reject empty and whitespace-only strings as missing values."""
    if not value.strip():
        raise PydanticCustomError("blank", "Value is required")
    return value


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) if parts else "payload"


def _message(error: Mapping[str, Any], field: str) -> str:
    error_type = error.get("type", "")
    # A null value for a required string reads as a missing field.
    if error_type == "string_type" and error.get("input", "") is None:
        error_type = "missing"
    template = _MESSAGES.get(error_type)
    if template is None:
        return str(error.get("msg") or f"The {field} field is invalid.")
    context = dict(error.get("ctx") or {})
    return template.format(field=field.replace("_", " "), **context)


def errors_to_map(errors: Iterable[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Group pydantic/FastAPI error entries into ``{field: [messages]}``."""
    result: Dict[str, List[str]] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        message = _message(error, field)
        messages = result.setdefault(field, [])
        if message not in messages:
            messages.append(message)
    return result


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the JSON object sent in the request body.

    An empty body or a JSON value that is not an object yields an
    empty dict, so missing fields surface as "required" errors.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise ValidationError(
            errors={"payload": ["The request body must be valid JSON."]}
        ) from exc
    return payload if isinstance(payload, dict) else {}


def validate_payload(
    model: Type[ModelT],
    payload: Any,
    message: str = "Validation failed",
) -> ModelT:
    """Validate ``payload`` against ``model`` or raise ``ValidationError``."""
    if not isinstance(payload, dict):
        payload = {}
    try:
        return model.model_validate(payload)
    except pydantic.ValidationError as exc:
        raise ValidationError(message, errors=errors_to_map(exc.errors())) from exc
