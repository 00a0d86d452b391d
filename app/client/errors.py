"""
Errors raised by the Python client.

Local failures (bad input, bad id) never reach the network; everything
that came back from the server, or failed to, is an ``ApiError``.
"""
from typing import Any, Dict, List, Optional

import httpx

from app.schemas.common import ROOT_FIELD, FieldErrors


class TravelClientError(Exception):
    """Base class for every client error."""


class ClientValidationError(TravelClientError):
    """Input failed the shared schema before any request was made."""

    def __init__(self, field_errors: FieldErrors, message: str = "Validation error"):
        super().__init__(message)
        self.message = message
        self.field_errors = field_errors


class InvalidIdentifierError(TravelClientError):
    """An id that is not a positive integer was passed to a by-id operation."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid identifier: {value!r}")
        self.value = value


class ApiError(TravelClientError):
    """A request failed; ``status_code`` is 0 when no response arrived."""

    def __init__(self, status_code: int, message: str, body: Any = None):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.body = body


class ServerValidationError(ApiError):
    """A 4xx response that names the offending fields."""

    def __init__(self, status_code: int, message: str, field_errors: FieldErrors, body: Any = None):
        super().__init__(status_code, message, body)
        self.field_errors = field_errors


def _append(field_errors: FieldErrors, field: str, message: str) -> None:
    messages = field_errors.setdefault(field or ROOT_FIELD, [])
    if message not in messages:
        messages.append(message)


def parse_field_errors(body: Any) -> Optional[FieldErrors]:
    """
    Read a field-error map out of an error body.

    Understands ``{"fieldErrors": {field: [msg]}}`` as well as an
    ``errors`` list of issues carrying ``path``/``loc`` and
    ``message``/``msg``. Returns None when the body names no fields.
    """
    if not isinstance(body, dict):
        return None

    field_errors: FieldErrors = {}

    raw = body.get("fieldErrors")
    if isinstance(raw, dict):
        for field, messages in raw.items():
            if isinstance(messages, str):
                messages = [messages]
            for message in messages or []:
                _append(field_errors, str(field), str(message))

    issues = body.get("errors")
    if isinstance(issues, dict):
        issues = [{"path": [field], "message": message} for field, message in issues.items()]
    if isinstance(issues, list):
        for issue in issues:
            if not isinstance(issue, dict):
                continue
            path: List[Any] = issue.get("path") or issue.get("loc") or []
            if isinstance(path, str):
                path = [path]
            message = issue.get("message") or issue.get("msg") or "Invalid value"
            messages = message if isinstance(message, list) else [message]
            for text in messages:
                _append(field_errors, str(path[0]) if path else ROOT_FIELD, str(text))

    return field_errors or None


def error_from_response(response: httpx.Response) -> ApiError:
    """Build the matching ``ApiError`` for a non-2xx response."""
    try:
        body: Dict[str, Any] = response.json()
    except ValueError:
        body = None

    message = None
    if isinstance(body, dict):
        message = body.get("message") or body.get("detail")
    if not isinstance(message, str) or not message:
        message = response.text or response.reason_phrase

    if 400 <= response.status_code < 500:
        field_errors = parse_field_errors(body)
        if field_errors:
            return ServerValidationError(response.status_code, message, field_errors, body)

    return ApiError(response.status_code, message, body)
