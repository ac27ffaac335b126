"""Error types and helpers shared by the Sitecore Search clients and tools.

REST failures are normalised into ``SitecoreApiError`` so that tool handlers
can surface a single, readable message. Token exchange failures use the
``AuthenticationError`` subclass.
"""

from typing import Any, NoReturn

import httpx
from pydantic import ValidationError

# Maximum length for response bodies quoted in error messages
MAX_BODY_LENGTH = 500


class SitecoreApiError(Exception):
    """Raised when a Sitecore API request fails.

    Attributes:
        status_code: HTTP status code of the failed response, if any.
        response: Decoded response body, if any.

    """

    def __init__(self, message: str, status_code: int | None = None, response: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class AuthenticationError(SitecoreApiError):
    """Raised when generating or refreshing session tokens fails."""


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text or None


def _message_from_body(body: Any, status_code: int) -> str:
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    if isinstance(body, str) and body.strip():
        return body[:MAX_BODY_LENGTH]
    return f"API request failed with status {status_code}"


def api_error_from_response(response: httpx.Response) -> SitecoreApiError:
    """Build a ``SitecoreApiError`` from an unsuccessful HTTP response."""
    body = _decode_body(response)
    message = _message_from_body(body, response.status_code)
    return SitecoreApiError(message, status_code=response.status_code, response=body)


def handle_api_error(exc: Exception, *, context: str) -> NoReturn:
    """Re-raise an HTTP-layer exception as ``SitecoreApiError``.

    Args:
        exc: The exception raised while performing the request.
        context: Short description of the request (e.g. "POST /discover/v2/x").

    Raises:
        SitecoreApiError: Always.

    """
    if isinstance(exc, SitecoreApiError):
        raise exc
    if isinstance(exc, httpx.HTTPStatusError):
        raise api_error_from_response(exc.response) from exc
    if isinstance(exc, httpx.HTTPError):
        msg = f"Network error during {context}: {exc}"
        raise SitecoreApiError(msg) from exc
    msg = str(exc) or "Unknown error occurred"
    raise SitecoreApiError(msg) from exc


def format_validation_errors(exc: ValidationError) -> str:
    """Render a pydantic ``ValidationError`` as a single line.

    Example: ``"Validation error: rfk_id: Field required, limit: ..."``.
    """
    parts: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return f"Validation error: {', '.join(parts)}"


__all__ = [
    "MAX_BODY_LENGTH",
    "AuthenticationError",
    "SitecoreApiError",
    "api_error_from_response",
    "format_validation_errors",
    "handle_api_error",
]
