"""Error types and status mapping."""

from __future__ import annotations

from collections.abc import Mapping


def extract_error_messages(payload: object) -> tuple[str, ...]:
    if not isinstance(payload, Mapping):
        return ()
    raw = payload.get("errorMessages")
    if not isinstance(raw, list):
        return ()
    return tuple(str(message) for message in raw)


def extract_field_errors(payload: object) -> dict[str, str]:
    if not isinstance(payload, Mapping):
        return {}
    raw = payload.get("errors")
    if not isinstance(raw, Mapping):
        return {}
    return {str(key): str(value) for key, value in raw.items()}


class JiraApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        error_messages: tuple[str, ...] = (),
        errors: Mapping[str, str] | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.error_messages = tuple(error_messages)
        self.errors = dict(errors or {})
        self.cause = cause


class JiraRequestFailedError(JiraApiError):
    """A single request/response cycle did not produce a usable result."""


class JiraTransportError(JiraRequestFailedError):
    """Network/transport-level failure."""


class JiraUnauthorizedError(JiraRequestFailedError):
    """Credentials missing or rejected (HTTP 401)."""


class JiraNotFoundError(JiraRequestFailedError):
    """Resource does not exist (HTTP 404)."""


class JiraMethodNotAllowedError(JiraRequestFailedError):
    """HTTP 405."""


class JiraFaultError(JiraRequestFailedError):
    """Request rejected by the server with a 4xx status."""


class JiraServerError(JiraRequestFailedError):
    """Server-side unexpected error."""


class JiraProtocolError(JiraRequestFailedError):
    """Response body could not be decoded into the expected shape."""


class JiraMalformedOptionsError(JiraApiError):
    """Search options cannot be rendered as a query string."""


class JiraClientClosedError(JiraApiError):
    """Raised when client is used after close."""


class JiraValidationError(JiraApiError):
    """Invalid configuration or input."""


def classify_http_error(
    http_status: int | None,
    payload: object = None,
) -> JiraRequestFailedError | None:
    """Map an HTTP status (and decoded error body) to a domain exception."""

    if http_status is None:
        return JiraProtocolError("response is missing an HTTP status")
    if 200 <= http_status < 300:
        return None

    error_messages = extract_error_messages(payload)
    errors = extract_field_errors(payload)

    if http_status == 401:
        return JiraUnauthorizedError("unauthorized", http_status=http_status)
    if http_status == 404:
        return JiraNotFoundError(
            "resource not found",
            http_status=http_status,
            error_messages=error_messages,
            errors=errors,
        )
    if http_status == 405:
        return JiraMethodNotAllowedError("method not allowed", http_status=http_status)
    if 400 <= http_status < 500:
        message = "; ".join(error_messages) or f"request rejected with HTTP {http_status}"
        return JiraFaultError(
            message,
            http_status=http_status,
            error_messages=error_messages,
            errors=errors,
        )
    if http_status >= 500:
        return JiraServerError(
            f"server error HTTP {http_status}",
            http_status=http_status,
            error_messages=error_messages,
            errors=errors,
            cause="server",
        )
    return JiraProtocolError(
        f"unexpected HTTP status {http_status}",
        http_status=http_status,
    )


__all__ = [
    "JiraApiError",
    "JiraRequestFailedError",
    "JiraTransportError",
    "JiraUnauthorizedError",
    "JiraNotFoundError",
    "JiraMethodNotAllowedError",
    "JiraFaultError",
    "JiraServerError",
    "JiraProtocolError",
    "JiraMalformedOptionsError",
    "JiraClientClosedError",
    "JiraValidationError",
    "extract_error_messages",
    "extract_field_errors",
    "classify_http_error",
]
