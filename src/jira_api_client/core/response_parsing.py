"""Response body decoding shared by every request."""

from __future__ import annotations

from typing import Protocol

from .errors import JiraProtocolError, classify_http_error


class JsonPayloadResponse(Protocol):
    status_code: int
    content: bytes

    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> object:
    """Decode a response body; an empty body decodes to ``None``."""

    if not getattr(response, "content", b"").strip():
        return None
    try:
        return response.json()
    except Exception as exc:
        raise JiraProtocolError(
            "response body is not valid JSON",
            http_status=http_status,
        ) from exc


def _lenient_error_payload(response: JsonPayloadResponse) -> object:
    try:
        return parse_json_payload(response, http_status=None)
    except JiraProtocolError:
        return None


def evaluate_response(response: JsonPayloadResponse) -> object:
    """Return the decoded payload of a 2xx response or raise the mapped error."""

    http_status = getattr(response, "status_code", None)
    if http_status is None or not 200 <= http_status < 300:
        mapped_error = classify_http_error(http_status, _lenient_error_payload(response))
        if mapped_error is not None:
            raise mapped_error
    return parse_json_payload(response, http_status=http_status)


def require_object(payload: object, *, what: str) -> dict[str, object]:
    if not isinstance(payload, dict):
        raise JiraProtocolError(f"{what} must be a JSON object")
    if any(not isinstance(key, str) for key in payload):
        raise JiraProtocolError(f"{what} keys must be strings")
    return payload


__all__ = [
    "JsonPayloadResponse",
    "parse_json_payload",
    "evaluate_response",
    "require_object",
]
