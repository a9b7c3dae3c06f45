"""Parsers from Jira JSON payload into typed models."""

from __future__ import annotations

from ..core.errors import JiraProtocolError
from ..core.models import Page, parse_page
from ..core.response_parsing import require_object
from .models import CreateResponse, Issue

JsonObject = dict[str, object]


def _required_text(obj: JsonObject, key: str, *, what: str) -> str:
    raw = obj.get(key)
    if raw is None:
        raise JiraProtocolError(f"{what}.{key} is required")
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise JiraProtocolError(f"{what}.{key} must be a string")
    return str(raw)


def _optional_text(obj: JsonObject, key: str) -> str | None:
    raw = obj.get(key)
    return None if raw is None else str(raw)


def issue_from_item(item: JsonObject) -> Issue:
    fields = item.get("fields") or {}
    if not isinstance(fields, dict):
        raise JiraProtocolError("issue.fields must be an object")
    return Issue(
        id=_required_text(item, "id", what="issue"),
        key=_required_text(item, "key", what="issue"),
        url=_optional_text(item, "self"),
        fields=fields,
    )


def parse_issue(payload: object) -> Issue:
    return issue_from_item(require_object(payload, what="issue payload"))


def parse_issue_page(payload: object) -> Page[Issue]:
    return parse_page(payload, issue_from_item)


def parse_create_response(payload: object) -> CreateResponse:
    obj = require_object(payload, what="create response")
    return CreateResponse(
        id=_required_text(obj, "id", what="create response"),
        key=_required_text(obj, "key", what="create response"),
        url=_required_text(obj, "self", what="create response"),
    )


__all__ = [
    "issue_from_item",
    "parse_issue",
    "parse_issue_page",
    "parse_create_response",
]
