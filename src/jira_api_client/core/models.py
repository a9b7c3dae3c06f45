"""Core response models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import JiraProtocolError
from .response_parsing import require_object

T = TypeVar("T")


@dataclass(slots=True, frozen=True)
class Page(Generic[T]):
    """One fetched slice of a larger server-side collection."""

    expand: str
    max_results: int
    start_at: int
    total: int
    values: tuple[T, ...] | list[T] = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, tuple):
            return
        object.__setattr__(self, "values", tuple(self.values))

    @property
    def next_start_at(self) -> int:
        return self.start_at + self.max_results

    def has_more(self) -> bool:
        """``start_at + max_results <= total``, except a zero-sized window never has a successor."""

        if self.max_results <= 0:
            return False
        return self.next_start_at <= self.total


def _as_count(payload: dict[str, object], key: str) -> int:
    raw = payload.get(key)
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise JiraProtocolError(f"{key} must be an integer")
    if raw < 0:
        raise JiraProtocolError(f"{key} must be >= 0")
    return raw


def parse_page(
    payload: object,
    parse_item: Callable[[dict[str, object]], T],
) -> Page[T]:
    """Map the camelCase page envelope onto :class:`Page`."""

    obj = require_object(payload, what="page payload")
    expand = obj.get("expand")
    if expand is not None and not isinstance(expand, str):
        raise JiraProtocolError("expand must be a string")
    raw_values = obj.get("values", [])
    if not isinstance(raw_values, list):
        raise JiraProtocolError("values must be a list")

    return Page(
        expand=expand or "",
        max_results=_as_count(obj, "maxResults"),
        start_at=_as_count(obj, "startAt"),
        total=_as_count(obj, "total"),
        values=tuple(
            parse_item(require_object(item, what="values element")) for item in raw_values
        ),
    )


__all__ = [
    "Page",
    "parse_page",
]
