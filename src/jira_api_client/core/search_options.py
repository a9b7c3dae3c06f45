"""Search/filter options and their query-string rendering."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace

import httpx

from .errors import JiraMalformedOptionsError

ParamValue = str | int | bool | Sequence[str]


@dataclass(slots=True, frozen=True)
class SearchOptions:
    jql: str | None = None
    validate_query: bool | None = None
    fields: Sequence[str] = ()
    expand: Sequence[str] = ()
    start_at: int | None = None
    max_results: int | None = None
    extra: Mapping[str, ParamValue] | tuple[tuple[str, ParamValue], ...] = field(
        default=(),
        repr=False,
    )

    def __post_init__(self) -> None:
        for name in ("fields", "expand"):
            value = getattr(self, name)
            if isinstance(value, str):
                raise TypeError(f"{name} must be a sequence of str, not str")
            object.__setattr__(self, name, tuple(value))
        if isinstance(self.extra, Mapping):
            object.__setattr__(self, "extra", tuple(self.extra.items()))
        else:
            object.__setattr__(self, "extra", tuple(self.extra))

    @staticmethod
    def builder() -> "SearchOptionsBuilder":
        return SearchOptionsBuilder()

    def as_builder(self) -> "SearchOptionsBuilder":
        return SearchOptionsBuilder(self)

    def with_page(self, *, start_at: int, max_results: int) -> "SearchOptions":
        return with_page(self, start_at=start_at, max_results=max_results)

    def to_params(self) -> list[tuple[str, str]]:
        """Wire-named parameters in a stable order.

        Raises :class:`JiraMalformedOptionsError` for values that have no
        query-string rendering.
        """

        params: list[tuple[str, str]] = []
        if self.jql is not None:
            params.append(("jql", _render("jql", self.jql)))
        if self.validate_query is not None:
            params.append(("validateQuery", _render("validateQuery", self.validate_query)))
        if self.fields:
            params.append(("fields", _render("fields", self.fields)))
        if self.expand:
            params.append(("expand", _render("expand", self.expand)))
        if self.start_at is not None:
            params.append(("startAt", _render_count("startAt", self.start_at)))
        if self.max_results is not None:
            params.append(("maxResults", _render_count("maxResults", self.max_results)))
        for key, value in self.extra:
            if not isinstance(key, str) or key == "":
                raise JiraMalformedOptionsError(f"invalid parameter name {key!r}")
            params.append((key, _render(key, value)))
        return params

    def serialize(self) -> str:
        """Percent-encoded ``key=value&...`` query string."""

        return str(httpx.QueryParams(self.to_params()))


def with_page(options: SearchOptions, *, start_at: int, max_results: int) -> SearchOptions:
    """Copy of ``options`` with only the paging window replaced."""

    return replace(options, start_at=start_at, max_results=max_results)


class SearchOptionsBuilder:
    """Mutable, chainable counterpart of :class:`SearchOptions`."""

    def __init__(self, base: SearchOptions | None = None) -> None:
        base = base or SearchOptions()
        self._values: dict[str, object] = {
            "jql": base.jql,
            "validate_query": base.validate_query,
            "fields": base.fields,
            "expand": base.expand,
            "start_at": base.start_at,
            "max_results": base.max_results,
        }
        self._extra: dict[str, ParamValue] = dict(base.extra)

    def jql(self, value: str) -> "SearchOptionsBuilder":
        self._values["jql"] = value
        return self

    def validate_query(self, value: bool) -> "SearchOptionsBuilder":
        self._values["validate_query"] = value
        return self

    def fields(self, values: Sequence[str]) -> "SearchOptionsBuilder":
        self._values["fields"] = tuple(values)
        return self

    def expand(self, values: Sequence[str]) -> "SearchOptionsBuilder":
        self._values["expand"] = tuple(values)
        return self

    def start_at(self, value: int) -> "SearchOptionsBuilder":
        self._values["start_at"] = value
        return self

    def max_results(self, value: int) -> "SearchOptionsBuilder":
        self._values["max_results"] = value
        return self

    def param(self, key: str, value: ParamValue) -> "SearchOptionsBuilder":
        self._extra[key] = value
        return self

    def build(self) -> SearchOptions:
        return SearchOptions(extra=dict(self._extra), **self._values)  # type: ignore[arg-type]


def _render(name: str, value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence) and all(isinstance(item, str) for item in value):
        return ",".join(value)
    raise JiraMalformedOptionsError(
        f"{name} has unsupported type {type(value).__name__}"
    )


def _render_count(name: str, value: object) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise JiraMalformedOptionsError(f"{name} must be an integer")
    if value < 0:
        raise JiraMalformedOptionsError(f"{name} must be >= 0")
    return str(value)


__all__ = [
    "SearchOptions",
    "SearchOptionsBuilder",
    "with_page",
]
