"""Issue domain, creation payload and response models."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(slots=True, frozen=True)
class Board:
    id: str
    name: str | None = None
    type: str | None = None
    url: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "id", str(self.id))


@dataclass(slots=True, frozen=True)
class Issue:
    id: str
    key: str
    url: str | None = None
    fields: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def custom_field(self, field_id: str) -> "CustomField | None":
        """Option-style custom field value, or ``None`` when unset or not option-shaped."""

        return CustomField.from_payload(self.fields.get(field_id))


@dataclass(slots=True, frozen=True)
class CustomField:
    id: str
    url: str
    value: str

    @classmethod
    def from_payload(cls, payload: object) -> "CustomField | None":
        if not isinstance(payload, Mapping):
            return None
        if any(payload.get(key) is None for key in ("id", "self", "value")):
            return None
        return cls(
            id=str(payload["id"]),
            url=str(payload["self"]),
            value=str(payload["value"]),
        )

    def to_payload(self) -> dict[str, object]:
        return {"id": self.id, "self": self.url, "value": self.value}


@dataclass(slots=True, frozen=True)
class Assignee:
    name: str

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name}


@dataclass(slots=True, frozen=True)
class Component:
    name: str

    def to_payload(self) -> dict[str, object]:
        return {"name": self.name}


@dataclass(slots=True, frozen=True)
class IssueType:
    id: str

    def to_payload(self) -> dict[str, object]:
        return {"id": self.id}


@dataclass(slots=True, frozen=True)
class Priority:
    id: str
    icon_url: str
    name: str
    url: str

    def to_payload(self) -> dict[str, object]:
        return {
            "id": self.id,
            "iconUrl": self.icon_url,
            "name": self.name,
            "self": self.url,
        }


@dataclass(slots=True, frozen=True)
class Project:
    key: str

    def to_payload(self) -> dict[str, object]:
        return {"key": self.key}


@dataclass(slots=True, frozen=True)
class IssueFields:
    assignee: Assignee
    components: Sequence[Component]
    description: str
    environment: str
    issue_type: IssueType
    priority: Priority
    project: Project
    reporter: Assignee
    summary: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(self.components))

    def to_payload(self) -> dict[str, object]:
        return {
            "assignee": self.assignee.to_payload(),
            "components": [component.to_payload() for component in self.components],
            "description": self.description,
            "environment": self.environment,
            "issuetype": self.issue_type.to_payload(),
            "priority": self.priority.to_payload(),
            "project": self.project.to_payload(),
            "reporter": self.reporter.to_payload(),
            "summary": self.summary,
        }


@dataclass(slots=True, frozen=True)
class CreateIssue:
    fields: IssueFields

    def to_payload(self) -> dict[str, object]:
        return {"fields": self.fields.to_payload()}


@dataclass(slots=True, frozen=True)
class CreateResponse:
    id: str
    key: str
    url: str


__all__ = [
    "Board",
    "Issue",
    "CustomField",
    "Assignee",
    "Component",
    "IssueType",
    "Priority",
    "Project",
    "IssueFields",
    "CreateIssue",
    "CreateResponse",
]
