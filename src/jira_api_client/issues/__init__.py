"""Issue service package."""

from ..core.search_options import SearchOptions, SearchOptionsBuilder, with_page
from .models import (
    Assignee,
    Board,
    Component,
    CreateIssue,
    CreateResponse,
    CustomField,
    Issue,
    IssueFields,
    IssueType,
    Priority,
    Project,
)

__all__ = [
    "SearchOptions",
    "SearchOptionsBuilder",
    "with_page",
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
