"""Issue operations: single fetch, create, board page listing and iteration."""

from __future__ import annotations

import logging
from typing import Protocol

from ..core.errors import JiraMalformedOptionsError
from ..core.models import Page
from ..core.pagination import PageIterator
from ..core.search_options import SearchOptions
from .models import Board, CreateIssue, CreateResponse, Issue
from .parser import parse_create_response, parse_issue, parse_issue_page

logger = logging.getLogger("jira_api_client")

CORE_API = "api"
AGILE_API = "agile"


class RequestClient(Protocol):
    def get(self, api_name: str, path: str) -> object: ...
    def post(self, api_name: str, path: str, body: object) -> object: ...


def board_id_of(board: Board | str | int) -> str:
    if isinstance(board, Board):
        return board.id
    return str(board)


def build_board_issues_path(board_id: str, options: SearchOptions) -> str:
    try:
        query = options.serialize()
    except JiraMalformedOptionsError as exc:
        logger.warning(
            "search options not serializable; sending no query board=%s error=%s",
            board_id,
            exc,
        )
        query = ""
    return f"/board/{board_id}/issue?{query}"


class IssuesService:
    """Issue endpoints of the core and agile API families."""

    def __init__(self, client: RequestClient) -> None:
        self._client = client

    def get(self, issue_id: str | int) -> Issue:
        payload = self._client.get(CORE_API, f"/issue/{issue_id}")
        return parse_issue(payload)

    def create(self, data: CreateIssue) -> CreateResponse:
        payload = self._client.post(CORE_API, "/issue", data.to_payload())
        response = parse_create_response(payload)
        logger.info("issue created key=%s id=%s", response.key, response.id)
        return response

    def list(self, board: Board | str | int, options: SearchOptions) -> Page[Issue]:
        """Fetch a single page of a board's issues."""

        path = build_board_issues_path(board_id_of(board), options)
        return parse_issue_page(self._client.get(AGILE_API, path))

    def iter(
        self,
        board: Board | str | int,
        options: SearchOptions | None = None,
    ) -> PageIterator[Issue]:
        """Iterate over every issue on a board, fetching pages as needed.

        The first page is requested before this returns, so its errors are
        raised here; failures of later pages end the iteration silently
        (see :attr:`PageIterator.last_error`).
        """

        return PageIterator.begin(
            board_id_of(board),
            options or SearchOptions(),
            self.list,
        )


__all__ = [
    "CORE_API",
    "AGILE_API",
    "RequestClient",
    "IssuesService",
    "board_id_of",
    "build_board_issues_path",
]
