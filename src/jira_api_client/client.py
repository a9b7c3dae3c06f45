"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType

from .config import JiraClientConfig
from .core.errors import JiraClientClosedError, JiraRequestFailedError, JiraValidationError
from .core.models import Page
from .core.pagination import PageIterator
from .core.search_options import SearchOptions
from .core.transport import SyncTransport
from .issues.models import Board, CreateIssue, CreateResponse, Issue
from .issues.service import IssuesService


def validate_client_config(config: JiraClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise JiraValidationError(str(exc)) from exc


class _GuardedIterator(Iterator[Issue]):
    """Blocks pulls from an iterator once its client is closed."""

    def __init__(self, owner: "JiraClient", delegate: PageIterator[Issue]) -> None:
        self._owner = owner
        self._delegate = delegate

    @property
    def last_error(self) -> JiraRequestFailedError | None:
        return self._delegate.last_error

    @property
    def pages_fetched(self) -> int:
        return self._delegate.pages_fetched

    def __next__(self) -> Issue:
        self._owner._ensure_open()
        issue = next(self._delegate)
        self._owner._ensure_open()
        return issue


class _GuardedIssuesService:
    """Guard wrapper to block usage after client close."""

    def __init__(self, owner: "JiraClient", delegate: IssuesService) -> None:
        self._owner = owner
        self._delegate = delegate

    def get(self, issue_id: str | int) -> Issue:
        self._owner._ensure_open()
        return self._delegate.get(issue_id)

    def create(self, data: CreateIssue) -> CreateResponse:
        self._owner._ensure_open()
        return self._delegate.create(data)

    def list(self, board: Board | str | int, options: SearchOptions) -> Page[Issue]:
        self._owner._ensure_open()
        return self._delegate.list(board, options)

    def iter(
        self,
        board: Board | str | int,
        options: SearchOptions | None = None,
    ) -> _GuardedIterator:
        self._owner._ensure_open()
        return _GuardedIterator(self._owner, self._delegate.iter(board, options))


class JiraClient:
    """Public Jira API client."""

    def __init__(
        self,
        *,
        config: JiraClientConfig,
        transport: SyncTransport | None = None,
    ) -> None:
        self._config = config
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._closed = False
        self.issues = _GuardedIssuesService(self, IssuesService(self))

    @property
    def config(self) -> JiraClientConfig:
        return self._config

    def get(self, api_name: str, path: str) -> object:
        self._ensure_open()
        return self._transport.request("GET", api_name, path)

    def post(self, api_name: str, path: str, body: object) -> object:
        self._ensure_open()
        return self._transport.request("POST", api_name, path, body=body)

    def _ensure_open(self) -> None:
        if self._closed:
            raise JiraClientClosedError("JiraClient is already closed")

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "JiraClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "JiraClient",
    "validate_client_config",
]
