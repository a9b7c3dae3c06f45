from __future__ import annotations

from collections.abc import Sequence

from jira_api_client.core.errors import JiraServerError
from jira_api_client.core.models import Page
from jira_api_client.core.search_options import SearchOptions


class PagedFetcher:
    """In-memory collection served in startAt/maxResults windows."""

    def __init__(
        self,
        items: Sequence[str],
        *,
        fail_at: Sequence[int] = (),
        default_page_size: int = 50,
        max_page_size: int | None = None,
    ):
        self.items = list(items)
        self.fail_at = set(fail_at)
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size
        self.calls: list[tuple[str, SearchOptions]] = []

    def __call__(self, collection_id: str, options: SearchOptions) -> Page[str]:
        self.calls.append((collection_id, options))
        start_at = options.start_at or 0
        if start_at in self.fail_at:
            raise JiraServerError("boom", http_status=500)
        max_results = options.max_results or self.default_page_size
        if self.max_page_size is not None:
            max_results = min(max_results, self.max_page_size)
        return Page(
            expand="",
            max_results=max_results,
            start_at=start_at,
            total=len(self.items),
            values=self.items[start_at : start_at + max_results],
        )

    @property
    def requested_offsets(self) -> list[int | None]:
        return [options.start_at for _, options in self.calls]


class RecordingRequestClient:
    """Stands in for JiraClient.get/post inside IssuesService."""

    def __init__(self, responses: Sequence[object] = ()):
        self.responses = list(responses)
        self.calls: list[tuple[str, str, str, object]] = []

    def _next(self) -> object:
        step = self.responses.pop(0)
        if isinstance(step, Exception):
            raise step
        return step

    def get(self, api_name: str, path: str) -> object:
        self.calls.append(("GET", api_name, path, None))
        return self._next()

    def post(self, api_name: str, path: str, body: object) -> object:
        self.calls.append(("POST", api_name, path, body))
        return self._next()


class DummyTransport:
    def __init__(self, responses: Sequence[object] = ()):
        self.closed = False
        self.responses = list(responses)
        self.calls: list[tuple[str, str, str]] = []

    def close(self):
        self.closed = True

    def request(self, method: str, api_name: str, path: str, *, body: object = None):
        self.calls.append((method, api_name, path))
        return self.responses.pop(0)
