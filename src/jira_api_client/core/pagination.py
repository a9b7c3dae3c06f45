"""Lazy iteration over startAt/maxResults paged collections."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from .errors import JiraProtocolError, JiraRequestFailedError
from .models import Page
from .search_options import SearchOptions, with_page

logger = logging.getLogger("jira_api_client")

T = TypeVar("T")

PageFetcher = Callable[[str, SearchOptions], Page[T]]


class PageIterator(Generic[T]):
    """Forward-only, non-restartable iterator over every item of a paged collection.

    Pages are fetched on demand, one at a time, each request's window derived
    from the previous response. Items of a page are handed out from the end of
    the page backwards, so within a page the order is the reverse of the
    server's.

    A failed fetch of any page after the first ends the iteration exactly
    like natural exhaustion; the error is kept in :attr:`last_error`.
    """

    def __init__(
        self,
        collection_id: str,
        options: SearchOptions,
        fetch_page: PageFetcher[T],
        first_page: Page[T],
    ) -> None:
        self._collection_id = collection_id
        self._options = options
        self._fetch_page = fetch_page
        self._page = first_page
        self._buffer: list[T] = list(first_page.values)
        self._done = False
        self._pages_fetched = 1
        self._last_error: JiraRequestFailedError | None = None

    @classmethod
    def begin(
        cls,
        collection_id: str,
        options: SearchOptions,
        fetch_page: PageFetcher[T],
    ) -> "PageIterator[T]":
        """Fetch the first page and return an iterator positioned on it.

        Errors from the first fetch propagate to the caller.
        """

        first_page = fetch_page(collection_id, options)
        logger.debug(
            "page fetched collection=%s start_at=%s max_results=%s total=%s items=%s",
            collection_id,
            first_page.start_at,
            first_page.max_results,
            first_page.total,
            len(first_page.values),
        )
        return cls(collection_id, options, fetch_page, first_page)

    @property
    def collection_id(self) -> str:
        return self._collection_id

    @property
    def options(self) -> SearchOptions:
        return self._options

    @property
    def page(self) -> Page[T]:
        """Most recently fetched page."""

        return self._page

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    @property
    def done(self) -> bool:
        return self._done

    @property
    def last_error(self) -> JiraRequestFailedError | None:
        return self._last_error

    def has_more(self) -> bool:
        return self._page.has_more()

    def __iter__(self) -> "PageIterator[T]":
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        if self._buffer:
            return self._buffer.pop()
        if self.has_more() and self._fetch_next_page():
            if self._buffer:
                return self._buffer.pop()
        self._done = True
        raise StopIteration

    def _fetch_next_page(self) -> bool:
        """Replace the buffered page with the next one; ``False`` on failure."""

        last = self._page
        next_options = with_page(
            self._options,
            start_at=last.next_start_at,
            max_results=last.max_results,
        )
        try:
            page = self._fetch_page(self._collection_id, next_options)
            if page.start_at != last.next_start_at:
                raise JiraProtocolError(
                    f"page offset did not advance: requested {last.next_start_at}, "
                    f"got {page.start_at}"
                )
        except JiraRequestFailedError as exc:
            self._last_error = exc
            logger.warning(
                "page fetch failed; ending iteration collection=%s start_at=%s error=%s",
                self._collection_id,
                last.next_start_at,
                exc.__class__.__name__,
            )
            return False

        self._pages_fetched += 1
        logger.debug(
            "page fetched collection=%s start_at=%s max_results=%s total=%s items=%s",
            self._collection_id,
            page.start_at,
            page.max_results,
            page.total,
            len(page.values),
        )
        self._page = page
        self._buffer = list(page.values)
        return True


__all__ = [
    "PageFetcher",
    "PageIterator",
]
