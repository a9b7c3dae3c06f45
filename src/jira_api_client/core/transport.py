"""Sync HTTP transport: one request/response cycle per call, no retry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import JiraClientConfig
from .errors import JiraRequestFailedError, JiraTransportError
from .response_parsing import evaluate_response

logger = logging.getLogger("jira_api_client")


class SyncTransportClient(Protocol):
    def request(self, method: str, url: str, **kwargs: object) -> object: ...
    def close(self) -> None: ...


def build_default_headers(config: JiraClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: JiraClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_default_auth(config: JiraClientConfig) -> httpx.BasicAuth | None:
    if config.credentials is None:
        return None
    return httpx.BasicAuth(config.credentials.username, config.credentials.password)


class SyncTransport:
    """Synchronous transport for the Jira REST API."""

    def __init__(
        self,
        config: JiraClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
            auth=build_default_auth(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def build_url(self, api_name: str, path: str) -> str:
        return self._config.api_root(api_name) + path

    def request(
        self,
        method: str,
        api_name: str,
        path: str,
        *,
        body: object = None,
    ) -> object:
        if self._closed:
            raise JiraTransportError("transport is already closed")

        url = self.build_url(api_name, path)
        logger.debug("request start method=%s url=%s", method, url)
        kwargs: dict[str, object] = {}
        if body is not None:
            kwargs["json"] = body

        try:
            response = self._client.request(method, url, **kwargs)
        except Exception as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                method,
                url,
                exc.__class__.__name__,
            )
            raise JiraTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received method=%s url=%s http_status=%s",
            method,
            url,
            http_status,
        )
        try:
            payload = evaluate_response(response)
        except JiraRequestFailedError:
            logger.error(
                "request failed method=%s url=%s http_status=%s",
                method,
                url,
                http_status,
            )
            raise
        logger.info("request success method=%s url=%s", method, url)
        return payload


__all__ = [
    "SyncTransport",
    "SyncTransportClient",
    "build_default_headers",
    "build_default_timeout",
    "build_default_auth",
]
