"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class Credentials:
    """Basic-auth credentials (username plus password or API token)."""

    username: str
    password: str = field(repr=False)

    def validate(self) -> None:
        if not self.username:
            raise ValueError("credentials.username must not be empty")


@dataclass(slots=True, frozen=True)
class JiraClientConfig:
    """Runtime configuration for the Jira client."""

    host: str
    user_agent: str = "jira-api-client/0.1.0"
    api_version: str = "latest"
    credentials: Credentials | None = None

    transport: TransportConfig = field(default_factory=TransportConfig)

    def api_root(self, api_name: str) -> str:
        """Base URL of one API family, e.g. ``{host}/rest/agile/latest``."""

        return f"{self.host.rstrip('/')}/rest/{api_name}/{self.api_version}"

    def validate(self) -> None:
        if not self.host:
            raise ValueError("host must not be empty")
        if not self.host.startswith(("http://", "https://")):
            raise ValueError("host must be an http(s) URL")
        if not self.api_version:
            raise ValueError("api_version must not be empty")
        if self.credentials is not None:
            self.credentials.validate()
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "Credentials",
    "JiraClientConfig",
]
