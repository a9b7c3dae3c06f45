"""Public package exports for the Jira API client."""

from .client import JiraClient
from .config import Credentials, JiraClientConfig

__all__ = ["JiraClient", "JiraClientConfig", "Credentials"]
