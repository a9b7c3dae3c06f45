from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jira_api_client.config import JiraClientConfig  # noqa: E402


@pytest.fixture()
def config() -> JiraClientConfig:
    cfg = JiraClientConfig(host="https://jira.example.com")
    cfg.validate()
    return cfg
