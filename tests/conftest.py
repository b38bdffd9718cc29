"""Pytest configuration and fixtures.

Keeps configuration-related environment variables out of the tests and
provides the stock mock requester.
"""

import pytest

from quotes.config import Config
from quotes.mock import MockRequester


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in Config.env_mappings:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def mock_requester() -> MockRequester:
    return MockRequester()
