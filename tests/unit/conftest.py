"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tests.mocks.mock_clients import FakeCacheClient, make_block, make_mock_rpc
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def fake_cache() -> FakeCacheClient:
    """Return an empty in-memory cache."""
    return FakeCacheClient()


@pytest.fixture
def mock_rpc() -> MagicMock:
    """Return a mock RPC client serving a 3-transaction block."""
    return make_mock_rpc(make_block(3))
