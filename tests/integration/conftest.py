"""Integration test fixtures: real Redis, mocked RPC."""

from __future__ import annotations

import socket
import time
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

# ---------------------------------------------------------------------------
# Service health checks (with retry for CI container start-up)
# ---------------------------------------------------------------------------


def _tcp_reachable(
    host: str,
    port: int,
    timeout: float = 1.0,
    retries: int = 10,
    delay: float = 2.0,
) -> bool:
    """Check if a TCP service is reachable, retrying on failure."""
    for attempt in range(retries):
        try:
            with socket.create_connection((host, port), timeout=timeout):
                return True
        except OSError:
            if attempt < retries - 1:
                time.sleep(delay)
    return False


_redis_up = _tcp_reachable("localhost", 6379, retries=3, delay=1.0)

require_redis = pytest.mark.skipif(
    not _redis_up,
    reason="Redis not reachable on localhost:6379; run `docker run -p 6379:6379 redis:7`",
)

# Database 1 keeps test keys away from a developer's default database
TEST_REDIS_DB = 1


@pytest_asyncio.fixture
async def redis_client() -> AsyncGenerator[object, None]:
    """Yield a redis.asyncio client on the test database, flushed afterwards."""
    if not _redis_up:
        pytest.skip("Redis not available")

    from redis.asyncio import Redis

    client = Redis(host="localhost", port=6379, db=TEST_REDIS_DB)
    await client.flushdb()
    yield client
    await client.flushdb()
    await client.aclose()
