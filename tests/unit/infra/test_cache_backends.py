"""Tests for cache backends and the transaction count cache wrapper."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from pydantic import SecretStr

from txcount_infra.cache.block_cache import TransactionCountCache, parse_count
from txcount_infra.cache.disk_cache import DiskCacheClient
from txcount_infra.cache.redis_cache import RedisCacheClient
from tests.mocks.mock_clients import make_mock_redis
from tests.mocks.mock_settings import make_real_settings

# ---------------------------------------------------------------------------
# TestRedisCacheClient
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestRedisCacheClient:
    """Tests for Redis-backed cache with mocked redis client."""

    @pytest.mark.asyncio
    async def test_get_returns_decoded_bytes(self) -> None:
        """Redis bytes are decoded to str."""
        mock_redis = make_mock_redis()
        mock_redis.get.return_value = b"12"
        cache = RedisCacheClient(mock_redis)
        assert await cache.get("k") == "12"
        mock_redis.get.assert_awaited_once_with("k")

    @pytest.mark.asyncio
    async def test_get_returns_none_on_miss(self) -> None:
        """Cache miss returns None."""
        cache = RedisCacheClient(make_mock_redis())
        assert await cache.get("missing") is None

    @pytest.mark.asyncio
    async def test_set_calls_redis_with_ttl(self) -> None:
        """Set passes name, value, and ex to Redis."""
        mock_redis = make_mock_redis()
        cache = RedisCacheClient(mock_redis)
        await cache.set("k", "v", ttl_seconds=120)
        mock_redis.set.assert_awaited_once_with(name="k", value="v", ex=120)

    @pytest.mark.asyncio
    async def test_delete_and_exists(self) -> None:
        """Delete forwards to Redis; exists maps the count to bool."""
        mock_redis = make_mock_redis()
        cache = RedisCacheClient(mock_redis)
        await cache.delete("k")
        mock_redis.delete.assert_awaited_once_with("k")
        assert await cache.exists("k") is False
        mock_redis.exists.return_value = 1
        assert await cache.exists("k") is True

    @pytest.mark.asyncio
    async def test_close_closes_pool(self) -> None:
        """Close releases the redis connection pool."""
        mock_redis = make_mock_redis()
        await RedisCacheClient(mock_redis).close()
        mock_redis.aclose.assert_awaited_once()

    @pytest.mark.parametrize("password", ["hunter2", "p@ss:w/rd#1"])
    def test_from_settings_uses_redis_url(self, password: str) -> None:
        """Host, port, db, and password reach the pool through redis_url."""
        settings = make_real_settings(
            redis_host="cache.internal",
            redis_port=6380,
            redis_db=2,
            redis_password=SecretStr(password),
        )
        client = RedisCacheClient.from_settings(settings)
        kwargs = client._redis.connection_pool.connection_kwargs
        assert kwargs["host"] == "cache.internal"
        assert kwargs["port"] == 6380
        assert kwargs["db"] == 2
        assert kwargs["password"] == password


# ---------------------------------------------------------------------------
# TestDiskCacheClient
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestDiskCacheClient:
    """Tests for diskcache-backed cache."""

    @pytest.mark.asyncio
    async def test_set_and_get(self, tmp_path: Path) -> None:
        """Store a value and retrieve it."""
        cache = DiskCacheClient(tmp_path / "cache")
        await cache.set("key1", "value1", ttl_seconds=60)
        assert await cache.get("key1") == "value1"
        await cache.close()

    @pytest.mark.asyncio
    async def test_exists_and_delete(self, tmp_path: Path) -> None:
        """Exists returns correct state; delete removes."""
        cache = DiskCacheClient(tmp_path / "cache")
        assert await cache.exists("key1") is False
        await cache.set("key1", "value1", ttl_seconds=60)
        assert await cache.exists("key1") is True
        await cache.delete("key1")
        assert await cache.get("key1") is None
        await cache.close()


# ---------------------------------------------------------------------------
# TestTransactionCountCache
# ---------------------------------------------------------------------------


@pytest.mark.unit
class TestTransactionCountCache:
    """Tests for the block count wrapper."""

    def test_key_is_prefix_plus_decimal(self) -> None:
        """Keys are deterministic and carry the block number in decimal."""
        cache = TransactionCountCache(AsyncMock())
        assert cache.key(123456) == "block_tx_count:123456"
        assert cache.key(0) == cache.key(0)

    @pytest.mark.asyncio
    async def test_set_count_uses_fixed_ttl(self) -> None:
        """Counts are stored as decimal strings with a 24h TTL."""
        inner = AsyncMock()
        cache = TransactionCountCache(inner)
        await cache.set_count(5, 42)
        inner.set.assert_awaited_once_with("block_tx_count:5", "42", ttl_seconds=86_400)

    @pytest.mark.asyncio
    async def test_get_raw_reads_block_key(self) -> None:
        """get_raw reads the block's key."""
        inner = AsyncMock()
        inner.get = AsyncMock(return_value="7")
        cache = TransactionCountCache(inner)
        assert await cache.get_raw(5) == "7"
        inner.get.assert_awaited_once_with("block_tx_count:5")

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("0", 0), ("42", 42), ("-1", None), ("abc", None), ("", None), ("4.2", None)],
    )
    def test_parse_count(self, raw: str, expected: int | None) -> None:
        """Only non-negative integers decode."""
        assert parse_count(raw) == expected
