"""Integration tests for the Redis cache and the lookup service against real Redis."""

from __future__ import annotations

import asyncio

import pytest

from txcount_api.services.solana_service import SolanaService
from txcount_infra.cache.redis_cache import RedisCacheClient
from tests.integration.conftest import require_redis
from tests.mocks.mock_clients import make_block, make_mock_rpc

pytestmark = [pytest.mark.integration, require_redis]


class TestRedisCacheClient:
    """Redis cache operations against real Redis on localhost:6379/1."""

    async def test_set_get_roundtrip(self, redis_client: object) -> None:
        """Store a value and retrieve it."""
        from redis.asyncio import Redis

        assert isinstance(redis_client, Redis)
        cache = RedisCacheClient(redis_client)

        await cache.set("test:key", "42", ttl_seconds=60)
        assert await cache.get("test:key") == "42"

    async def test_ttl_expiry(self, redis_client: object) -> None:
        """Value expires after TTL."""
        from redis.asyncio import Redis

        assert isinstance(redis_client, Redis)
        cache = RedisCacheClient(redis_client)

        await cache.set("expiring:key", "1", ttl_seconds=1)
        assert await cache.get("expiring:key") == "1"

        await asyncio.sleep(2.5)
        assert await cache.get("expiring:key") is None


class TestServiceAgainstRedis:
    """Cache-aside lookup with a real Redis store."""

    async def test_miss_then_hit_sets_24h_ttl(self, redis_client: object) -> None:
        """A miss stores the count with a 24h TTL; the next call is a hit."""
        from redis.asyncio import Redis

        assert isinstance(redis_client, Redis)
        rpc = make_mock_rpc(make_block(3))
        service = SolanaService(rpc, RedisCacheClient(redis_client))

        first = await service.get_transaction_count(123456)
        second = await service.get_transaction_count(123456)

        assert (first.count, first.cached) == (3, False)
        assert (second.count, second.cached) == (3, True)
        assert rpc.get_block.await_count == 1

        ttl_ms = await redis_client.pttl("block_tx_count:123456")
        assert 86_390_000 < ttl_ms <= 86_400_000

    async def test_concurrent_misses_both_fetch(self, redis_client: object) -> None:
        """Simultaneous misses are not coalesced; both write the same value."""
        from redis.asyncio import Redis

        assert isinstance(redis_client, Redis)
        rpc = make_mock_rpc(make_block(4))

        async def _slow_get_block(*args: object, **kwargs: object) -> object:
            await asyncio.sleep(0.05)
            return make_block(4)

        rpc.get_block.side_effect = _slow_get_block
        service = SolanaService(rpc, RedisCacheClient(redis_client))

        results = await asyncio.gather(
            service.get_transaction_count(9), service.get_transaction_count(9)
        )

        assert [r.count for r in results] == [4, 4]
        assert rpc.get_block.await_count == 2
        assert await redis_client.get("block_tx_count:9") == b"4"
