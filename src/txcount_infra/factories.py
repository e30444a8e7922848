"""Factory functions for creating infrastructure clients from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from txcount_core.exceptions import CacheBackendError

if TYPE_CHECKING:
    from txcount_core.config.settings import Settings
    from txcount_infra.cache.disk_cache import DiskCacheClient
    from txcount_infra.cache.redis_cache import RedisCacheClient
    from txcount_infra.rpc.solana_client import SolanaRpcClient


def create_cache_client(settings: Settings) -> RedisCacheClient | DiskCacheClient:
    """Create a cache client based on settings.

    Returns ``RedisCacheClient`` when ``settings.cache_backend == "redis"``
    and ``DiskCacheClient`` rooted at ``settings.cache_dir`` for ``"disk"``.
    """
    if settings.cache_backend == "redis":
        from txcount_infra.cache.redis_cache import RedisCacheClient

        return RedisCacheClient.from_settings(settings)

    if settings.cache_backend == "disk":
        from txcount_infra.cache.disk_cache import DiskCacheClient

        return DiskCacheClient(settings.cache_dir)

    msg = f"Unknown cache backend: {settings.cache_backend!r}"
    raise CacheBackendError(msg)


def create_rpc_client(settings: Settings) -> SolanaRpcClient:
    """Create the Solana JSON-RPC client."""
    from txcount_infra.rpc.solana_client import SolanaRpcClient

    return SolanaRpcClient.from_settings(settings)
