"""Per-block transaction count cache."""

from __future__ import annotations

from txcount_core.constants import BLOCK_CACHE_KEY_PREFIX, BLOCK_CACHE_TTL_SECONDS
from txcount_core.interfaces.cache import CacheClient


class TransactionCountCache:
    """Cache for block transaction counts, keyed by block number."""

    def __init__(self, cache: CacheClient, ttl_seconds: int = BLOCK_CACHE_TTL_SECONDS) -> None:
        """Initialize with a CacheClient implementation."""
        self._cache = cache
        self._ttl_seconds = ttl_seconds

    def key(self, block_number: int) -> str:
        """Generate a cache key from a block number."""
        return f"{BLOCK_CACHE_KEY_PREFIX}{block_number}"

    async def get_raw(self, block_number: int) -> str | None:
        """Return the stored value for a block, undecoded."""
        return await self._cache.get(self.key(block_number))

    async def set_count(self, block_number: int, count: int) -> None:
        """Store a block's transaction count with the fixed TTL."""
        await self._cache.set(self.key(block_number), str(count), ttl_seconds=self._ttl_seconds)


def parse_count(raw: str) -> int | None:
    """Decode a stored count, or None if the value is not a non-negative int."""
    try:
        count = int(raw)
    except ValueError:
        return None
    return count if count >= 0 else None
