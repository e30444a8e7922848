"""diskcache-backed implementation of CacheClient."""

from __future__ import annotations

import asyncio
from pathlib import Path

import diskcache


class DiskCacheClient:
    """Single-host cache for running without Redis (``--lite``).

    diskcache is synchronous, so every call is pushed to a worker thread to
    keep the event loop serving requests.
    """

    def __init__(self, cache_dir: Path) -> None:
        """Open (creating if needed) the cache under ``cache_dir``."""
        cache_dir.mkdir(parents=True, exist_ok=True)
        self._cache = diskcache.Cache(str(cache_dir))

    async def get(self, key: str) -> str | None:
        """Retrieve a value by key; expired entries read as None."""
        result = await asyncio.to_thread(self._cache.get, key)
        return None if result is None else str(result)

    async def set(self, key: str, value: str, ttl_seconds: int = 86400) -> None:
        """Store a value that expires after ``ttl_seconds``."""
        await asyncio.to_thread(self._cache.set, key, value, expire=ttl_seconds)

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        await asyncio.to_thread(self._cache.delete, key)

    async def exists(self, key: str) -> bool:
        """Check if an unexpired key exists."""
        return await asyncio.to_thread(self._cache.__contains__, key)

    async def close(self) -> None:
        """Close the underlying SQLite connection."""
        self._cache.close()
