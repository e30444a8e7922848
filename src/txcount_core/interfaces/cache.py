"""Key-value cache interface used for block transaction counts."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheClient(Protocol):
    """String key-value store with per-key expiry (Redis, diskcache, test doubles)."""

    async def get(self, key: str) -> str | None:
        """Return the stored value, or None on a miss or after expiry."""
        ...

    async def set(self, key: str, value: str, ttl_seconds: int = 86400) -> None:
        """Store ``value`` under ``key``; the store evicts it after ``ttl_seconds``."""
        ...

    async def delete(self, key: str) -> None:
        """Remove a key; missing keys are ignored."""
        ...

    async def exists(self, key: str) -> bool:
        """Return True if ``key`` holds an unexpired value."""
        ...

    async def close(self) -> None:
        """Release connections or file handles held by the store."""
        ...
