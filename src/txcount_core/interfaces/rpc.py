"""Abstract blockchain RPC interface."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from txcount_core.models.block import Block, VersionInfo


@runtime_checkable
class BlockchainRpcClient(Protocol):
    """Read-only view of a blockchain node used by the lookup service."""

    @property
    def endpoint(self) -> str:
        """URL of the node this client talks to."""
        ...

    async def get_block(
        self, slot: int, *, max_supported_transaction_version: int = 0
    ) -> Block | None:
        """Fetch a block by slot, or None if the node reports no block."""
        ...

    async def get_version(self) -> VersionInfo:
        """Fetch the node's software version. Raises on any failure."""
        ...
