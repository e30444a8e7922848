"""Cache-aside lookup of Solana block transaction counts."""

from __future__ import annotations

import structlog

from txcount_core.constants import BLOCK_CACHE_TTL_SECONDS, MAX_SUPPORTED_TRANSACTION_VERSION
from txcount_core.exceptions import BlockNotFoundError
from txcount_core.interfaces.cache import CacheClient
from txcount_core.interfaces.rpc import BlockchainRpcClient
from txcount_core.models.lookup import LookupResult
from txcount_infra.cache.block_cache import TransactionCountCache, parse_count

logger = structlog.get_logger()


class SolanaService:
    """Answers transaction-count and health queries against one RPC endpoint.

    Counts are read through the cache: a hit never touches the RPC client,
    a miss fetches the block once and stores its count for the fixed TTL.
    Concurrent misses for the same block are not coalesced; both fetch and
    both write the same value.
    """

    def __init__(
        self,
        rpc: BlockchainRpcClient,
        cache: CacheClient,
        *,
        ttl_seconds: int = BLOCK_CACHE_TTL_SECONDS,
    ) -> None:
        """Initialize with an RPC client and a cache backend."""
        self._rpc = rpc
        self._counts = TransactionCountCache(cache, ttl_seconds=ttl_seconds)

    async def get_transaction_count(self, block_number: int) -> LookupResult:
        """Return the transaction count for ``block_number``.

        Raises ``BlockNotFoundError`` when the node has no such block. RPC
        and cache read failures propagate unchanged.
        """
        raw = await self._counts.get_raw(block_number)
        if raw is not None:
            cached_count = parse_count(raw)
            if cached_count is not None:
                logger.debug("cache_hit", block_number=block_number, count=cached_count)
                return LookupResult(count=cached_count, cached=True)
            logger.warning("cache_value_invalid", block_number=block_number, value=raw)

        logger.debug("cache_miss", block_number=block_number)
        logger.info("block_fetch_start", block_number=block_number)
        try:
            block = await self._rpc.get_block(
                block_number,
                max_supported_transaction_version=MAX_SUPPORTED_TRANSACTION_VERSION,
            )
        except Exception as exc:
            logger.error(
                "block_fetch_failed",
                block_number=block_number,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        if block is None:
            logger.warning("block_not_found", block_number=block_number)
            raise BlockNotFoundError(block_number)

        count = block.transaction_count
        logger.info("block_fetched", block_number=block_number, transaction_count=count)

        try:
            await self._counts.set_count(block_number, count)
        except Exception as exc:
            logger.warning(
                "cache_write_failed",
                block_number=block_number,
                error_type=type(exc).__name__,
                error=str(exc),
            )

        return LookupResult(count=count, cached=False)

    async def check_connection(self) -> bool:
        """Return True if the RPC node answers a version query."""
        try:
            await self._rpc.get_version()
        except Exception as exc:
            logger.error(
                "rpc_health_check_failed",
                endpoint=self._rpc.endpoint,
                error_type=type(exc).__name__,
                error=str(exc),
            )
            return False
        return True

    def get_rpc_endpoint(self) -> str:
        """URL of the RPC endpoint backing this service."""
        return self._rpc.endpoint
