"""Solana JSON-RPC client over httpx."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any

import httpx
import structlog

from txcount_core.constants import MAX_SUPPORTED_TRANSACTION_VERSION, RPC_COMMITMENT
from txcount_core.exceptions import SolanaRpcError
from txcount_core.models.block import Block, VersionInfo

if TYPE_CHECKING:
    from txcount_core.config.settings import Settings

logger = structlog.get_logger()


class SolanaRpcClient:
    """Minimal read-only client for a Solana JSON-RPC 2.0 endpoint.

    Only the two calls the lookup service needs are implemented. Transport
    failures (``httpx.HTTPError``) propagate unchanged; JSON-RPC error
    objects are raised as ``SolanaRpcError``.
    """

    def __init__(
        self,
        endpoint: str,
        *,
        commitment: str = RPC_COMMITMENT,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with an endpoint URL and an optional shared httpx client."""
        self._endpoint = endpoint
        self._commitment = commitment
        self._http = http_client or httpx.AsyncClient(timeout=timeout)
        self._ids = itertools.count(1)

    @classmethod
    def from_settings(cls, settings: Settings) -> SolanaRpcClient:
        """Build a client from the SOLANA_RPC_URL settings."""
        client = cls(settings.solana_rpc_url, timeout=settings.rpc_timeout_seconds)
        logger.info("rpc_client_ready", endpoint=settings.solana_rpc_url)
        return client

    @property
    def endpoint(self) -> str:
        """URL of the JSON-RPC endpoint."""
        return self._endpoint

    @property
    def commitment(self) -> str:
        """Commitment level sent with block queries."""
        return self._commitment

    async def get_block(
        self,
        slot: int,
        *,
        max_supported_transaction_version: int = MAX_SUPPORTED_TRANSACTION_VERSION,
    ) -> Block | None:
        """Fetch a block by slot. Returns None when the node returns a null result."""
        config = {
            "commitment": self._commitment,
            "encoding": "json",
            "transactionDetails": "signatures",
            "rewards": False,
            "maxSupportedTransactionVersion": max_supported_transaction_version,
        }
        result = await self._call("getBlock", [slot, config])
        if result is None:
            return None
        return Block.model_validate(result)

    async def get_version(self) -> VersionInfo:
        """Fetch the node's software version."""
        result = await self._call("getVersion")
        return VersionInfo.model_validate(result)

    async def aclose(self) -> None:
        """Release the underlying HTTP connection pool."""
        await self._http.aclose()

    async def _call(self, method: str, params: list[Any] | None = None) -> Any:  # noqa: ANN401
        """Send one JSON-RPC request and return its ``result`` member."""
        payload: dict[str, Any] = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
        }
        if params is not None:
            payload["params"] = params

        response = await self._http.post(self._endpoint, json=payload)
        response.raise_for_status()
        body = response.json()

        error = body.get("error")
        if error is not None:
            logger.debug(
                "rpc_error_response",
                method=method,
                code=error.get("code"),
                message=error.get("message"),
            )
            raise SolanaRpcError(
                code=int(error.get("code", 0)),
                message=str(error.get("message", "Unknown RPC error")),
                data=error.get("data"),
            )
        return body.get("result")
