"""Lookup result and HTTP response models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LookupResult(BaseModel):
    """Transaction count for one block and whether it came from the cache."""

    count: int = Field(ge=0, description="Number of transactions in the block")
    cached: bool = Field(description="True when served from the cache store")


class TransactionCountResponse(BaseModel):
    """Body of ``GET /solana/block/{blockNumber}/transactions``."""

    model_config = ConfigDict(populate_by_name=True)

    block_number: int = Field(alias="blockNumber", description="Requested block number")
    transaction_count: LookupResult = Field(
        alias="transactionCount", description="Count and cache flag"
    )
    timestamp: str = Field(description="ISO-8601 UTC time the response was built")


class HealthResponse(BaseModel):
    """Body of ``GET /solana/health``."""

    model_config = ConfigDict(populate_by_name=True)

    status: Literal["healthy", "unhealthy"] = Field(description="RPC reachability")
    timestamp: str = Field(description="ISO-8601 UTC time of the check")
    rpc_endpoint: str = Field(alias="rpcEndpoint", description="Configured RPC endpoint")
