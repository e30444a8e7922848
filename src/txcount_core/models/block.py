"""Solana block and node version models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Block(BaseModel):
    """Subset of a ``getBlock`` RPC result needed to count transactions."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    blockhash: str | None = Field(default=None, description="Base-58 block hash")
    previous_blockhash: str | None = Field(
        default=None, alias="previousBlockhash", description="Hash of the parent block"
    )
    parent_slot: int | None = Field(
        default=None, alias="parentSlot", description="Slot of the parent block"
    )
    block_time: int | None = Field(
        default=None, alias="blockTime", description="Estimated production time (unix seconds)"
    )
    block_height: int | None = Field(
        default=None, alias="blockHeight", description="Number of blocks beneath this block"
    )
    signatures: list[str] | None = Field(
        default=None,
        description="First signature of each transaction (transactionDetails=signatures)",
    )
    transactions: list[dict[str, Any]] | None = Field(
        default=None, description="Full transactions (transactionDetails=full)"
    )

    @property
    def transaction_count(self) -> int:
        """Number of transactions, treating an absent list as empty.

        The node returns one signature per transaction in ``signatures`` mode,
        so either list gives the same count.
        """
        if self.signatures is not None:
            return len(self.signatures)
        return len(self.transactions or [])


class VersionInfo(BaseModel):
    """Result of a ``getVersion`` RPC call."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    solana_core: str = Field(alias="solana-core", description="Node software version")
    feature_set: int | None = Field(
        default=None, alias="feature-set", description="Unique identifier of the feature set"
    )
