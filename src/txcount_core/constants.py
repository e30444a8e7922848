"""Shared constants for the transaction counter."""

from __future__ import annotations

# Public mainnet-beta cluster, used when SOLANA_RPC_URL is unset
MAINNET_BETA_RPC_URL = "https://api.mainnet-beta.solana.com"

# Block reads only see blocks voted on by a supermajority
RPC_COMMITMENT = "confirmed"

# Highest transaction version the RPC endpoint may return (legacy + v0)
MAX_SUPPORTED_TRANSACTION_VERSION = 0

# Block transaction counts never change, entries only age out
BLOCK_CACHE_TTL_MS = 86_400_000
BLOCK_CACHE_TTL_SECONDS = BLOCK_CACHE_TTL_MS // 1000
BLOCK_CACHE_KEY_PREFIX = "block_tx_count:"

INVALID_BLOCK_NUMBER_MESSAGE = "Invalid block number. Must be a positive integer."

APP_VERSION = "0.1.0"
