"""Custom exception hierarchy for the transaction counter."""

from __future__ import annotations


class TxCountError(Exception):
    """Base exception for all transaction counter errors."""


class BlockNotFoundError(TxCountError):
    """Raised when the RPC endpoint has no block for the requested slot."""

    def __init__(self, block_number: int) -> None:
        self.block_number = block_number
        super().__init__(f"Block {block_number} not found")


class SolanaRpcError(TxCountError):
    """Raised when a JSON-RPC response carries an error object."""

    def __init__(self, code: int, message: str, data: object = None) -> None:
        self.code = code
        self.data = data
        super().__init__(message)


class CacheBackendError(TxCountError):
    """Raised when the configured cache backend cannot be built."""
