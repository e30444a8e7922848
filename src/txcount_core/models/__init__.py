"""Domain models for the transaction counter."""

from txcount_core.models.block import Block, VersionInfo
from txcount_core.models.lookup import HealthResponse, LookupResult, TransactionCountResponse

__all__ = [
    "Block",
    "HealthResponse",
    "LookupResult",
    "TransactionCountResponse",
    "VersionInfo",
]
