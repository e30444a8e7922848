"""Public interface re-exports for txcount_core."""

from txcount_core.interfaces.cache import CacheClient
from txcount_core.interfaces.rpc import BlockchainRpcClient

__all__ = [
    "BlockchainRpcClient",
    "CacheClient",
]
