"""Services that sit between the HTTP routes and the infrastructure adapters."""

from txcount_api.services.solana_service import SolanaService

__all__ = ["SolanaService"]
