"""HTTP routers."""

from txcount_api.routes.client import router as client_router
from txcount_api.routes.solana import router as solana_router

__all__ = ["client_router", "solana_router"]
