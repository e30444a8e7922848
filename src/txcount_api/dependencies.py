"""FastAPI dependency providers."""

from __future__ import annotations

from fastapi import Request

from txcount_api.services.solana_service import SolanaService
from txcount_core.config.settings import Settings


def get_solana_service(request: Request) -> SolanaService:
    """Return the SolanaService attached to the running application."""
    service: SolanaService | None = getattr(request.app.state, "solana_service", None)
    if service is None:
        msg = "SolanaService not initialized; is the application lifespan running?"
        raise RuntimeError(msg)
    return service


def get_settings(request: Request) -> Settings:
    """Return the Settings the application was built with."""
    settings: Settings = request.app.state.settings
    return settings
