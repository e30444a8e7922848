"""FastAPI application factory."""

from __future__ import annotations

import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from txcount_api.observability.logging import bind_request_context, clear_request_context
from txcount_api.routes import client_router, solana_router
from txcount_api.services.solana_service import SolanaService
from txcount_core.config.settings import Settings
from txcount_core.constants import APP_VERSION
from txcount_infra.factories import create_cache_client, create_rpc_client

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(settings: Settings | None = None, service: SolanaService | None = None) -> FastAPI:
    """Build the API application.

    When ``service`` is given it is used as-is (tests, embedding). Otherwise
    the lifespan builds the cache and RPC clients from ``settings`` on
    startup and closes them on shutdown.
    """
    settings = settings or Settings()  # type: ignore[call-arg]

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if app.state.solana_service is not None:
            yield
            return

        cache = create_cache_client(settings)
        try:
            rpc = create_rpc_client(settings)
        except Exception:
            await cache.close()
            raise
        app.state.solana_service = SolanaService(rpc, cache)
        logger.info(
            "api_started",
            rpc_endpoint=rpc.endpoint,
            cache_backend=settings.cache_backend,
        )
        try:
            yield
        finally:
            await rpc.aclose()
            await cache.close()
            app.state.solana_service = None
            logger.info("api_stopped")

    app = FastAPI(
        title="Solana Transaction Counter",
        description="Transaction counts of Solana blocks, cached in Redis",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.solana_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Bind a request id to the log context and echo it back."""
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        clear_request_context()
        bind_request_context(request_id, method=request.method, path=request.url.path)
        start = time.monotonic()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            logger.info(
                "request_complete",
                status_code=status_code,
                duration_ms=round((time.monotonic() - start) * 1000, 1),
            )
            clear_request_context()

    app.include_router(solana_router)
    app.include_router(client_router)
    return app
