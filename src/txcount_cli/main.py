"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio

import structlog
import typer
import uvicorn
from rich.console import Console

from txcount_api.app import create_app
from txcount_api.observability import configure_logging
from txcount_api.services.solana_service import SolanaService
from txcount_core.config.settings import Settings
from txcount_core.constants import APP_VERSION
from txcount_core.models.lookup import LookupResult
from txcount_infra.factories import create_cache_client, create_rpc_client

app = typer.Typer(
    name="txcount",
    help="Transaction counts of Solana blocks, cached in Redis",
)
console = Console()
logger = structlog.get_logger()


def _load_settings(*, lite: bool = False, verbose: bool = False) -> Settings:
    """Read settings from the environment and apply CLI overrides."""
    settings = Settings()  # type: ignore[call-arg]
    if lite:
        settings.cache_backend = "disk"
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, "--port", help="Listen port (default: PORT)"),
    lite: bool = typer.Option(False, "--lite", help="Disk cache instead of Redis, no Docker"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Run the HTTP API and form client."""
    settings = _load_settings(lite=lite, verbose=verbose)
    bind_host = host or settings.api_host
    bind_port = port or settings.api_port

    console.print(f"[bold green]Serving on[/bold green] http://{bind_host}:{bind_port}")
    console.print(f"[dim]RPC: {settings.solana_rpc_url} | cache: {settings.cache_backend}[/dim]")

    uvicorn.run(
        create_app(settings),
        host=bind_host,
        port=bind_port,
        log_config=None,
    )


@app.command()
def lookup(
    block_number: int = typer.Argument(..., help="Block (slot) number"),
    lite: bool = typer.Option(False, "--lite", help="Disk cache instead of Redis, no Docker"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the transaction count of one block."""
    if block_number < 0:
        console.print("[red]Error:[/red] Invalid block number. Must be a positive integer.")
        raise typer.Exit(code=1)

    settings = _load_settings(lite=lite, verbose=verbose)
    try:
        result = asyncio.run(_lookup(settings, block_number))
    except Exception as exc:
        console.print(
            f"[red]Error:[/red] Failed to fetch transaction count for block {block_number}: {exc}"
        )
        raise typer.Exit(code=1) from exc

    source = "cache" if result.cached else "RPC"
    console.print(f"[bold]Block {block_number}:[/bold] {result.count:,} transactions")
    console.print(f"[dim]Source: {source}[/dim]")


@app.command()
def health(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Check that the configured RPC endpoint answers."""
    settings = _load_settings(verbose=verbose)
    healthy = asyncio.run(_check_health(settings))
    if healthy:
        console.print(f"[green]healthy[/green] {settings.solana_rpc_url}")
        return
    console.print(f"[red]unhealthy[/red] {settings.solana_rpc_url}")
    raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"solana-tx-counter v{APP_VERSION}")


async def _lookup(settings: Settings, block_number: int) -> LookupResult:
    """Run one cache-aside lookup and release the clients."""
    cache = create_cache_client(settings)
    try:
        rpc = create_rpc_client(settings)
        try:
            return await SolanaService(rpc, cache).get_transaction_count(block_number)
        finally:
            await rpc.aclose()
    finally:
        await cache.close()


async def _check_health(settings: Settings) -> bool:
    """Ask the RPC node for its version without touching the cache."""
    rpc = create_rpc_client(settings)
    try:
        return await SolanaService(rpc, _NullCache()).check_connection()
    finally:
        await rpc.aclose()


class _NullCache:
    """Cache that stores nothing, for commands that never read counts."""

    async def get(self, key: str) -> str | None:
        """Always miss."""
        return None

    async def set(self, key: str, value: str, ttl_seconds: int = 86400) -> None:
        """Discard the value."""

    async def delete(self, key: str) -> None:
        """No-op."""

    async def exists(self, key: str) -> bool:
        """Nothing is ever stored."""
        return False

    async def close(self) -> None:
        """No-op."""


if __name__ == "__main__":
    app()
