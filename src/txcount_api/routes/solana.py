"""Solana block transaction-count and health endpoints."""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from txcount_api.dependencies import get_solana_service
from txcount_api.services.solana_service import SolanaService
from txcount_core.constants import INVALID_BLOCK_NUMBER_MESSAGE
from txcount_core.models.lookup import HealthResponse, TransactionCountResponse

logger = structlog.get_logger()

router = APIRouter(prefix="/solana", tags=["solana"])

_BLOCK_NUMBER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

ServiceDep = Annotated[SolanaService, Depends(get_solana_service)]


def parse_block_number(raw: str) -> int | None:
    """Parse a decimal block number, or None if non-numeric or negative."""
    if not _BLOCK_NUMBER_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    return value if value >= 0 else None


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(UTC).isoformat(timespec="milliseconds")
    return now.replace("+00:00", "Z")


@router.get(
    "/block/{block_number}/transactions",
    response_model=TransactionCountResponse,
    summary="Transaction count of one block",
)
async def get_transaction_count(block_number: str, service: ServiceDep) -> TransactionCountResponse:
    """Return the number of transactions in a block, served from cache when possible."""
    try:
        block_num = parse_block_number(block_number)
        if block_num is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=INVALID_BLOCK_NUMBER_MESSAGE,
            )

        result = await service.get_transaction_count(block_num)

        return TransactionCountResponse(
            block_number=block_num,
            transaction_count=result,
            timestamp=iso_timestamp(),
        )
    except HTTPException:
        raise
    except Exception as exc:
        logger.error(
            "transaction_count_failed",
            block_number=block_number,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch transaction count for block {block_number}: {exc}",
        ) from exc


@router.get("/health", response_model=HealthResponse, summary="RPC connectivity check")
async def health_check(service: ServiceDep) -> HealthResponse:
    """Report whether the configured RPC endpoint is reachable."""
    is_connected = await service.check_connection()
    return HealthResponse(
        status="healthy" if is_connected else "unhealthy",
        timestamp=iso_timestamp(),
        rpc_endpoint=service.get_rpc_endpoint(),
    )
