"""Single-page form client."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from txcount_api.dependencies import get_settings
from txcount_core.config.settings import Settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["client"])


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(
    request: Request, settings: Annotated[Settings, Depends(get_settings)]
) -> HTMLResponse:
    """Serve the block explorer form."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {"api_url": settings.public_api_url.rstrip("/")},
    )
