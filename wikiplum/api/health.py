"""Health check endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from wikiplum.api.deps import get_page_source
from wikiplum.services.source_service import PageSource

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    version: str
    source: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    source: Annotated[PageSource, Depends(get_page_source)],
) -> HealthResponse:
    """Health check endpoint for monitoring and load balancers."""
    return HealthResponse(status="ok", version="0.1.0", source=source.name)
