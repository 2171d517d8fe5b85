"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from app.dependencies import get_icon_store
from app.icons.store import IconStore
from app.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(store: IconStore = Depends(get_icon_store)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        icons_available=len(store.names()),
    )
