"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    icons_available: int = 0


class IconListResponse(BaseModel):
    icons: list[str] = Field(default_factory=list)
    count: int = 0
