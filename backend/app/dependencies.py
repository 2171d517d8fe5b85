"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from app.config import Settings, settings
from app.icons.store import IconStore


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_icon_store() -> IconStore:
    return IconStore(
        settings.icons_dir,
        suffix=settings.icon_suffix,
        cache_size=settings.icon_cache_size,
    )
