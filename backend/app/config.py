"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings

BACKEND_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    iconstrip_env: str = "development"
    iconstrip_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Icon retrieval
    icons_dir: Path = BACKEND_DIR / "assets" / "icons"
    icon_suffix: str = ".svg"
    icon_cache_size: int = 256

    # Request limits
    max_icons: int = 50

    # Response caching policy
    cache_control: str = "public, max-age=86400, stale-while-revalidate=60"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
