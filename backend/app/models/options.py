"""Layout and decoration options plus the single defaults table they are built from."""

from __future__ import annotations

import enum
from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

# Bump whenever a default below changes; rendered output depends on these.
OPTIONS_DEFAULTS_VERSION = 1

LAYOUT_DEFAULTS: dict[str, Any] = {
    "size": 48,
    "gap": 15,
    "padding": 0,
    "strategy": "horizontal",
    "columns": 6,
}

DECORATION_DEFAULTS: dict[str, Any] = {
    "theme": None,
    "background_color": None,
    "border_color": None,
    "border_width": 0,
    "shadow_level": 0,
    "glow": False,
}


class LayoutStrategy(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    GRID = "grid"


class LayoutOptions(BaseModel):
    """Where icons go and how big they are."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    size: int = Field(default=LAYOUT_DEFAULTS["size"], ge=16, le=256)
    gap: int = Field(default=LAYOUT_DEFAULTS["gap"], ge=0, le=100)
    padding: int = Field(default=LAYOUT_DEFAULTS["padding"], ge=0)
    strategy: LayoutStrategy = Field(
        default=LayoutStrategy(LAYOUT_DEFAULTS["strategy"]),
        validation_alias=AliasChoices("strategy", "layout"),
    )
    columns: int = Field(default=LAYOUT_DEFAULTS["columns"], ge=1)

    @property
    def step(self) -> int:
        """Distance between the origins of two neighbouring icons."""
        return self.size + self.gap


class DecorationOptions(BaseModel):
    """Non-icon visuals: background, border, shadow, glow."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    theme: Literal["light", "dark"] | None = DECORATION_DEFAULTS["theme"]
    background_color: str | None = Field(
        default=DECORATION_DEFAULTS["background_color"],
        validation_alias=AliasChoices("background_color", "bg"),
    )
    border_color: str | None = Field(
        default=DECORATION_DEFAULTS["border_color"],
        validation_alias=AliasChoices("border_color", "border"),
    )
    border_width: int = Field(default=DECORATION_DEFAULTS["border_width"], ge=0)
    shadow_level: int = Field(
        default=DECORATION_DEFAULTS["shadow_level"],
        ge=0,
        le=3,
        validation_alias=AliasChoices("shadow_level", "shadow"),
    )
    glow: bool = DECORATION_DEFAULTS["glow"]

    @field_validator("theme", "background_color", "border_color", mode="before")
    @classmethod
    def _blank_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v
