"""Decoration builder — background, border, drop shadow and glow.

Produces filter definitions plus an optional background <rect>. A request
with no background and no border yields no shape at all, and the shadow
filter is only defined when there is a background shape to carry it. A
shadowed background is inset by the shadow margin so the shadow lands on
the canvas.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field

from app.models.geometry import Dimensions
from app.models.options import DecorationOptions
from app.svg.serializer import element

logger = logging.getLogger(__name__)

_HEX6_RE = re.compile(r"[0-9A-Fa-f]{6}")

THEME_BACKGROUNDS: dict[str, str] = {
    "light": "#f6f8fa",
    "dark": "#0d1117",
}

SHADOW_FILTER_ID = "iconstrip-shadow"
GLOW_FILTER_ID = "iconstrip-glow"

GLOW_BLUR = 2


@dataclass(frozen=True)
class ShadowStyle:
    blur: float
    offset: int
    opacity: float

    @property
    def margin(self) -> int:
        """Room the offset, blurred shadow needs between the shape and the canvas edge."""
        return math.ceil(self.blur) + self.offset


# Blur, offset and opacity all grow with the level.
SHADOW_LEVELS: dict[int, ShadowStyle] = {
    1: ShadowStyle(blur=1.5, offset=1, opacity=0.2),
    2: ShadowStyle(blur=3, offset=2, opacity=0.3),
    3: ShadowStyle(blur=6, offset=4, opacity=0.4),
}


@dataclass(frozen=True)
class Decorations:
    defs: list[str] = field(default_factory=list)
    background: str | None = None
    # filter attribute value for every icon group, None when glow is off
    icon_filter: str | None = None


def normalize_hex(value: str | None) -> str | None:
    """'1a2B3c' -> '#1a2b3c'; anything that is not exactly six hex digits -> None."""
    if value is None or not _HEX6_RE.fullmatch(value):
        return None
    return f"#{value.lower()}"


def resolve_background(decoration: DecorationOptions) -> str | None:
    """Explicit colour beats theme; an invalid explicit colour means no background."""
    if decoration.background_color is not None:
        color = normalize_hex(decoration.background_color)
        if color is None:
            logger.debug("Ignoring invalid background colour %r", decoration.background_color)
        return color
    if decoration.theme is not None:
        return THEME_BACKGROUNDS[decoration.theme]
    return None


def resolve_border(decoration: DecorationOptions) -> tuple[str, int] | None:
    color = normalize_hex(decoration.border_color)
    if color is None or decoration.border_width <= 0:
        return None
    return color, decoration.border_width


def shadow_filter(style: ShadowStyle) -> str:
    drop = element(
        "feDropShadow",
        {
            "dx": 0,
            "dy": style.offset,
            "stdDeviation": style.blur,
            "flood-color": "#000000",
            "flood-opacity": style.opacity,
        },
    )
    return element(
        "filter",
        {"id": SHADOW_FILTER_ID, "x": "-20%", "y": "-20%", "width": "140%", "height": "140%"},
        [drop],
    )


def glow_filter() -> str:
    blur = element("feGaussianBlur", {"stdDeviation": GLOW_BLUR, "result": "glow-blur"})
    merge = element(
        "feMerge",
        children=[
            element("feMergeNode", {"in": "glow-blur"}),
            element("feMergeNode", {"in": "SourceGraphic"}),
        ],
    )
    return element(
        "filter",
        {"id": GLOW_FILTER_ID, "x": "-50%", "y": "-50%", "width": "200%", "height": "200%"},
        [blur, merge],
    )


def build_decorations(decoration: DecorationOptions, dims: Dimensions) -> Decorations:
    fill = resolve_background(decoration)
    border = resolve_border(decoration)
    defs: list[str] = []
    background = None

    if fill is not None or border is not None:
        style = SHADOW_LEVELS.get(decoration.shadow_level)
        # The shadow only shows where it falls outside the shape, so leave it room
        inset = float(style.margin) if style is not None else 0.0
        if border is not None:
            # Half the stroke lies outside the rect edge
            inset += border[1] / 2

        attrs: dict[str, object] = {
            "x": inset,
            "y": inset,
            "width": max(dims.width - 2 * inset, 0),
            "height": max(dims.height - 2 * inset, 0),
            "fill": fill or "none",
        }
        if border is not None:
            attrs["stroke"] = border[0]
            attrs["stroke-width"] = border[1]
        if style is not None:
            defs.append(shadow_filter(style))
            attrs["filter"] = f"url(#{SHADOW_FILTER_ID})"
        background = element("rect", attrs)

    icon_filter = None
    if decoration.glow:
        defs.append(glow_filter())
        icon_filter = f"url(#{GLOW_FILTER_ID})"

    return Decorations(defs=defs, background=background, icon_filter=icon_filter)
