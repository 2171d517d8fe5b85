"""IconStrip layout and composition engine."""

from app.engine.canvas import compute_dimensions
from app.engine.composer import compose, compose_icons
from app.engine.context import IconSource, ParsedIcon
from app.engine.decorations import build_decorations
from app.engine.layout import compute_positions

__all__ = [
    "compute_positions",
    "compute_dimensions",
    "build_decorations",
    "compose",
    "compose_icons",
    "IconSource",
    "ParsedIcon",
]
