"""Composer — places parsed icons on the canvas and writes the final SVG."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from app.engine.canvas import compute_dimensions
from app.engine.context import ParsedIcon
from app.engine.decorations import build_decorations
from app.engine.layout import compute_positions
from app.errors import NoContentError
from app.models.geometry import Dimensions, Position
from app.models.options import DecorationOptions, LayoutOptions
from app.svg.serializer import element, serialize_svg

logger = logging.getLogger(__name__)


def icon_group(
    icon: ParsedIcon,
    position: Position,
    layout: LayoutOptions,
    icon_filter: str | None = None,
) -> str:
    """<g> at the padded position holding a size x size <svg> in the icon's own viewBox."""
    attrs = {"width": layout.size, "height": layout.size, "viewBox": icon.viewbox, "fill": icon.color}
    attrs.update(icon.presentation)
    frame = element(
        "svg",
        attrs,
        [icon.inner] if icon.inner else None,
    )
    x = position.x + layout.padding
    y = position.y + layout.padding
    return element("g", {"transform": f"translate({x}, {y})", "filter": icon_filter}, [frame])


def compose(
    icons: Sequence[ParsedIcon],
    positions: Sequence[Position],
    dims: Dimensions,
    decoration: DecorationOptions,
    layout: LayoutOptions,
) -> str:
    """Assemble defs, background and one group per icon into a single document."""
    if not icons:
        raise NoContentError()
    if len(icons) != len(positions):
        raise ValueError(f"Got {len(icons)} icons but {len(positions)} positions")

    deco = build_decorations(decoration, dims)

    children: list[str] = []
    if deco.background is not None:
        children.append(deco.background)
    for icon, pos in zip(icons, positions):
        children.append(icon_group(icon, pos, layout, deco.icon_filter))

    logger.debug("Composed %d icons on %dx%d canvas", len(icons), dims.width, dims.height)
    return serialize_svg(children, dims.width, dims.height, defs=deco.defs)


def compose_icons(
    icons: Sequence[ParsedIcon],
    layout: LayoutOptions,
    decoration: DecorationOptions,
) -> str:
    """Layout, sizing and composition in one call."""
    if not icons:
        raise NoContentError()
    positions = compute_positions(len(icons), layout)
    dims = compute_dimensions(positions, layout)
    return compose(icons, positions, dims, decoration, layout)
