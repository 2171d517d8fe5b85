"""Canvas sizing — smallest canvas containing every padded icon box."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from app.models.geometry import Dimensions, Position
from app.models.options import LayoutOptions


def compute_dimensions(positions: Sequence[Position], layout: LayoutOptions) -> Dimensions:
    border = 2 * layout.padding
    if not positions:
        return Dimensions(border, border)

    pts = np.asarray(positions, dtype=np.int64).reshape(-1, 2)
    max_x, max_y = pts.max(axis=0)
    return Dimensions(
        width=int(max_x) + layout.size + border,
        height=int(max_y) + layout.size + border,
    )
