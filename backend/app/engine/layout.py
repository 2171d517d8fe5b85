"""Layout engine — one deterministic offset per icon index."""

from __future__ import annotations

import numpy as np

from app.models.geometry import Position
from app.models.options import LayoutOptions, LayoutStrategy


def compute_positions(count: int, layout: LayoutOptions) -> list[Position]:
    """Offsets (before padding) for icons 0..count-1 in input order."""
    if count <= 0:
        return []

    idx = np.arange(count, dtype=np.int64)
    zeros = np.zeros(count, dtype=np.int64)

    if layout.strategy is LayoutStrategy.HORIZONTAL:
        cols, rows = idx, zeros
    elif layout.strategy is LayoutStrategy.VERTICAL:
        cols, rows = zeros, idx
    elif layout.strategy is LayoutStrategy.GRID:
        # More columns than icons is a single row; keeps the divisor within int64
        columns = min(layout.columns, count)
        rows, cols = np.divmod(idx, columns)
    else:
        raise ValueError(f"Unknown layout strategy: {layout.strategy!r}")

    xs = cols * layout.step
    ys = rows * layout.step
    return [Position(int(x), int(y)) for x, y in zip(xs, ys)]
