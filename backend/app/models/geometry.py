"""Positions and canvas extents produced by the layout stage."""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    x: int
    y: int


class Dimensions(NamedTuple):
    width: int
    height: int
