"""Per-request data carried from icon retrieval through composition.

IconSource → raw text as returned by the icon store (None on a miss)
ParsedIcon → what the composer needs from one icon document
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_VIEWBOX = "0 0 24 24"


@dataclass(frozen=True)
class IconSource:
    name: str
    # Raw SVG text; None when the store has no such icon
    text: str | None = None

    @property
    def resolved(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class ParsedIcon:
    """Reusable parts of one icon document."""

    # viewBox of the source document, passed through verbatim
    viewbox: str = DEFAULT_VIEWBOX
    # fill declared on the root <svg>, None when undeclared
    color: str | None = None
    # Everything between the outermost <svg ...> and </svg>
    inner: str = ""
    # Other root presentation attributes (stroke, stroke-width, ...) in source order
    presentation: tuple[tuple[str, str], ...] = ()
    name: str = ""
