"""Icon document parser — regex extraction with graceful fallback.

Raw SVG string → ParsedIcon (viewBox, root fill, inner content).
Never raises: malformed input yields defaults instead.
"""

from __future__ import annotations

import logging
import re

from app.engine.context import DEFAULT_VIEWBOX, ParsedIcon

logger = logging.getLogger(__name__)

_VIEWBOX_RE = re.compile(r"""viewBox\s*=\s*(["'])(.*?)\1""", re.IGNORECASE | re.DOTALL)
_ROOT_OPEN_RE = re.compile(r"<svg\b([^>]*)>", re.IGNORECASE)
_BODY_RE = re.compile(r"<svg\b[^>]*>(.*)</svg\s*>", re.IGNORECASE | re.DOTALL)
_ATTR_RE = re.compile(r"""([\w:][\w:.-]*)\s*=\s*(["'])(.*?)\2""", re.DOTALL)
# Markup that is only legal at document level
_PROLOG_RE = re.compile(r"<\?xml.*?\?>|<!DOCTYPE[^>]*>|<!--.*?-->", re.IGNORECASE | re.DOTALL)

# Root attributes that children inherit and that a stroke-drawn icon needs to stay visible
PRESENTATION_ATTRS = (
    "stroke",
    "stroke-width",
    "stroke-linecap",
    "stroke-linejoin",
    "stroke-opacity",
    "fill-rule",
    "fill-opacity",
    "color",
)


def parse_icon(svg_text: str, name: str = "") -> ParsedIcon:
    """Parse one icon document into a ParsedIcon."""
    root = _ROOT_OPEN_RE.search(svg_text)
    root_attrs = _extract_attrs(root.group(1)) if root else {}

    viewbox = _find_viewbox(svg_text, root.group(1) if root else "")
    color = root_attrs.get("fill") or None
    presentation = tuple((k, v) for k, v in root_attrs.items() if k in PRESENTATION_ATTRS and v)
    inner = _extract_inner(svg_text, root)

    logger.debug("Parsed icon %r: viewBox=%r fill=%r, %d chars", name, viewbox, color, len(inner))
    return ParsedIcon(
        viewbox=viewbox, color=color, inner=inner, presentation=presentation, name=name
    )


def _find_viewbox(svg_text: str, root_attr_text: str) -> str:
    """viewBox of the root element, else the first one anywhere in the text."""
    match = _VIEWBOX_RE.search(root_attr_text) or _VIEWBOX_RE.search(svg_text)
    if match:
        value = match.group(2).strip()
        if value:
            return value
    return DEFAULT_VIEWBOX


def _extract_inner(svg_text: str, root: re.Match[str] | None) -> str:
    if root is not None and root.group(1).rstrip().endswith("/"):
        # <svg ... /> has no content
        return ""
    body = _BODY_RE.search(svg_text)
    if body:
        return body.group(1).strip()
    logger.debug("No <svg>...</svg> wrapper found, using whole document as content")
    return _PROLOG_RE.sub("", svg_text).strip()


def _extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract attributes from the attribute part of a tag."""
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        attrs[m.group(1)] = m.group(3)
    return attrs
