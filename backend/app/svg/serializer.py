"""Write SVG markup: single elements and the final composed document."""

from __future__ import annotations

from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"


def fmt_number(value: float) -> str:
    """Render a coordinate without float noise (12.0 -> "12", 1.5 -> "1.5")."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def attr_string(attrs: dict[str, Any]) -> str:
    """Serialize attributes in insertion order; None values are omitted."""
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = fmt_number(value)
        value = str(value)
        # Values copied from source documents may have been single-quoted
        if '"' not in value:
            quote = '"'
        elif "'" not in value:
            quote = "'"
        else:
            quote = '"'
            value = value.replace('"', "&quot;")
        parts.append(f"{key}={quote}{value}{quote}")
    return " ".join(parts)


def element(tag: str, attrs: dict[str, Any] | None = None, children: list[str] | None = None) -> str:
    """One element; self-closing when it has no children."""
    attr_str = attr_string(attrs or {})
    open_tag = f"<{tag} {attr_str}" if attr_str else f"<{tag}"
    if not children:
        return f"{open_tag}/>"
    return f"{open_tag}>{''.join(children)}</{tag}>"


def serialize_svg(
    children: list[str],
    width: int,
    height: int,
    defs: list[str] | None = None,
) -> str:
    """Wrap pre-rendered elements in one outer <svg> sized width x height."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{SVG_NS}" width="{width}" height="{height}"'
        f' viewBox="0 0 {width} {height}">',
    ]

    if defs:
        lines.append("  <defs>")
        for d in defs:
            lines.append(f"    {d}")
        lines.append("  </defs>")

    for child in children:
        lines.append(f"  {child}")

    lines.append("</svg>")
    return "\n".join(lines)
