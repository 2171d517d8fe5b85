"""Tests for composition of parsed icons into one document."""

import re
import xml.etree.ElementTree as ET

import pytest

from tests.conftest import CIRCLE_SVG, COLORED_ROOT_SVG, FILLED_COMPLEX_SVG, SMILEY_SVG

from app.engine.canvas import compute_dimensions
from app.engine.composer import compose, compose_icons, icon_group
from app.engine.layout import compute_positions
from app.errors import NoContentError
from app.models.geometry import Position
from app.models.options import DecorationOptions, LayoutOptions
from app.svg.parser import parse_icon
from app.svg.serializer import SVG_NS

NS = {"svg": SVG_NS}
_TRANSLATE_RE = re.compile(r"translate\((-?\d+), (-?\d+)\)")


def _icons():
    return [parse_icon(CIRCLE_SVG), parse_icon(FILLED_COMPLEX_SVG), parse_icon(COLORED_ROOT_SVG)]


def test_icon_group_applies_padding():
    layout = LayoutOptions(size=32, padding=4)
    out = icon_group(parse_icon(COLORED_ROOT_SVG), Position(10, 20), layout)
    assert out.startswith('<g transform="translate(14, 24)">')
    assert '<svg width="32" height="32" viewBox="0 0 100 100" fill="#24292f">' in out


def test_icon_group_omits_undeclared_color():
    out = icon_group(parse_icon(FILLED_COMPLEX_SVG), Position(0, 0), LayoutOptions())
    inner_svg = out[out.index("<svg"):out.index(">", out.index("<svg"))]
    assert "fill" not in inner_svg


def test_compose_round_trip_matches_layout():
    layout = LayoutOptions(size=40, gap=8, padding=6, strategy="grid", columns=2)
    icons = _icons()
    positions = compute_positions(len(icons), layout)
    dims = compute_dimensions(positions, layout)

    doc = compose(icons, positions, dims, DecorationOptions(), layout)
    root = ET.fromstring(doc.encode("utf-8"))

    assert int(root.get("width")) == dims.width
    assert int(root.get("height")) == dims.height

    groups = root.findall("svg:g", NS)
    assert len(groups) == len(icons)
    for group, pos, icon in zip(groups, positions, icons):
        x, y = map(int, _TRANSLATE_RE.fullmatch(group.get("transform")).groups())
        assert (x, y) == (pos.x + layout.padding, pos.y + layout.padding)
        frame = group.find("svg:svg", NS)
        assert frame.get("viewBox") == icon.viewbox
        assert int(frame.get("width")) == layout.size
        assert x + layout.size <= dims.width
        assert y + layout.size <= dims.height


def test_compose_is_deterministic():
    layout = LayoutOptions(strategy="vertical")
    deco = DecorationOptions(theme="dark", border_color="ffffff", border_width=1, shadow_level=1, glow=True)
    first = compose_icons(_icons(), layout, deco)
    second = compose_icons(_icons(), layout, deco)
    assert first == second


def test_compose_order_and_decorations():
    deco = DecorationOptions(background_color="000000", glow=True, shadow_level=2)
    doc = compose_icons([parse_icon(SMILEY_SVG), parse_icon(CIRCLE_SVG)], LayoutOptions(), deco)
    root = ET.fromstring(doc.encode("utf-8"))

    children = [child.tag.split("}")[1] for child in root]
    assert children == ["defs", "rect", "g", "g"]
    assert root.find("svg:rect", NS).get("fill") == "#000000"
    for group in root.findall("svg:g", NS):
        assert group.get("filter") == "url(#iconstrip-glow)"
    # Smiley first: it has the extra circles
    first, second = root.findall("svg:g", NS)
    assert len(first.findall(".//svg:circle", NS)) == 3
    assert len(second.findall(".//svg:circle", NS)) == 1


def test_compose_minimal_has_no_extra_nodes():
    doc = compose_icons([parse_icon(CIRCLE_SVG)], LayoutOptions(), DecorationOptions())
    root = ET.fromstring(doc.encode("utf-8"))
    assert [child.tag.split("}")[1] for child in root] == ["g"]


def test_duplicates_positioned_independently():
    icon = parse_icon(CIRCLE_SVG)
    doc = compose_icons([icon, icon], LayoutOptions(size=48, gap=12), DecorationOptions())
    assert "translate(0, 0)" in doc
    assert "translate(60, 0)" in doc
    assert 'width="108" height="48"' in doc


def test_empty_icon_list_is_no_content():
    with pytest.raises(NoContentError):
        compose([], [], compute_dimensions([], LayoutOptions()), DecorationOptions(), LayoutOptions())
    with pytest.raises(NoContentError):
        compose_icons([], LayoutOptions(), DecorationOptions())


def test_mismatched_positions_rejected():
    with pytest.raises(ValueError):
        compose(_icons(), [Position(0, 0)], compute_dimensions([Position(0, 0)], LayoutOptions()),
                DecorationOptions(), LayoutOptions())


def test_stroke_icon_keeps_root_stroke():
    doc = compose_icons([parse_icon(CIRCLE_SVG)], LayoutOptions(), DecorationOptions())
    frame = ET.fromstring(doc.encode("utf-8")).find("svg:g/svg:svg", NS)
    assert frame.get("fill") == "none"
    assert frame.get("stroke") == "currentColor"
    assert frame.get("stroke-width") == "2"
    assert frame.get("stroke-linecap") == "round"
