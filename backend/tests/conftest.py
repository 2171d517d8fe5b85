"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.icons.store import IconStore
from app.models.options import DecorationOptions, LayoutOptions


# Sample icon documents

CIRCLE_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round">
  <circle cx="12" cy="12" r="10"/>
  <circle cx="8" cy="9" r="1"/>
  <circle cx="16" cy="9" r="1"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2"/>
</svg>'''

# Root has no fill; the only fill is on a nested element
FILLED_COMPLEX_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 256 259">
  <path d="M128 10 L240 80 L240 200 L128 249 L16 200 L16 80 Z" fill="#4ECDC4"/>
  <circle cx="128" cy="130" r="30" fill="#FF6B6B"/>
</svg>'''

COLORED_ROOT_SVG = '''<svg viewBox='0 0 100 100' fill='#24292f'><rect x="10" y="10" width="80" height="80"/></svg>'''

NO_VIEWBOX_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"><path d="M0 0h24v24H0z"/></svg>'''

FRAGMENT_ONLY = '''<!-- exported --><path d="M2 2h20v20H2z"/>'''


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    (tmp_path / "circle.svg").write_text(CIRCLE_SVG, encoding="utf-8")
    (tmp_path / "smiley.svg").write_text(SMILEY_SVG, encoding="utf-8")
    (tmp_path / "hexagon.svg").write_text(FILLED_COMPLEX_SVG, encoding="utf-8")
    (tmp_path / "tiles.svg").write_text(COLORED_ROOT_SVG, encoding="utf-8")
    (tmp_path / "notes.txt").write_text("not an icon", encoding="utf-8")
    return tmp_path


@pytest.fixture
def icon_store(icon_dir: Path) -> IconStore:
    return IconStore(icon_dir)


@pytest.fixture
def layout() -> LayoutOptions:
    return LayoutOptions(size=48, gap=12, padding=0)


@pytest.fixture
def decoration() -> DecorationOptions:
    return DecorationOptions()


class DictStore:
    """In-memory icon store; names in ``broken`` raise instead of returning."""

    def __init__(self, icons: dict[str, str], broken: tuple[str, ...] = ()) -> None:
        self.icons = icons
        self.broken = set(broken)
        self.calls: list[str] = []

    def fetch(self, name: str) -> str | None:
        self.calls.append(name)
        if name in self.broken:
            raise OSError(f"disk error reading {name}")
        return self.icons.get(name)
