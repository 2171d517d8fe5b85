"""Filesystem icon store — name-keyed lookup of raw SVG text."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from app.models.requests import SAFE_NAME_RE

logger = logging.getLogger(__name__)


class IconStore:
    """Reads ``<root>/<name><suffix>``; misses and unreadable files return None.

    Lookups are exact: ``Rust`` never resolves to ``rust.svg``, even on a
    case-insensitive filesystem. Results (including misses) are cached.
    """

    def __init__(self, root: Path | str, suffix: str = ".svg", cache_size: int = 256) -> None:
        self.root = Path(root).resolve()
        self.suffix = suffix
        self._read = lru_cache(maxsize=cache_size)(self._read_uncached)

    def fetch(self, name: str) -> str | None:
        if not SAFE_NAME_RE.fullmatch(name):
            logger.warning("Refusing unsafe icon name %r", name)
            return None
        return self._read(name)

    def names(self) -> list[str]:
        """Every icon name this store can resolve, sorted."""
        if not self.root.is_dir():
            return []
        return sorted(
            p.name[: -len(self.suffix)]
            for p in self.root.iterdir()
            if p.is_file() and p.name.endswith(self.suffix) and SAFE_NAME_RE.fullmatch(p.name[: -len(self.suffix)])
        )

    def cache_clear(self) -> None:
        self._read.cache_clear()

    def _read_uncached(self, name: str) -> str | None:
        filename = f"{name}{self.suffix}"
        try:
            if filename not in {p.name for p in self.root.iterdir()}:
                logger.debug("Icon %r not found in %s", name, self.root)
                return None
            return (self.root / filename).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read icon %r: %s", name, e)
            return None
