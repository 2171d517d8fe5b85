"""Pipeline orchestrator — fetch every icon, parse the hits, compose one SVG."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Sequence
from typing import Protocol

from app.engine.composer import compose_icons
from app.engine.context import IconSource, ParsedIcon
from app.errors import NoContentError
from app.models.options import DecorationOptions, LayoutOptions
from app.svg.parser import parse_icon

logger = logging.getLogger(__name__)


class IconFetcher(Protocol):
    def fetch(self, name: str) -> str | None: ...


class IconStripPipeline:
    """Turns a validated list of names plus options into one composed SVG."""

    def __init__(self, store: IconFetcher) -> None:
        self.store = store

    async def fetch_all(self, names: Sequence[str]) -> list[IconSource]:
        """Look up every name concurrently; results keep input order."""
        loop = asyncio.get_running_loop()
        texts = await asyncio.gather(
            *(loop.run_in_executor(None, self.store.fetch, name) for name in names),
            return_exceptions=True,
        )

        sources: list[IconSource] = []
        for name, text in zip(names, texts):
            if isinstance(text, Exception):
                # One failed lookup only drops that icon
                logger.warning("Lookup for icon %r failed: %s", name, text)
                text = None
            elif text is None:
                logger.debug("Icon %r not found", name)
            sources.append(IconSource(name=name, text=text))
        return sources

    def resolve(self, sources: Sequence[IconSource]) -> list[ParsedIcon]:
        return [parse_icon(src.text, name=src.name) for src in sources if src.text is not None]

    def render(
        self,
        icons: Sequence[ParsedIcon],
        layout: LayoutOptions,
        decoration: DecorationOptions,
    ) -> str:
        return compose_icons(icons, layout, decoration)

    async def run(
        self,
        names: Sequence[str],
        layout: LayoutOptions,
        decoration: DecorationOptions,
    ) -> str:
        start = time.perf_counter()

        sources = await self.fetch_all(names)
        icons = self.resolve(sources)
        if not icons:
            raise NoContentError(names)

        svg = self.render(icons, layout, decoration)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Composed %d/%d icons (%s) in %.1fms",
            len(icons),
            len(names),
            layout.strategy.value,
            elapsed,
        )
        return svg


def create_pipeline(store: IconFetcher) -> IconStripPipeline:
    """Factory function for creating a pipeline instance."""
    return IconStripPipeline(store)
