"""GET /api/icons — compose the requested icons into one SVG strip."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from app.config import Settings
from app.dependencies import get_icon_store, get_settings
from app.engine.pipeline import create_pipeline
from app.icons.store import IconStore
from app.models.requests import parse_icon_request
from app.models.responses import IconListResponse

router = APIRouter(prefix="/icons")

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("", response_class=Response)
async def icon_strip(
    request: Request,
    store: IconStore = Depends(get_icon_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    """?i=rust,python&size=48&gap=15&layout=grid&columns=4&theme=dark&bg=000000..."""
    req = parse_icon_request(dict(request.query_params), max_icons=settings.max_icons)

    pipeline = create_pipeline(store)
    svg = await pipeline.run(req.names, req.layout, req.decoration)

    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": settings.cache_control},
    )


@router.get("/list", response_model=IconListResponse)
async def list_icons(store: IconStore = Depends(get_icon_store)) -> IconListResponse:
    names = store.names()
    return IconListResponse(icons=names, count=len(names))
