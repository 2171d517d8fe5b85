"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from app.config import settings
from app.errors import InvalidRequestError, NoContentError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.iconstrip_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="IconStrip",
        description="Compose named SVG icons into one badge strip",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_error_handlers(app)

    from app.api.router import api_router

    app.include_router(api_router)

    return app


def _register_error_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto plain-text responses."""

    @app.exception_handler(InvalidRequestError)
    async def _invalid_request(request: Request, exc: InvalidRequestError) -> PlainTextResponse:
        logger.info("Rejected %s: %s", request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(NoContentError)
    async def _no_content(request: Request, exc: NoContentError) -> PlainTextResponse:
        return PlainTextResponse(str(exc), status_code=404)

    @app.exception_handler(Exception)
    async def _internal_error(request: Request, exc: Exception) -> PlainTextResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return PlainTextResponse(f"Server error: {exc}", status_code=500)


app = create_app()
