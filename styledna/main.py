"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from styledna import __version__
from styledna.config import settings
from styledna.engine.cache import StyleCache
from styledna.errors import EmptyCorpusError, PathParseError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Style DNA",
        description="Icon style analysis and compliance enforcement over SVG path data",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.style_cache = StyleCache()

    @app.exception_handler(PathParseError)
    async def _path_parse_error(request: Request, exc: PathParseError) -> JSONResponse:
        logger.info("Rejected path data: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "position": exc.position, "command": exc.command},
        )

    @app.exception_handler(EmptyCorpusError)
    async def _empty_corpus(request: Request, exc: EmptyCorpusError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    from styledna.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
