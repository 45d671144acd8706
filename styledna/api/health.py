"""Health check."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from styledna import __version__
from styledna.dependencies import get_style_cache
from styledna.engine.cache import StyleCache
from styledna.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cache: StyleCache = Depends(get_style_cache)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, cached_libraries=len(cache))
