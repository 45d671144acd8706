"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from styledna.api import health, path, style, svg

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(path.router)
api_router.include_router(style.router)
api_router.include_router(svg.router)
