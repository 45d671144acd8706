"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from styledna.config import settings
from styledna.engine.cache import StyleCache


def get_settings():
    return settings


def get_style_cache(request: Request) -> StyleCache:
    """The app-owned analysis cache (created in ``create_app``)."""
    return request.app.state.style_cache
