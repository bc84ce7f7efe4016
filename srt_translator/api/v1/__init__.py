"""API v1 package initialization."""

from fastapi import APIRouter

from srt_translator.api.v1 import health, languages, parse, translation

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(languages.router, prefix="/languages", tags=["languages"])
api_router.include_router(parse.router, prefix="/parse", tags=["parsing"])
api_router.include_router(translation.router, prefix="/translate", tags=["translation"])

__all__ = ["api_router"]
