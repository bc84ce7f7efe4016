"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from srt_translator.core.config import Settings, get_settings
from srt_translator.schemas import HealthResponse
from srt_translator.services.sessions import session_registry

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check endpoint.

    Returns:
        HealthResponse: Service status, auth mode and available endpoints
    """
    endpoints = {
        "translation": [
            "POST /api/v1/translate - Translate SRT content",
            "POST /api/v1/translate/file - Upload an SRT file and download the translation",
        ],
        "parsing": [
            "POST /api/v1/parse - Inspect accepted and skipped subtitle blocks",
        ],
        "languages": [
            "GET /api/v1/languages - List target languages",
        ],
        "health": [
            "GET /api/v1/health - Service health check",
        ],
    }

    return HealthResponse(
        service=settings.app_name,
        status="running",
        version=settings.app_version,
        authentication="enabled" if settings.api_key else "disabled",
        active_sessions=len(session_registry.active_sessions),
        endpoints=endpoints,
    )
