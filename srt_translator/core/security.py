"""Security and authentication middleware."""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from srt_translator.core.config import settings
from srt_translator.core.logging import get_logger

logger = get_logger(__name__)

PUBLIC_PATHS = ("/", "/health", "/docs", "/openapi.json", "/redoc")


def _client_host(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def _unauthorized(request: Request, reason: str, detail: str) -> JSONResponse:
    """Log a rejected request and build its 401 response."""
    logger.warning(
        "Rejected %s %s from %s: %s",
        request.method,
        request.url.path,
        _client_host(request),
        reason,
    )
    return JSONResponse(status_code=status.HTTP_401_UNAUTHORIZED, content={"detail": detail})


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Require the X-API-Key header on API routes when a service key is configured."""

    async def dispatch(self, request: Request, call_next):
        if request.url.path in PUBLIC_PATHS or not settings.api_key:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key")

        if not api_key:
            return _unauthorized(
                request,
                "missing API key",
                "Missing X-API-Key header. Please provide API key for authentication.",
            )

        if api_key != settings.api_key:
            return _unauthorized(
                request,
                "invalid API key",
                "Invalid API key. Please check your X-API-Key header.",
            )

        return await call_next(request)
