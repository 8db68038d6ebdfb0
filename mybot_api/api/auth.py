"""API key authentication

The gate runs as HTTP middleware ahead of routing, so nothing past /health
(unknown paths and unparsable bodies included) is answered without the key.
"""

import secrets
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from mybot_api.config import Settings
from mybot_api.errors import ApiError, ConfigurationError, UnauthorizedError

logger = structlog.get_logger()

API_KEY_HEADER = "x-api-key"

PUBLIC_PATHS = frozenset({"/health"})


def check_api_key(presented: Optional[bytes], settings: Settings) -> None:
    """Static shared-secret check. Fails closed when no secret is configured."""
    if not settings.api_key_configured:
        raise ConfigurationError("Server misconfigured: MYBOT_API_KEY not set")

    if not presented or not secrets.compare_digest(
        presented, settings.mybot_api_key.encode("utf-8")
    ):
        raise UnauthorizedError()


def presented_api_key(request: Request) -> Optional[bytes]:
    """Header value as sent on the wire; Starlette decodes headers as latin-1"""
    value = request.headers.get(API_KEY_HEADER)
    if value is None:
        return None
    return value.encode("latin-1")


def register_api_key_gate(app: FastAPI) -> None:
    """Gate every request except PUBLIC_PATHS; settings come from app.state.settings."""

    @app.middleware("http")
    async def api_key_gate(request: Request, call_next):
        if request.url.path in PUBLIC_PATHS:
            return await call_next(request)

        presented = presented_api_key(request)
        try:
            check_api_key(presented, request.app.state.settings)
        except ApiError as exc:
            if isinstance(exc, ConfigurationError):
                logger.error("api_key_not_configured", path=request.url.path)
            else:
                logger.warning(
                    "api_key_rejected",
                    path=request.url.path,
                    reason="missing" if not presented else "mismatch",
                )
            return JSONResponse(status_code=exc.status_code, content=exc.to_response())

        return await call_next(request)
