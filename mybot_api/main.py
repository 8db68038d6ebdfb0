"""
mybot-api - FastAPI Backend Application
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from mybot_api.api import metrics, restaurants
from mybot_api.api.auth import register_api_key_gate
from mybot_api.api.error_handlers import register_error_handlers
from mybot_api.config import Settings, get_settings
from mybot_api.database import engine

settings = get_settings()


def configure_logging(settings: Settings) -> None:
    """Configure structured logging"""
    logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

    if settings.log_format == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info(
        "Starting mybot-api",
        version="1.0.0",
        port=settings.api_port,
        api_key_configured=settings.api_key_configured,
    )
    yield
    await engine.dispose()
    logger.info("Shutting down mybot-api")


# Create FastAPI application
app = FastAPI(
    title="mybot-api",
    description="Call metrics and restaurant settings for the phone bot admin panel",
    version="1.0.0",
    lifespan=lifespan,
)

# Configuration is built once and read by the API key gate
app.state.settings = settings

# Gate first so CORS wraps it and preflight requests are answered without a key
register_api_key_gate(app)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


# Liveness check, reachable without an API key
@app.get("/health", response_class=PlainTextResponse)
async def health():
    return "OK"


app.include_router(
    metrics.router,
    prefix="/metrics",
    tags=["Metrics"],
)
app.include_router(
    restaurants.router,
    prefix="/restaurants",
    tags=["Restaurants"],
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mybot_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )
