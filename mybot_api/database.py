"""
Async database engine and per-request sessions
"""

import ssl
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from mybot_api.config import Settings, get_settings


class Base(DeclarativeBase):
    pass


def build_connect_args(settings: Settings) -> dict:
    """asyncpg connection arguments for the configured TLS mode"""
    if not settings.async_database_url.startswith("postgresql+asyncpg"):
        return {}

    if not settings.ssl_enabled:
        return {"ssl": False}

    # Hosted Postgres commonly presents self-signed certificates
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return {"ssl": context}


def create_engine_from_settings(settings: Settings):
    return create_async_engine(
        settings.async_database_url,
        connect_args=build_connect_args(settings),
        pool_pre_ping=True,
    )


engine = create_engine_from_settings(get_settings())

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a session for one request; the connection goes back to the pool on every exit path"""
    async with SessionLocal() as session:
        yield session
