"""
Async engine, session factory and the per-request session dependency.

The engine is built lazily on first use so that importing the application
(e.g. in tests that override `get_async_session`) never requires a reachable
database or an installed production driver.
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)

from municipality_api.config import get_settings


@lru_cache()
def get_engine() -> AsyncEngine:
    settings = get_settings()
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.SQLALCHEMY_ECHO,   # Set to False in production
        future=True,
        pool_pre_ping=True,              # Enables connection health checks
    )


@lru_cache()
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: entities returned by a committed repository call
    # stay readable while the response is being built.
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency. Yields a session and ensures it's closed after the request.

    Usage:
        async def endpoint(db: AsyncSession = Depends(get_async_session)):
            await db.execute(...)
    """
    async with get_session_maker()() as session:
        yield session


async def dispose_engine() -> None:
    """Close pooled connections; called from the application lifespan on shutdown."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
