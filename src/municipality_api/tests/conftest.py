"""
Core pytest configuration for the whole test suite.

Only the database setup and shared utilities live here. Domain fixtures live in
tests/test_fixtures/ and are imported at the bottom of this module so every
test can use them without importing.

Database selection (see get_test_database_url):
  1. TEST_DATABASE_URL environment variable (CI override, e.g. a PostgreSQL DSN);
  2. the app's DATABASE_URL when TESTING=true and TEST_POSTGRES_DB is set;
  3. otherwise a throwaway SQLite file per test (aiosqlite).
"""

import os
import logging
from pathlib import Path
from typing import AsyncGenerator
from urllib.parse import urlparse

# Settings require the connection variables; tests never open the production DB.
os.environ.setdefault("POSTGRES_DRIVER", "asyncpg")
os.environ.setdefault("POSTGRES_USERNAME", "postgres")
os.environ.setdefault("POSTGRES_PASSWORD", "postgres")
os.environ.setdefault("POSTGRES_HOST", "localhost")
os.environ.setdefault("POSTGRES_PORT", "5432")
os.environ.setdefault("POSTGRES_DB", "municipality")

NOISY_LOGGERS = (
    "faker",
    "faker.factory",
    "sqlalchemy",
    "sqlalchemy.engine",
    "asyncio",
    "aiosqlite",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)


import pytest
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from municipality_api.config import get_settings
from municipality_api.database.base import Base
from municipality_api import models  # noqa: F401  registers the tables on Base.metadata

settings = get_settings()
logger = logging.getLogger(__name__)


def safe_log_db_url(db_url: str) -> str:
    """Database URL without credentials, for logging."""
    parsed = urlparse(db_url)
    return f"{parsed.scheme}://{parsed.hostname or ''}:{parsed.port or ''}/{parsed.path.lstrip('/')}"


def get_test_database_url(tmp_dir: Path) -> str:
    if test_url := os.getenv("TEST_DATABASE_URL"):
        return test_url

    if settings.TESTING and settings.TEST_POSTGRES_DB:
        return settings.DATABASE_URL

    return f"sqlite+aiosqlite:///{tmp_dir / 'test_municipality.db'}"


@pytest.fixture()
async def async_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """
    A fresh schema per test.

    Repository calls commit their own transactions, so isolation comes from
    recreating the tables rather than from rolling back an outer transaction.
    """
    url = get_test_database_url(tmp_path)
    logger.debug("Using test DB: %s", safe_log_db_url(url))

    engine = create_async_engine(url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture()
def session_maker(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture()
async def db_session(session_maker: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    async with session_maker() as session:
        yield session


from .test_fixtures.repository_fixtures import (  # noqa: E402,F401
    municipality_repository,
    florence_entity,
    create_municipality,
    stored_municipalities,
)
from .test_fixtures.api_fixtures import (  # noqa: E402,F401
    app,
    client,
    florence_payload,
    bari_payload_without_name,
    municipality_payload_factory,
)
