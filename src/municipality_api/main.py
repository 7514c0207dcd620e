"""
Application entry point.

Creates the FastAPI application and wires together:
- logging configuration and the request-id middleware;
- exception handlers;
- the municipality router;
- the optional schema / reference-data bootstrap and engine disposal (lifespan).

Run with:
    uvicorn municipality_api.main:create_app --factory
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from municipality_api.api.v1 import register_exception_handlers, router as municipality_router
from municipality_api.config import Settings, get_settings
from municipality_api.core.logging import RequestIDMiddleware, setup_logging
from municipality_api.database import dispose_engine, get_engine, get_session_maker
from municipality_api.database.init_db import create_schema, seed_reference_data
from municipality_api.utils.logging import get_project_version

logger = logging.getLogger(__name__)


async def bootstrap_database(settings: Settings) -> None:
    """Create the schema and seed reference rows when the settings ask for it."""
    if settings.DB_CREATE_SCHEMA:
        await create_schema(get_engine())
    if settings.DB_SEED_REFERENCE_DATA:
        async with get_session_maker()() as session:
            await seed_reference_data(session)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    await bootstrap_database(settings)
    logger.info("app.startup", extra={"env": settings.ENV})

    yield

    await dispose_engine()
    logger.info("app.shutdown")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="Municipality API",
        version=get_project_version(),
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(RequestIDMiddleware)
    register_exception_handlers(app)
    app.include_router(municipality_router)

    return app
