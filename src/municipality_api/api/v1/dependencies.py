"""
Dependency wiring for the municipality endpoints.

One session per request (closed by `get_async_session`), one repository and
one service bound to it.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from municipality_api.converters import MunicipalityConverter, MunicipalitySaveConverter
from municipality_api.database.session import get_async_session
from municipality_api.repositories import MunicipalityRepository
from municipality_api.services import MunicipalityService


def get_municipality_repository(
    db: AsyncSession = Depends(get_async_session),
) -> MunicipalityRepository:
    return MunicipalityRepository(db)


def get_municipality_service(
    repository: MunicipalityRepository = Depends(get_municipality_repository),
) -> MunicipalityService:
    """Build MunicipalityService with its repository and converters."""
    return MunicipalityService(
        municipality_repository=repository,
        municipality_converter=MunicipalityConverter(),
        municipality_save_converter=MunicipalitySaveConverter(),
    )
