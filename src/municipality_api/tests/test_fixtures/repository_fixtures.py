"""Fixtures for repository and service tests."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from municipality_api.models.municipality import Municipality
from municipality_api.repositories import MunicipalityRepository

# All fixtures here depend on `db_session` from conftest.py.


@pytest.fixture
def municipality_repository(db_session: AsyncSession) -> MunicipalityRepository:
    return MunicipalityRepository(db_session)


@pytest.fixture
def florence_entity() -> Municipality:
    """A transient (never persisted) entity, id unset."""
    return Municipality(
        region_code="09",
        province_code="048",
        municipality_code="48017",
        municipality_sigle="017",
        municipality_name="Firenze",
        region_name="Toscana",
        cadastral_code="D612",
        territorial_unit_type="048",
        capitals_municipality="Firenze",
        latitude=43.7695604,
        longitude=11.2558136,
        altitude=50.0,
    )


@pytest.fixture
def create_municipality(session_maker):
    """
    Factory that commits a municipality through its own session, so the row
    is visible to any other session of the test.

    Usage:
        entity = await create_municipality(municipality_name="Recco")
    """
    async def _create(**overrides) -> Municipality:
        data = {
            "region_code": "07",
            "province_code": "010",
            "municipality_code": "10047",
            "municipality_sigle": "047",
            "municipality_name": "Recco",
            "region_name": "Liguria",
            "cadastral_code": "H212",
            "territorial_unit_type": "210",
            "capitals_municipality": "Genova",
            "latitude": 44.3624694,
            "longitude": 9.144402,
            "altitude": 8.798839569091797,
        }
        data.update(overrides)
        async with session_maker() as session:
            async with session.begin():
                entity = Municipality(**data)
                session.add(entity)
        return entity

    return _create


@pytest.fixture
async def stored_municipalities(create_municipality) -> list[Municipality]:
    return [
        await create_municipality(municipality_name="Recco"),
        await create_municipality(
            region_code="08",
            province_code="034",
            municipality_code="34025",
            municipality_sigle="025",
            municipality_name="Noceto",
            region_name="Emilia-Romagna",
            cadastral_code="F914",
            territorial_unit_type="034",
            capitals_municipality="Parma",
            latitude=44.8093214,
            longitude=10.178779,
            altitude=75.3333969116211,
        ),
    ]
