"""
Schema creation and reference-data bootstrap.

Both steps are optional and driven by settings (DB_CREATE_SCHEMA,
DB_SEED_REFERENCE_DATA); production databases are expected to be migrated
out of band.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from municipality_api.models import Municipality
from .base import Base

logger = logging.getLogger(__name__)

# (region_code, province_code, municipality_code, municipality_sigle, municipality_name,
#  region_name, cadastral_code, territorial_unit_type, capitals_municipality,
#  latitude, longitude, altitude)
REFERENCE_MUNICIPALITIES: tuple[tuple, ...] = (
    ("03", "019", "19001", "001", "Acquanegra Cremonese", "Lombardia", "A039", "019", "Cremona",
     45.1679214, 9.8908104, 45.07942199707031),
    ("15", "064", "64021", "021", "Cassano Irpino", "Campania", "B997", "064", "Avellino",
     40.8725406, 15.0274423, 506.5948181152344),
    ("15", "065", "65139", "139", "Serramezzana", "Campania", "I648", "065", "Salerno",
     40.2444768, 15.0318962, 507.3829040527344),
    ("08", "034", "34025", "025", "Noceto", "Emilia-Romagna", "F914", "034", "Parma",
     44.8093214, 10.178779, 75.3333969116211),
    ("07", "010", "10047", "047", "Recco", "Liguria", "H212", "210", "Genova",
     44.3624694, 9.144402, 8.798839569091797),
    ("05", "026", "26007", "007", "Cappella Maggiore", "Veneto", "B678", "026", "Treviso",
     45.9696968, 12.3612016, 110.7504272460938),
)

_COLUMNS = (
    "region_code",
    "province_code",
    "municipality_code",
    "municipality_sigle",
    "municipality_name",
    "region_name",
    "cadastral_code",
    "territorial_unit_type",
    "capitals_municipality",
    "latitude",
    "longitude",
    "altitude",
)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every mapped table that does not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("db.schema.created", extra={"tables": sorted(Base.metadata.tables)})


async def seed_reference_data(session: AsyncSession) -> int:
    """
    Insert the reference municipalities if the table is empty.

    Returns:
        The number of rows inserted (0 when the table already has data).
    """
    async with session.begin():
        existing = await session.scalar(select(func.count()).select_from(Municipality))
        if existing:
            logger.info("db.seed.skipped", extra={"existing_rows": existing})
            return 0
        session.add_all(Municipality(**dict(zip(_COLUMNS, row))) for row in REFERENCE_MUNICIPALITIES)

    logger.info("db.seed.inserted", extra={"rows": len(REFERENCE_MUNICIPALITIES)})
    return len(REFERENCE_MUNICIPALITIES)
