"""
Municipality repository: the data-access gateway of the service.

Exposes the two operations the service needs:
  - list_all(): every stored municipality (no pagination, no ordering);
  - upsert(entity): insert or update a municipality, returned as an Either.
"""

import logging
import time

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from municipality_api.errors import MunicipalityError
from municipality_api.exceptions.base import RepositoryError
from municipality_api.functional import Either
from municipality_api.models.municipality import Municipality
from .base_repository import BaseRepository

logger = logging.getLogger(__name__)


class MunicipalityRepository(BaseRepository[Municipality]):
    """
    Repository for Municipality entity operations.

    Each public method runs in its own transaction (see BaseRepository.transaction).
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Municipality, db)

    async def list_all(self) -> list[Municipality]:
        """
        Return every stored municipality.

        Raises:
            RepositoryError: if the query fails. Read faults are not turned
                into a value: there is no meaningful partial list to return.
        """
        start = time.perf_counter()
        try:
            async with self.transaction():
                result = await self.db.execute(select(Municipality))
                entities = list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error retrieving all {self.model.__name__}: {e}")
            raise RepositoryError(
                f"Failed to retrieve {self.model.__name__} entities",
                class_happen=self.origin,
            ) from e

        self._log_success("list_all", start, count=len(entities))
        return entities

    async def upsert(self, entity: Municipality) -> Either[MunicipalityError, Municipality]:
        """
        Insert a new municipality or update an existing one.

        The session decides insert vs update from the entity identity:
        `merge()` loads the row with the same primary key if there is one,
        otherwise it schedules an INSERT (the UUID is generated at flush).

        Returns:
            Right(persisted entity, id populated) on success,
            Left(MunicipalityServerError) if the write fails.
        """
        logger.debug(
            "repo.upsert.start",
            extra={"model": self.model.__name__, "operation": "upsert", "has_id": entity.id is not None},
        )
        result = await self.process_response(self._persist(entity))
        if result.is_left():
            logger.info(
                "repo.upsert.failure",
                extra={"model": self.model.__name__, "error": result.get_left().message},
            )
        return result

    async def _persist(self, entity: Municipality) -> Municipality:
        start = time.perf_counter()
        async with self.transaction():
            persisted = await self.db.merge(entity)
            # flush + refresh: the generated id (and any server default) is
            # available before the transaction is committed
            await self.db.flush()
            await self.db.refresh(persisted)

        self._log_success("upsert", start, id=str(persisted.id))
        return persisted
