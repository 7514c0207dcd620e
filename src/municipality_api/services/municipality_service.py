"""
Application service for municipalities.

Coordinates the repository (persistence) and the converters (DTO <-> entity).
It never raises for domain conditions: failures come back from the
repository as `Left(...)` and are passed through unchanged.
"""

import logging

from municipality_api.converters import MunicipalityConverter, MunicipalitySaveConverter
from municipality_api.errors import DomainError, MunicipalityServerError, origin_of
from municipality_api.functional import Either, Left
from municipality_api.repositories import MunicipalityRepository
from municipality_api.schemas.municipality import (
    MunicipalityRequestDto,
    MunicipalityResponseDto,
    SaveMunicipalityResponseDto,
)

logger = logging.getLogger(__name__)

CREATION_OK_MESSAGE = "municipality creation is ok"


class MunicipalityService:
    """
    Stateless between calls: one instance is built per request with the
    request's repository (see api/v1/dependencies.py).
    """

    def __init__(
        self,
        municipality_repository: MunicipalityRepository,
        municipality_converter: MunicipalityConverter,
        municipality_save_converter: MunicipalitySaveConverter,
    ):
        self.municipality_repository = municipality_repository
        self.municipality_converter = municipality_converter
        self.municipality_save_converter = municipality_save_converter

    async def get_all(self) -> list[MunicipalityResponseDto]:
        """Every stored municipality as response DTOs (empty list on an empty store)."""
        entities = await self.municipality_repository.list_all()
        return self.municipality_converter.to_dtos(entities)

    async def create(
        self, request_dto: MunicipalityRequestDto
    ) -> Either[DomainError, SaveMunicipalityResponseDto]:
        """
        Persist the municipality described by `request_dto`.

        Exactly one persistence attempt is made; nothing is retried.

        Returns:
            Right(SaveMunicipalityResponseDto("municipality creation is ok")) on success,
            the repository's Left(error) unchanged on failure.
        """
        entity = self.municipality_save_converter.to_entity(request_dto)

        try:
            result = await self.municipality_repository.upsert(entity)
        except Exception as exc:
            # upsert already returns failures as values; this covers anything
            # raised outside its storage operation
            logger.exception("service.create.failure", extra={"origin": origin_of(self)})
            return Left(MunicipalityServerError(message=str(exc), class_happen=origin_of(self)))

        return result.map(
            lambda _persisted: self.municipality_save_converter.to_dto(CREATION_OK_MESSAGE)
        )
