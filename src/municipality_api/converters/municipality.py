"""Field-by-field mapping between the municipality DTOs and the ORM entity."""

from municipality_api.models.municipality import Municipality
from municipality_api.schemas.municipality import (
    MunicipalityRequestDto,
    MunicipalityResponseDto,
    SaveMunicipalityResponseDto,
)
from .base import Converter, SaveConverter


def _request_to_entity(model: MunicipalityRequestDto) -> Municipality:
    # `id` is left unset: it is generated by the database layer on insert
    return Municipality(
        region_code=model.region_code,
        province_code=model.province_code,
        municipality_code=model.municipality_code,
        municipality_sigle=model.municipality_sigle,
        municipality_name=model.municipality_name,
        region_name=model.region_name,
        cadastral_code=model.cadastral_code,
        territorial_unit_type=model.territorial_unit_type,
        capitals_municipality=model.capitals_municipality,
        latitude=model.latitude,
        longitude=model.longitude,
        altitude=model.altitude,
    )


class MunicipalityConverter(Converter[MunicipalityRequestDto, MunicipalityResponseDto, Municipality]):

    def to_dto(self, entity: Municipality) -> MunicipalityResponseDto:
        return MunicipalityResponseDto(
            region_code=entity.region_code,
            province_code=entity.province_code,
            municipality_code=entity.municipality_code,
            municipality_sigle=entity.municipality_sigle,
            municipality_name=entity.municipality_name,
            region_name=entity.region_name,
            cadastral_code=entity.cadastral_code,
            territorial_unit_type=entity.territorial_unit_type,
            capitals_municipality=entity.capitals_municipality,
            latitude=entity.latitude,
            longitude=entity.longitude,
            altitude=entity.altitude,
        )

    def to_entity(self, model: MunicipalityRequestDto) -> Municipality:
        return _request_to_entity(model)


class MunicipalitySaveConverter(SaveConverter[MunicipalityRequestDto, SaveMunicipalityResponseDto, Municipality]):

    def to_dto(self, message: str) -> SaveMunicipalityResponseDto:
        return SaveMunicipalityResponseDto(message=message)

    def to_entity(self, model: MunicipalityRequestDto) -> Municipality:
        return _request_to_entity(model)
