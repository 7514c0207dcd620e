"""
Wire-format DTOs for the municipality endpoints.

Python attributes are snake_case; the JSON payloads use camelCase
(`regionCode`, `municipalitySigle`, ...) through a pydantic alias generator.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from municipality_api.validators.common import is_empty


# Mandatory request fields and the violation message returned for each one
MANDATORY_FIELD_MESSAGES: dict[str, str] = {
    "region_code": "the region code is mandatory",
    "province_code": "the province code is mandatory",
    "municipality_code": "the municipality code is mandatory",
    "municipality_name": "the municipality name is mandatory",
    "region_name": "the region name is mandatory",
}


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MunicipalityRequestDto(_CamelModel):
    """
    Body of `POST /municipality/createMunicipality`.

    Missing, null and empty values of the mandatory fields are rejected with
    the messages in MANDATORY_FIELD_MESSAGES. Optional codes are stored as
    sent; coordinates default to 0.0.
    """

    # validate_default=True makes the mandatory check run for omitted fields too
    region_code: str = Field(default=None, validate_default=True)
    province_code: str = Field(default=None, validate_default=True)
    municipality_code: str = Field(default=None, validate_default=True)
    municipality_sigle: str | None = None
    municipality_name: str = Field(default=None, validate_default=True)
    region_name: str = Field(default=None, validate_default=True)
    cadastral_code: str | None = None
    territorial_unit_type: str | None = None
    capitals_municipality: str | None = None
    # NaN / Infinity are not JSON numbers
    latitude: float = Field(default=0.0, allow_inf_nan=False)
    longitude: float = Field(default=0.0, allow_inf_nan=False)
    altitude: float = Field(default=0.0, allow_inf_nan=False)

    @field_validator(*MANDATORY_FIELD_MESSAGES, mode="before")
    @classmethod
    def check_mandatory(cls, value, info: ValidationInfo):
        if is_empty(value):
            # PydanticCustomError keeps the message verbatim (no "Value error, " prefix)
            raise PydanticCustomError("mandatory", MANDATORY_FIELD_MESSAGES[info.field_name])
        return value


class MunicipalityResponseDto(_CamelModel):
    """One element of `GET /municipality/getAllMunicipalities`."""

    region_code: str | None
    province_code: str | None
    municipality_code: str | None
    municipality_sigle: str | None
    municipality_name: str | None
    region_name: str | None
    cadastral_code: str | None
    territorial_unit_type: str | None
    capitals_municipality: str | None
    latitude: float | None
    longitude: float | None
    altitude: float | None


class SaveMunicipalityResponseDto(_CamelModel):
    """Confirmation body returned after a successful create."""

    message: str


class ViolationDto(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    """Body of a 400 response for a request that failed input validation."""

    title: str = "Constraint Violation"
    status: int = 400
    violations: list[ViolationDto]


class ErrorResponse(BaseModel):
    """Body of a 404 / 500 response carrying a domain error (documentation only)."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    time_stamp: str = Field(alias="timeStamp")
    class_happen: str = Field(alias="classHappen")
