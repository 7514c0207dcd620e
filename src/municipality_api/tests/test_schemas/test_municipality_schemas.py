import pytest
from pydantic import ValidationError

from municipality_api.schemas.municipality import (
    MANDATORY_FIELD_MESSAGES,
    MunicipalityRequestDto,
    ValidationErrorResponse,
    ViolationDto,
)


def messages_of(exc: ValidationError) -> dict[str, str]:
    return {error["loc"][0]: error["msg"] for error in exc.errors()}


def test_valid_body_is_accepted(florence_payload):
    dto = MunicipalityRequestDto.model_validate(florence_payload)

    assert dto.municipality_name == "Firenze"
    assert dto.territorial_unit_type == "048"


def test_snake_case_names_are_accepted_too():
    dto = MunicipalityRequestDto(
        region_code="09",
        province_code="048",
        municipality_code="48017",
        municipality_name="Firenze",
        region_name="Toscana",
    )

    assert dto.municipality_sigle is None
    assert (dto.latitude, dto.longitude, dto.altitude) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("missing", [None, ""])
def test_null_or_empty_name_is_rejected(bari_payload_without_name, missing):
    bari_payload_without_name["municipalityName"] = missing

    with pytest.raises(ValidationError) as exc_info:
        MunicipalityRequestDto.model_validate(bari_payload_without_name)

    assert messages_of(exc_info.value) == {"municipalityName": "the municipality name is mandatory"}


def test_empty_body_reports_every_mandatory_field():
    with pytest.raises(ValidationError) as exc_info:
        MunicipalityRequestDto.model_validate({})

    assert set(messages_of(exc_info.value).values()) == set(MANDATORY_FIELD_MESSAGES.values())


def test_optional_codes_may_be_empty(florence_payload):
    florence_payload.update(cadastralCode="", municipalitySigle=None)

    dto = MunicipalityRequestDto.model_validate(florence_payload)

    assert dto.cadastral_code == ""
    assert dto.municipality_sigle is None


def test_validation_error_response_defaults():
    body = ValidationErrorResponse(violations=[ViolationDto(field="regionName", message="x")])

    assert body.model_dump() == {
        "title": "Constraint Violation",
        "status": 400,
        "violations": [{"field": "regionName", "message": "x"}],
    }


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_coordinates_must_be_finite(florence_payload, value):
    florence_payload["altitude"] = value

    with pytest.raises(ValidationError) as exc_info:
        MunicipalityRequestDto.model_validate(florence_payload)

    assert list(messages_of(exc_info.value)) == ["altitude"]
