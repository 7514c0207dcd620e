"""
FastAPI router for municipalities.

Routes delegate to MunicipalityService. Input validation is done by the
request DTO; error mapping by `responses.py` and the registered handlers.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response

from municipality_api.schemas.municipality import (
    ErrorResponse,
    MunicipalityRequestDto,
    MunicipalityResponseDto,
    SaveMunicipalityResponseDto,
    ValidationErrorResponse,
)
from municipality_api.services import MunicipalityService
from .dependencies import get_municipality_service
from .responses import result_response

router = APIRouter(prefix="/municipality", tags=["municipality"])


@router.get(
    "/getAllMunicipalities",
    response_model=list[MunicipalityResponseDto],
    responses={500: {"model": ErrorResponse}},
    summary="List municipalities",
)
async def get_all_municipalities(
    service: MunicipalityService = Depends(get_municipality_service),
) -> list[MunicipalityResponseDto]:
    return await service.get_all()


@router.post(
    "/createMunicipality",
    status_code=status.HTTP_201_CREATED,
    response_model=SaveMunicipalityResponseDto,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    summary="Create or update a municipality",
)
async def create_municipality(
    request: MunicipalityRequestDto,
    service: MunicipalityService = Depends(get_municipality_service),
) -> Response:
    """Persist the municipality; 201 with a confirmation message on success."""
    result = await service.create(request)
    return result_response(result, status.HTTP_201_CREATED)
