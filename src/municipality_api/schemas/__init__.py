from .municipality import (
    MANDATORY_FIELD_MESSAGES,
    ErrorResponse,
    MunicipalityRequestDto,
    MunicipalityResponseDto,
    SaveMunicipalityResponseDto,
    ValidationErrorResponse,
    ViolationDto,
)

__all__ = [
    "MANDATORY_FIELD_MESSAGES",
    "ErrorResponse",
    "MunicipalityRequestDto",
    "MunicipalityResponseDto",
    "SaveMunicipalityResponseDto",
    "ValidationErrorResponse",
    "ViolationDto",
]
