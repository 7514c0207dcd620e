from .domain import (
    DomainError,
    GenericError,
    MunicipalityError,
    MunicipalityNotFound,
    MunicipalityServerError,
    origin_of,
)

__all__ = [
    "DomainError",
    "GenericError",
    "MunicipalityError",
    "MunicipalityNotFound",
    "MunicipalityServerError",
    "origin_of",
]
