"""
FastAPI exception handlers for the failures that do not travel as `Either` values.

- RequestValidationError -> 400 with the constraint-violation payload;
- RepositoryError        -> 500 with `exc.to_payload()` (read-path storage faults);
- any other Exception    -> 500 with a GenericError payload.

Domain errors (not found, failed write) are rendered by `responses.py`, not here.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from municipality_api.errors import GenericError
from municipality_api.exceptions.base import RepositoryError
from municipality_api.schemas.municipality import ValidationErrorResponse, ViolationDto

logger = logging.getLogger(__name__)


def _violation_field(loc: tuple) -> str:
    # ("body", "municipalityName") -> "municipalityName"
    parts = [str(part) for part in loc if part != "body"]
    return ".".join(parts) or "body"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """400 Bad Request, one violation per failed field."""
    violations = [
        ViolationDto(field=_violation_field(tuple(error.get("loc", ()))), message=error.get("msg", ""))
        for error in exc.errors()
    ]
    logger.info(
        "Validation failed for %s %s: fields=%s",
        request.method,
        request.url.path,
        [violation.field for violation in violations],
    )
    body = ValidationErrorResponse(violations=violations)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(body))


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    """
    500 for storage faults raised by repository reads.
    The chained DB exception stays in the logs only.
    """
    logger.warning("RepositoryError for %s %s: %s", request.method, request.url.path, str(exc))
    return JSONResponse(status_code=exc.http_status(), content=exc.to_payload())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=GenericError().to_payload(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
