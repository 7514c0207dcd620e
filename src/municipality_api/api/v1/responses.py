"""
Turns service results into HTTP responses.

Route handlers never build error responses themselves: they hand the
service's `Either` to `result_response()` and the error kind decides the
status code.

| Left(...)                       | Status | Body                         |
| ------------------------------- | ------ | ---------------------------- |
| MunicipalityNotFound            | 404    | the error payload            |
| MunicipalityServerError         | 500    | the error payload            |
| any other MunicipalityError     | 400    | a fresh GenericError payload |
| GenericError                    | 500    | the error payload            |
| anything else (None included)   | 500    | a fresh GenericError payload |
"""

import logging
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from municipality_api.errors import (
    DomainError,
    GenericError,
    MunicipalityError,
    MunicipalityNotFound,
    MunicipalityServerError,
)
from municipality_api.functional import Either, Left, Right

logger = logging.getLogger(__name__)


def empty_body_response(result: Either[Any, Any], success_status: int = status.HTTP_204_NO_CONTENT) -> Response:
    """Success -> `success_status` with no body; failure -> error dispatch."""
    match result:
        case Right():
            return Response(status_code=success_status)
        case Left(error):
            return error_response(error)
    raise TypeError(f"expected an Either, got {type(result).__name__}")


def result_response(result: Either[Any, Any], success_status: int = status.HTTP_200_OK) -> Response:
    """Success -> `success_status` with the value as JSON body; failure -> error dispatch."""
    match result:
        case Right(value):
            return JSONResponse(status_code=success_status, content=jsonable_encoder(value, by_alias=True))
        case Left(error):
            return error_response(error)
    raise TypeError(f"expected an Either, got {type(result).__name__}")


def error_response(error: object) -> JSONResponse:
    """Map an error value to its HTTP response. Unknown values fall back to a generic 500."""
    match error:
        case MunicipalityNotFound():
            status_code, body = status.HTTP_404_NOT_FOUND, error
        case MunicipalityServerError():
            status_code, body = status.HTTP_500_INTERNAL_SERVER_ERROR, error
        case MunicipalityError():
            status_code, body = status.HTTP_400_BAD_REQUEST, GenericError()
        case GenericError():
            status_code, body = status.HTTP_500_INTERNAL_SERVER_ERROR, error
        case _:
            status_code, body = status.HTTP_500_INTERNAL_SERVER_ERROR, GenericError()

    logger.info(
        "response.error",
        extra={
            "status_code": status_code,
            "error": type(error).__name__,
            "class_happen": error.class_happen if isinstance(error, DomainError) else None,
        },
    )
    return JSONResponse(status_code=status_code, content=body.to_payload())
