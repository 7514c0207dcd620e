"""
Base repository class providing the plumbing shared by all repositories.

This class serves as a reusable foundation for repositories that interact with
the database using SQLAlchemy's async sessions. It owns:

  - the model class and the injected `AsyncSession`;
  - `transaction()`: the single transaction boundary of one repository call;
  - `process_response()`: the one place where the outcome of a storage
    operation (value, None, or raised exception) becomes an `Either`.

Model-specific repositories inherit from it and implement their own queries.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Awaitable, Generic, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from municipality_api.database.base import Base
from municipality_api.errors import (
    MunicipalityError,
    MunicipalityNotFound,
    MunicipalityServerError,
)
from municipality_api.functional import Either, Left, Right

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)
T = TypeVar("T")

# Setup logging
logger = logging.getLogger(__name__)


async def process_response(
    operation: Awaitable[T | None],
    origin: str,
) -> Either[MunicipalityError, T]:
    """
    Await a storage operation and normalize its outcome.

    | Outcome              | Result                                                  |
    | -------------------- | ------------------------------------------------------- |
    | value                | Right(value)                                            |
    | None                 | Left(MunicipalityNotFound(class_happen=origin))          |
    | raised exception     | Left(MunicipalityServerError(str(exc), class_happen=origin)) |

    No exception escapes: callers always get an Either back. Rollback is not
    done here; it belongs to the `transaction()` scope wrapping the operation.

    Args:
        operation: the awaitable performing the DB work (not yet awaited).
        origin: fully qualified name of the calling repository.
    """
    try:
        outcome = await operation
    except Exception as exc:
        # Unexpected storage fault: keep the stack trace in the logs, hand a value to the caller
        logger.exception("repo.storage_fault", extra={"origin": origin})
        return Left(MunicipalityServerError(message=str(exc), class_happen=origin))

    if outcome is None:
        logger.info("repo.not_found", extra={"origin": origin})
        return Left(MunicipalityNotFound(class_happen=origin))

    return Right(outcome)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Args:
            model: The SQLAlchemy model class (e.g. Municipality, not Municipality())
            db: The async database session, injected per request
        """
        self.model = model
        self.db = db

    @property
    def origin(self) -> str:
        """Fully qualified class name, used as the origin tag of domain errors."""
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncSession]:
        """
        Open exactly one transaction for the enclosed block.

        - commits when the block exits normally;
        - rolls back (and re-raises) when the block raises.

        If the session is already inside a transaction (a caller composed
        several repository calls), a SAVEPOINT is used instead so the outer
        transaction stays under the caller's control.
        """
        if self.db.in_transaction():
            async with self.db.begin_nested():
                yield self.db
        else:
            async with self.db.begin():
                yield self.db

    async def process_response(self, operation: Awaitable[T | None]) -> Either[MunicipalityError, T]:
        return await process_response(operation, self.origin)

    def _log_success(self, operation: str, start: float, **fields: Any) -> None:
        duration_ms = int((time.perf_counter() - start) * 1000)
        logger.info(
            f"repo.{operation}.success",
            extra={
                "model": self.model.__name__,
                "operation": operation,
                "duration_ms": duration_ms,
                **fields,
            },
        )
