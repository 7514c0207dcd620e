"""
Domain errors for the municipality service.

These are values, not exceptions: they are created where an operation fails,
wrapped in `Left(...)` and carried unchanged up to the HTTP layer, where the
response dispatcher (`api/v1/responses.py`) picks a status code for them.

Hierarchy (closed set):

    DomainError
    ├── GenericError              fallback, default payload only
    └── MunicipalityError
        ├── MunicipalityNotFound      -> 404
        └── MunicipalityServerError   -> 500

Every error carries a message, the time it was created and the fully
qualified name of the component that raised it (`class_happen`).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


def origin_of(component: Any) -> str:
    """
    Fully qualified class name of `component` (an instance or a class),
    used as the `class_happen` origin tag of errors.
    """
    cls = component if isinstance(component, type) else type(component)
    return f"{cls.__module__}.{cls.__qualname__}"


@dataclass(frozen=True, kw_only=True)
class DomainError:
    message: str = "Generic error"
    class_happen: str = ""
    time_stamp: datetime = field(default_factory=datetime.now)

    def to_payload(self) -> dict[str, str]:
        """
        JSON-serializable body for HTTP responses:
            {"message": "...", "timeStamp": "2025-06-01T10:15:30.123456", "classHappen": "..."}
        """
        return {
            "message": self.message,
            "timeStamp": self.time_stamp.isoformat(),
            "classHappen": self.class_happen,
        }


@dataclass(frozen=True, kw_only=True)
class GenericError(DomainError):
    """Fallback error for outcomes that cannot be classified."""


@dataclass(frozen=True, kw_only=True)
class MunicipalityError(DomainError):
    """Base of the errors raised while reading or writing municipalities."""


@dataclass(frozen=True, kw_only=True)
class MunicipalityNotFound(MunicipalityError):
    message: str = "Municipality not found"


@dataclass(frozen=True, kw_only=True)
class MunicipalityServerError(MunicipalityError):
    # no default: always the description of the underlying fault
    message: str


__all__ = [
    "DomainError",
    "GenericError",
    "MunicipalityError",
    "MunicipalityNotFound",
    "MunicipalityServerError",
    "origin_of",
]
