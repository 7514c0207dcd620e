"""
Infrastructure exception raised by the repository layer.

Domain outcomes (not found, failed write) are returned as `Left(...)` values
(see `municipality_api.errors`). `RepositoryError` is reserved for the read
path, where a storage fault cannot be turned into a meaningful value: it
propagates to the top of the request and is rendered by
`api/v1/error_handlers.py` as a 500.
"""

from datetime import datetime


class RepositoryError(Exception):
    """
    Storage fault that escaped a repository read.

    - message: human-friendly message (safe to show to clients)
    - class_happen: fully qualified name of the repository that failed
    """

    def __init__(self, message: str, *, class_happen: str = ""):
        super().__init__(message)
        self.message = message
        self.class_happen = class_happen
        self.time_stamp = datetime.now()

    def __str__(self) -> str:
        if self.class_happen:
            return f"{self.message} (in: {self.class_happen})"
        return self.message

    def to_payload(self) -> dict:
        """
        Same shape as the domain error payload, so clients parse a single format:
            {"message": "...", "timeStamp": "...", "classHappen": "..."}
        The chained DB exception is intentionally not part of the payload.
        """
        return {
            "message": self.message,
            "timeStamp": self.time_stamp.isoformat(),
            "classHappen": self.class_happen,
        }

    def http_status(self) -> int:
        return 500


__all__ = [
    "RepositoryError",
]
