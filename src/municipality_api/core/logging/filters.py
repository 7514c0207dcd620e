"""
Logging filters.

- RequestIdFilter: every LogRecord gets a `request_id` attribute, taken from
  the record itself (explicit `extra`), then from the per-request contextvar
  set by RequestIDMiddleware, else "-".
- RedactFilter: masks values of sensitive `extra` keys before any handler
  formats them.

A `contextvars.ContextVar` is used (not threading.local) so the id follows
the request across awaits.
"""

import logging
import contextvars
from logging import LogRecord

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)

REDACTED = "***REDACTED***"


def set_request_id(request_id: str | None) -> contextvars.Token:
    """Set the request id for the current context; returns the token for reset_request_id()."""
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """Annotates records with `request_id`; never drops a record."""

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    # DB credentials travel through settings; keep them out of structured logs
    SENSITIVE = {
        "password",
        "postgres_password",
        "secret",
        "token",
        "authorization",
        "database_url",
    }

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = REDACTED
        return True
