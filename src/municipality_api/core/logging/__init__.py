# core/logging/
# ├─ __init__.py     public API: setup_logging, request id helpers, RequestIDMiddleware
# ├─ builder.py      make_dict_config(settings) + setup_logging(settings)
# ├─ formatters.py   JsonFormatter, ColorFormatter
# ├─ filters.py      RequestIdFilter, RedactFilter (+ contextvar helpers)
# ├─ handlers.py     handler dicts for dictConfig (console / rotating files)
# └─ middleware.py   sets the request id for each HTTP request

from .builder import setup_logging, make_dict_config
from .filters import set_request_id, get_request_id, reset_request_id, RequestIdFilter, RedactFilter
from .middleware import RequestIDMiddleware, REQUEST_ID_HEADER

__all__ = [
    "setup_logging",
    "make_dict_config",
    "set_request_id",
    "get_request_id",
    "reset_request_id",
    "RequestIdFilter",
    "RedactFilter",
    "RequestIDMiddleware",
    "REQUEST_ID_HEADER",
]
