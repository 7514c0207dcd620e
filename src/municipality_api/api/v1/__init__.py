from .error_handlers import register_exception_handlers
from .municipality import router

__all__ = ["register_exception_handlers", "router"]
