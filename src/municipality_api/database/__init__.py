from .base import Base
from .session import dispose_engine, get_async_session, get_engine, get_session_maker

# init_db is imported by module path: it depends on the models, which depend on Base.
__all__ = [
    "Base",
    "dispose_engine",
    "get_async_session",
    "get_engine",
    "get_session_maker",
]
