"""
Single import point for the ORM models, so that importing `municipality_api.models`
registers every table on `Base.metadata` (needed before `create_all`).
"""

from .municipality import Municipality

__all__ = [
    "Municipality",
]
