"""
Repository layer: the data-access gateway between the service and the database.

Usage:
    from municipality_api.repositories import MunicipalityRepository
"""

from .base_repository import BaseRepository, process_response
from .municipality_repository import MunicipalityRepository

__all__ = [
    "BaseRepository",
    "MunicipalityRepository",
    "process_response",
]
