from .base import RepositoryError

__all__ = ["RepositoryError"]
