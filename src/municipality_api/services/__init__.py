from .municipality_service import CREATION_OK_MESSAGE, MunicipalityService

__all__ = ["CREATION_OK_MESSAGE", "MunicipalityService"]
