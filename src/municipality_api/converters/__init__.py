from .base import Converter, SaveConverter
from .municipality import MunicipalityConverter, MunicipalitySaveConverter

__all__ = [
    "Converter",
    "SaveConverter",
    "MunicipalityConverter",
    "MunicipalitySaveConverter",
]
