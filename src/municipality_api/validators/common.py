"""
Small value normalizers shared by the settings model and the request DTOs.
"""


def to_uppercase(value: str | None) -> str | None:
    """Uppercase a string, passing None through (used for LOG_LEVEL)."""
    return value.upper() if value is not None else None


def to_lowercase(value: str | None) -> str | None:
    """Lowercase a string, passing None through (used for LOG_FORMAT)."""
    return value.lower() if value is not None else None


def is_empty(value: object) -> bool:
    """
    True for a missing value or an empty string.

    Whitespace-only strings are NOT empty: the request contract only rejects
    absent and zero-length values.
    """
    return value is None or (isinstance(value, str) and len(value) == 0)
