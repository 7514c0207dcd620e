from .either import Either, Left, Right

__all__ = ["Either", "Left", "Right"]
