"""
Either: a value that is exactly one of two alternatives (a disjoint union).

By convention `Left` carries a failure (a domain error) and `Right` carries a
successful result. Repositories and services return an `Either` instead of
raising, so the outcome of an operation flows as plain data up to the HTTP
layer, where it is folded into a response.

Usage:
    result = Either.right(2).map(lambda n: n * 10)          # Right(value=20)
    result = Either.left(err).map(lambda n: n * 10)         # Left(value=err), lambda not called

    message = result.fold(
        lambda error: f"failed: {error.message}",
        lambda value: f"got {value}",
    )

    match result:
        case Right(value):
            ...
        case Left(error):
            ...

Both variants are frozen dataclasses: once built, an Either never changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

L = TypeVar("L")  # failure type
R = TypeVar("R")  # success type
T = TypeVar("T")


class Either(Generic[L, R]):
    """
    Base type of `Left` and `Right`.

    Not meant to be instantiated directly; use `Either.left(...)` /
    `Either.right(...)` or the variant classes.
    """

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        # only the two variants can exist, so exactly one of is_left()/is_right() holds
        if not issubclass(cls, (Left, Right)):
            raise TypeError("Either cannot be instantiated directly; use Left or Right")
        return super().__new__(cls)

    @staticmethod
    def left(value: L) -> Either[L, Any]:
        return Left(value)

    @staticmethod
    def right(value: R) -> Either[Any, R]:
        return Right(value)

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def get_left(self) -> L | None:
        """The failure value, or None when this is a Right."""
        return self.value if isinstance(self, Left) else None

    def get_right(self) -> R | None:
        """The success value, or None when this is a Left."""
        return self.value if isinstance(self, Right) else None

    def map(self, mapper: Callable[[R], T]) -> Either[L, T]:
        """
        Transform the Right value; a Left is returned unchanged and
        `mapper` is not called.
        """
        if isinstance(self, Right):
            return Right(mapper(self.value))
        return self  # type: ignore[return-value]

    def flat_map(self, mapper: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """
        Chain an Either-producing function on the Right value; a Left is
        returned unchanged and `mapper` is not called.
        """
        if isinstance(self, Right):
            result = mapper(self.value)
            if not isinstance(result, Either):
                raise TypeError(
                    f"flat_map mapper must return an Either, got {type(result).__name__}"
                )
            return result
        return self  # type: ignore[return-value]

    def fold(self, left_mapper: Callable[[L], T], right_mapper: Callable[[R], T]) -> T:
        """
        Reduce to a single value: exactly one of the two functions is called.
        Typically the terminal step of a pipeline.
        """
        if isinstance(self, Right):
            return right_mapper(self.value)
        if isinstance(self, Left):
            return left_mapper(self.value)
        raise TypeError(f"{type(self).__name__} is neither Left nor Right")


@dataclass(frozen=True, slots=True)
class Left(Either[L, R]):
    """Failure side of an Either."""

    value: L


@dataclass(frozen=True, slots=True)
class Right(Either[L, R]):
    """Success side of an Either."""

    value: R
