"""
Result type for explicit failure propagation.

Value objects, aggregates and use cases return a ``Result`` for every
expected failure (invalid input, missing aggregate, ownership violation)
instead of raising. Raising is reserved for programmer errors such as
reading the value of a failed result.
"""

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
R = TypeVar("R")


class ResultAccessError(RuntimeError):
    """Raised when a result is read through the wrong variant."""


class Result(Generic[T, E]):
    """
    Two-variant container: success carrying a value, or failure carrying an error.

    Accessors are the ``value`` and ``error`` properties. Reading ``value`` on a
    failure, or ``error`` on a success, raises ``ResultAccessError``.
    """

    __slots__ = ("_is_success", "_value", "_error")

    def __init__(self, is_success: bool, value: Any = None, error: Any = None):
        if not is_success and error is None:
            raise ResultAccessError("A failed result must carry an error")
        if is_success and error is not None:
            raise ResultAccessError("A successful result cannot carry an error")
        self._is_success = is_success
        self._value = value
        self._error = error

    @classmethod
    def ok(cls, value: T | None = None) -> "Result[T, Any]":
        """Build a success. The value may be omitted for commands with no payload."""
        return cls(True, value=value)

    @classmethod
    def fail(cls, error: E) -> "Result[Any, E]":
        """Build a failure."""
        return cls(False, error=error)

    @property
    def is_success(self) -> bool:
        return self._is_success

    @property
    def is_failure(self) -> bool:
        return not self._is_success

    @property
    def value(self) -> T:
        if not self._is_success:
            raise ResultAccessError(
                f"Cannot get the value of a failed result: {self._error!r}"
            )
        return self._value

    @property
    def error(self) -> E:
        if self._is_success:
            raise ResultAccessError("Cannot get the error of a successful result")
        return self._error

    def value_or(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        return self._value if self._is_success else default

    def map(self, fn: Callable[[T], U]) -> "Result[U, E]":
        """
        Transform the success value.

        Args:
            fn: Function applied to the value when this result is a success

        Returns:
            A success wrapping ``fn(value)``, or this failure unchanged
        """
        if self._is_success:
            return Result.ok(fn(self._value))
        return self  # type: ignore[return-value]

    def flat_map(self, fn: Callable[[T], "Result[U, E]"]) -> "Result[U, E]":
        """
        Chain a computation that itself returns a result.

        Args:
            fn: Function applied to the value when this result is a success

        Returns:
            The result of ``fn(value)``, or this failure unchanged
        """
        if self._is_success:
            return fn(self._value)
        return self  # type: ignore[return-value]

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        """Fold both branches into a single value."""
        if self._is_success:
            return on_success(self._value)
        return on_failure(self._error)

    @staticmethod
    def combine(results: Iterable["Result[Any, E]"]) -> "Result[None, E]":
        """
        Return the first failure in iteration order, else an empty success.

        Used to validate several independent fields and report the earliest
        violation.
        """
        for result in results:
            if result.is_failure:
                return Result.fail(result.error)
        return Result.ok()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return (
            self._is_success == other._is_success
            and self._value == other._value
            and self._error == other._error
        )

    def __repr__(self) -> str:
        if self._is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error!r})"
