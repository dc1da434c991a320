"""
Result type - Success/failure values for fail-fast composition.

Domain operations return ``Ok(value)`` or ``Err(error)`` instead of raising,
so callers branch on the outcome explicitly. Sequencing is plain early
return: check ``is_err()`` and hand the failure back untouched.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


class UnwrapError(Exception):
    """Raised when unwrap() is called on an Err."""


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        return Ok(fn(self.value))

    def map_error(self, fn: Callable[[object], object]) -> "Ok[T]":
        return self

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def map(self, fn: Callable[[object], object]) -> "Err[E]":
        return self

    def map_error(self, fn: Callable[[E], F]) -> "Err[F]":
        return Err(fn(self.error))

    def unwrap(self) -> NoReturn:
        raise UnwrapError(f"called unwrap() on {self!r}")


Result = Union[Ok[T], Err[E]]
