"""Tagged success/failure values returned by engine operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import CalculatorError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: CalculatorError

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message

    def unwrap(self):
        """Re-raise the carried error.

        Only numeric callbacks that must return a bare float use this; the
        enclosing operation turns the error back into an :class:`Err`.
        """

        raise self.error


Outcome = Union[Ok[T], Err]


__all__ = ["Ok", "Err", "Outcome"]
