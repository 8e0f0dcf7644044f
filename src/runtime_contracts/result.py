"""Minimal result values returned by the contract checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar, Union

from runtime_contracts.errors import ContractFailure, UnwrapError

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @staticmethod
    def is_ok() -> Literal[True]:
        """Return True; this is a success."""
        return True

    @staticmethod
    def is_err() -> Literal[False]:
        """Return False; this is a success."""
        return False

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrapError, there is no error to return."""
        raise UnwrapError(self)

    def unwrap_or(self, default: object) -> T:  # pylint: disable=unused-argument
        """Return the carried value, ignoring ``default``."""
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    @staticmethod
    def is_ok() -> Literal[False]:
        """Return False; this is a failure."""
        return False

    @staticmethod
    def is_err() -> Literal[True]:
        """Return True; this is a failure."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise the carried error.

        This is the hand-off point for callers who treat a contract failure
        as fatal.
        """
        raise self.error

    def unwrap_err(self) -> E:
        """Return the carried error."""
        return self.error

    def unwrap_or(self, default: T) -> T:
        """Return ``default`` in place of the missing value."""
        return default


Result = Union[Ok[T], Err[E]]
ContractResult = Union[Ok[T], Err[ContractFailure]]
