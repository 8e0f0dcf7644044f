"""Contract failure definitions.

Failures are values: the checking functions return them inside an
:class:`~runtime_contracts.result.Err` rather than raising them. They still
derive from :class:`Exception` so that a caller who decides a failure is fatal
can simply ``raise`` it.
"""

from enum import Enum
from typing import ClassVar


class ContractKind(Enum):
    """Enumeration of contract categories, valued by the checking operation."""

    PRECONDITION = "requires"
    POSTCONDITION = "ensures"
    INVARIANT = "check"


# ============================================================================
#                           Contract failures
# ============================================================================


class ContractFailure(Exception):
    """Base class for all contract failures.

    Two failures compare equal when they are of the same concrete class and
    carry the same message.
    """

    kind: ClassVar[ContractKind]

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value} validation failed: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ContractFailure):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class PreconditionFailed(ContractFailure):
    """Returned when a ``requires`` predicate evaluates false."""

    kind = ContractKind.PRECONDITION


class PostconditionFailed(ContractFailure):
    """Returned when an ``ensures`` predicate rejects the produced value."""

    kind = ContractKind.POSTCONDITION


class InvariantFailed(ContractFailure):
    """Returned when a ``check`` predicate evaluates false mid-computation."""

    kind = ContractKind.INVARIANT


# ============================================================================
#                           Library errors
# ============================================================================


class UnwrapError(Exception):
    """Raised when unwrapping the wrong side of a result."""

    def __init__(self, result: object) -> None:
        super().__init__(f"Called unwrap_err() on {result!r}")
        self.result = result


class InvalidLogLevelError(ValueError):
    """Raised when RUNTIME_CONTRACTS_LOG_LEVEL names an unknown level."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid log level: {value!r}")
        self.value = value
