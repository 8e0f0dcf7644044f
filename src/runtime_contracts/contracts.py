"""Runtime contract checks.

Each check evaluates a caller-supplied predicate exactly once and returns a
result value: :class:`~runtime_contracts.result.Ok` when the predicate holds,
:class:`~runtime_contracts.result.Err` wrapping a
:class:`~runtime_contracts.errors.ContractFailure` when it does not. Nothing
is raised; how a failure propagates is up to the caller.

Messages may be any object. They are rendered with ``str()`` only when a check
fails, so building a message costs nothing while contracts hold.

Examples:
    ```py
    from runtime_contracts import ensures, requires

    def add_two(i: int, j: int):
        if (res := requires(lambda: i > 0, "i must be greater than 0")).is_err():
            return res
        if (res := requires(lambda: j > 0, "j must be greater than 0")).is_err():
            return res
        return ensures(i + j, lambda total: total > 0, "the sum must be positive")

    assert add_two(5, 6).unwrap() == 11
    assert add_two(-5, 6).is_err()
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from runtime_contracts.config import FAILURE_PREFIX
from runtime_contracts.errors import (
    ContractFailure,
    InvariantFailed,
    PostconditionFailed,
    PreconditionFailed,
)
from runtime_contracts.result import ContractResult, Err, Ok

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _fail(failure_type: type[ContractFailure], message: object) -> Err[ContractFailure]:
    failure = failure_type(f"{FAILURE_PREFIX}{message!s}")
    logger.debug("%s contract failed: %s", failure.kind.value, failure.message)
    return Err(failure)


def requires(predicate: Callable[[], bool], message: object) -> ContractResult[None]:
    """Check a precondition, typically at the start of a function.

    Call it once per argument so each failure names the offending input.

    Args:
        predicate: Zero-argument callable; called exactly once.
        message: Describes the condition; rendered only on failure.

    Returns:
        ``Ok(None)`` if the predicate holds, else ``Err(PreconditionFailed)``.
    """
    if predicate():
        return Ok(None)
    return _fail(PreconditionFailed, message)


def ensures(
    value: T, predicate: Callable[[T], bool], message: object
) -> ContractResult[T]:
    """Check a postcondition against a computed value.

    Meant to wrap the return expression of a function. The predicate sees the
    value itself; on success the very same object is handed back.

    Args:
        value: The value to validate and return.
        predicate: One-argument callable; called exactly once with ``value``.
        message: Describes the condition; rendered only on failure.

    Returns:
        ``Ok(value)`` if the predicate holds, else ``Err(PostconditionFailed)``.
    """
    if predicate(value):
        return Ok(value)
    return _fail(PostconditionFailed, message)


def check(predicate: Callable[[], bool], message: object) -> ContractResult[None]:
    """Check an invariant at an arbitrary point in a computation.

    Same evaluation as `requires`, but a failure is reported as
    `InvariantFailed`, which usually signals a bug rather than bad input.
    """
    if predicate():
        return Ok(None)
    return _fail(InvariantFailed, message)
