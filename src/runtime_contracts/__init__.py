"""runtime-contracts

Structured, understandable runtime contracts. Preconditions, postconditions
and invariants are checked with plain predicates and reported as typed result
values instead of exceptions.
"""

from logging import NullHandler, getLogger

from runtime_contracts.config import FAILURE_PREFIX
from runtime_contracts.contracts import check, ensures, requires
from runtime_contracts.errors import (
    ContractFailure,
    ContractKind,
    InvariantFailed,
    PostconditionFailed,
    PreconditionFailed,
)
from runtime_contracts.result import ContractResult, Err, Ok, Result

__all__ = [
    "FAILURE_PREFIX",
    "ContractFailure",
    "ContractKind",
    "ContractResult",
    "Err",
    "InvariantFailed",
    "Ok",
    "PostconditionFailed",
    "PreconditionFailed",
    "Result",
    "__version__",
    "check",
    "ensures",
    "requires",
]
__version__ = "0.1.0"

getLogger(__name__).addHandler(NullHandler())
