"""Unit tests for runtime_contracts.result."""

import dataclasses

import pytest

from runtime_contracts.errors import PreconditionFailed, UnwrapError
from runtime_contracts.result import Err, Ok

# pylint: disable=magic-value-comparison


class TestOk:
    """Tests for Ok."""

    @staticmethod
    def test_predicates():
        """Ok reports success."""
        assert Ok(1).is_ok()
        assert not Ok(1).is_err()

    @staticmethod
    def test_unwrap():
        """unwrap and unwrap_or return the value."""
        assert Ok(1).unwrap() == 1
        assert Ok(1).unwrap_or(2) == 1

    @staticmethod
    def test_unwrap_err_raises():
        """unwrap_err on Ok raises UnwrapError."""
        with pytest.raises(UnwrapError, match=r"Called unwrap_err\(\) on Ok\(value=1\)"):
            Ok(1).unwrap_err()

    @staticmethod
    def test_frozen():
        """Ok cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            Ok(1).value = 2  # type: ignore[misc]


class TestErr:
    """Tests for Err."""

    @staticmethod
    def test_predicates():
        """Err reports failure."""
        res = Err(PreconditionFailed("m"))
        assert res.is_err()
        assert not res.is_ok()

    @staticmethod
    def test_unwrap_raises_carried_failure():
        """unwrap on Err raises the contained failure."""
        failure = PreconditionFailed("m")
        with pytest.raises(PreconditionFailed) as excinfo:
            Err(failure).unwrap()
        assert excinfo.value is failure

    @staticmethod
    def test_unwrap_err_and_default():
        """unwrap_err returns the failure; unwrap_or returns the default."""
        failure = PreconditionFailed("m")
        assert Err(failure).unwrap_err() is failure
        assert Err(failure).unwrap_or(7) == 7

    @staticmethod
    def test_equality():
        """Results compare structurally."""
        assert Err(PreconditionFailed("m")) == Err(PreconditionFailed("m"))
        assert Ok(None) != Err(PreconditionFailed("m"))


def test_results_support_pattern_matching():
    """Ok and Err destructure in match statements."""

    def describe(res):
        match res:
            case Ok(value):
                return f"ok:{value}"
            case Err(PreconditionFailed() as failure):
                return f"bad input:{failure.message}"
        return "other"

    assert describe(Ok(3)) == "ok:3"
    assert describe(Err(PreconditionFailed("m"))) == "bad input:m"
