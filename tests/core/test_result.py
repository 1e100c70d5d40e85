"""
Tests for the Result[P] envelope.

Validates:
    - success()/failure() constructors and the ok/failed flags
    - unwrap() re-raises the carried error unchanged
    - Frozen immutability and default factories
    - Field set (value, error, info)
"""

from dataclasses import FrozenInstanceError, fields
from decimal import Decimal

import pytest

from pyexact.core.exceptions import NotSquareError
from pyexact.core.result import Result


def _not_square():
    return NotSquareError("expected square matrix but actual 2 x 3", row_size=2, column_size=3)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_success(self):
        result = Result.success(-2, info={"method": "closed_form"})
        assert result.ok
        assert not result.failed
        assert result.value == -2
        assert result.error is None
        assert result.info["method"] == "closed_form"

    def test_success_with_decimal_payload(self):
        result = Result.success(Decimal("1.5"))
        assert result.value == Decimal("1.5")

    def test_success_without_info(self):
        assert Result.success(0).info == {}

    def test_failure(self):
        error = _not_square()
        result = Result.failure(error, info={"operation": "trace"})
        assert result.failed
        assert not result.ok
        assert result.value is None
        assert result.error is error
        assert result.info["operation"] == "trace"

    def test_failure_requires_error(self):
        with pytest.raises(ValueError, match="requires an error"):
            Result.failure(None)

    def test_info_is_copied(self):
        info = {"method": "leibniz"}
        result = Result.success(1, info=info)
        info["method"] = "changed"
        assert result.info["method"] == "leibniz"

    def test_zero_is_a_success(self):
        """A falsy payload must not be mistaken for a failure."""
        assert Result.success(0).ok


# ═══════════════════════════════════════════════════════════════════════
# Unwrapping
# ═══════════════════════════════════════════════════════════════════════


class TestUnwrap:

    def test_unwrap_success(self):
        assert Result.success(7).unwrap() == 7

    def test_unwrap_failure_raises_carried_error(self):
        error = _not_square()
        with pytest.raises(NotSquareError, match="2 x 3") as excinfo:
            Result.failure(error).unwrap()
        assert excinfo.value is error

    def test_unwrap_or_success(self):
        assert Result.success(7).unwrap_or(0) == 7

    def test_unwrap_or_failure(self):
        assert Result.failure(_not_square()).unwrap_or(0) == 0


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestResultImmutability:

    def test_cannot_reassign_value(self):
        result = Result.success(1)
        with pytest.raises(FrozenInstanceError):
            result.value = 2

    def test_cannot_reassign_error(self):
        result = Result.success(1)
        with pytest.raises(FrozenInstanceError):
            result.error = _not_square()

    def test_direct_construction_defaults(self):
        result = Result(value=1)
        assert result.ok
        assert result.info == {}

    def test_fields(self):
        names = [f.name for f in fields(Result)]
        assert names == ["value", "error", "info"]
