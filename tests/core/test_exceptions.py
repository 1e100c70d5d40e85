"""
Tests for the PyExact exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyExactError)
    - Shape and index problems are ValidationErrors
    - Diagnostic attributes on the dimension and shape errors
    - Default attribute values (None for optional attributes)
"""

import pytest

from pyexact.core.exceptions import (
    ColumnSizeMismatchError,
    DimensionError,
    DimensionMismatchError,
    IncompleteContainerError,
    IndexOutOfRangeError,
    InvalidArgumentError,
    InvalidDimensionError,
    NotInvertibleError,
    NotSquareError,
    NullArgumentError,
    NumericalError,
    PyExactError,
    RowSizeMismatchError,
    ShapeMismatchError,
    SizeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyExactError."""

    @pytest.mark.parametrize("cls", [
        NullArgumentError,
        InvalidArgumentError,
        DimensionError,
        InvalidDimensionError,
        IndexOutOfRangeError,
        ShapeMismatchError,
        IncompleteContainerError,
    ])
    def test_validation_errors(self, cls):
        assert issubclass(cls, ValidationError)
        assert issubclass(cls, PyExactError)

    @pytest.mark.parametrize("cls", [
        InvalidDimensionError,
        IndexOutOfRangeError,
        SizeMismatchError,
        RowSizeMismatchError,
        ColumnSizeMismatchError,
        DimensionMismatchError,
    ])
    def test_dimension_errors(self, cls):
        assert issubclass(cls, DimensionError)

    @pytest.mark.parametrize("cls", [
        SizeMismatchError,
        RowSizeMismatchError,
        ColumnSizeMismatchError,
        DimensionMismatchError,
    ])
    def test_shape_mismatch_errors(self, cls):
        assert issubclass(cls, ShapeMismatchError)

    def test_not_square_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise NotSquareError("expected square matrix but actual 2 x 3")

    def test_not_square_is_not_validation_error(self):
        """A non-square matrix is a numerical precondition, not bad input."""
        assert not issubclass(NotSquareError, ValidationError)

    def test_incomplete_container_is_not_dimension_error(self):
        assert not issubclass(IncompleteContainerError, DimensionError)


# ═══════════════════════════════════════════════════════════════════════
# NullArgumentError
# ═══════════════════════════════════════════════════════════════════════


class TestNullArgumentError:

    def test_message_names_argument(self):
        err = NullArgumentError("summand")
        assert str(err) == "summand: must not be None"

    def test_argument_name_attribute(self):
        err = NullArgumentError("sqrt_context")
        assert err.argument_name == "sqrt_context"


# ═══════════════════════════════════════════════════════════════════════
# Dimension errors
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionError:

    def test_all_attributes(self):
        err = InvalidDimensionError("expected size > 0 but actual 0", name="size", actual=0)
        assert str(err) == "expected size > 0 but actual 0"
        assert err.name == "size"
        assert err.actual == 0

    def test_defaults_none(self):
        err = InvalidDimensionError("bad size")
        assert err.name is None
        assert err.actual is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError(
            "expected index in [1, 3] but actual 4", name="index", upper=3, actual=4
        )
        assert err.name == "index"
        assert err.upper == 3
        assert err.actual == 4

    def test_defaults_none(self):
        err = IndexOutOfRangeError("out of range")
        assert err.name is None
        assert err.upper is None
        assert err.actual is None


class TestShapeMismatchError:

    def test_all_attributes(self):
        err = SizeMismatchError(
            "summand: expected equal sizes but actual 2 != 3",
            operand="summand",
            expected=2,
            actual=3,
        )
        assert "2 != 3" in str(err)
        assert err.operand == "summand"
        assert err.expected == 2
        assert err.actual == 3

    def test_defaults_none(self):
        err = DimensionMismatchError("mismatch")
        assert err.operand is None
        assert err.expected is None
        assert err.actual is None


# ═══════════════════════════════════════════════════════════════════════
# Container and numerical errors
# ═══════════════════════════════════════════════════════════════════════


class TestIncompleteContainerError:

    def test_missing_attribute(self):
        err = IncompleteContainerError("2 missing", missing=2)
        assert err.missing == 2

    def test_default_none(self):
        assert IncompleteContainerError("incomplete").missing is None


class TestNotSquareError:

    def test_all_attributes(self):
        err = NotSquareError(
            "expected square matrix but actual 2 x 3", row_size=2, column_size=3
        )
        assert str(err) == "expected square matrix but actual 2 x 3"
        assert err.row_size == 2
        assert err.column_size == 3

    def test_catchable_as_base(self):
        with pytest.raises(PyExactError, match="square"):
            raise NotSquareError("expected square matrix but actual 1 x 2")


class TestNotInvertibleError:

    def test_value_attribute(self):
        err = NotInvertibleError("expected to be invertible but actual 0", value=0)
        assert err.value == 0
        assert isinstance(err, NumericalError)

    def test_value_defaults_to_none(self):
        assert NotInvertibleError("argument: undefined for zero").value is None
