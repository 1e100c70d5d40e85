"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_not_none: missing arguments
    - check_integer: integer-likes accepted, bool/float/str rejected
    - check_size / check_index: positive sizes, 1-based bounds
    - check_domain / check_same_domain: domain type and identity
    - check_equal_sizes / rows / columns / inner dimensions: shape agreement
"""

import numpy as np
import pytest

from pyexact.core.exceptions import (
    ColumnSizeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NullArgumentError,
    RowSizeMismatchError,
    SizeMismatchError,
    ValidationError,
)
from pyexact.core.validation import (
    check_domain,
    check_equal_column_sizes,
    check_equal_row_sizes,
    check_equal_sizes,
    check_index,
    check_inner_dimensions,
    check_integer,
    check_not_none,
    check_same_domain,
    check_size,
)
from pyexact.number.domains import DECIMAL, INTEGER


# ═══════════════════════════════════════════════════════════════════════
# check_not_none / check_integer
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNotNone:

    def test_returns_value(self):
        assert check_not_none(0, "value") == 0

    def test_none_raises(self):
        with pytest.raises(NullArgumentError, match="value: must not be None"):
            check_not_none(None, "value")


class TestCheckInteger:

    def test_int(self):
        assert check_integer(3, "index") == 3

    def test_numpy_integer_converted(self):
        result = check_integer(np.int64(5), "index")
        assert result == 5
        assert type(result) is int

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="bool"):
            check_integer(True, "index")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="float"):
            check_integer(1.0, "index")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match="str"):
            check_integer("1", "index")

    def test_none_raises(self):
        with pytest.raises(NullArgumentError):
            check_integer(None, "index")


# ═══════════════════════════════════════════════════════════════════════
# check_size / check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSize:

    def test_positive(self):
        assert check_size(1, "size") == 1

    def test_zero_raises(self):
        with pytest.raises(InvalidDimensionError, match=r"expected size > 0 but actual 0"):
            check_size(0, "size")

    def test_negative_raises(self):
        with pytest.raises(InvalidDimensionError, match=r"expected row_size > 0 but actual -2"):
            check_size(-2, "row_size")

    def test_attributes(self):
        with pytest.raises(InvalidDimensionError) as excinfo:
            check_size(0, "column_size")
        assert excinfo.value.name == "column_size"
        assert excinfo.value.actual == 0


class TestCheckIndex:

    @pytest.mark.parametrize("index", [1, 2, 3])
    def test_in_range(self, index):
        assert check_index(index, 3, "index") == index

    def test_zero_raises(self):
        with pytest.raises(IndexOutOfRangeError, match=r"expected index in \[1, 3\] but actual 0"):
            check_index(0, 3, "index")

    def test_above_upper_raises(self):
        with pytest.raises(IndexOutOfRangeError, match=r"but actual 4"):
            check_index(4, 3, "index")

    def test_attributes(self):
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            check_index(5, 2, "row_index")
        err = excinfo.value
        assert (err.name, err.upper, err.actual) == ("row_index", 2, 5)

    def test_none_raises(self):
        with pytest.raises(NullArgumentError, match="row_index"):
            check_index(None, 2, "row_index")


# ═══════════════════════════════════════════════════════════════════════
# Domain and shape agreement
# ═══════════════════════════════════════════════════════════════════════


class TestCheckSameDomain:

    def test_same(self):
        check_same_domain(INTEGER, INTEGER, "summand")

    def test_different(self):
        with pytest.raises(
            ValidationError, match="summand: expected domain integer but actual decimal"
        ):
            check_same_domain(INTEGER, DECIMAL, "summand")


class TestShapeChecks:

    def test_equal_sizes_pass(self):
        check_equal_sizes(3, 3, "other")

    def test_equal_sizes_fail(self):
        with pytest.raises(
            SizeMismatchError, match="other: expected equal sizes but actual 2 != 3"
        ):
            check_equal_sizes(2, 3, "other")

    def test_equal_row_sizes_fail(self):
        with pytest.raises(
            RowSizeMismatchError, match="summand: expected equal row sizes but actual 2 != 1"
        ):
            check_equal_row_sizes(2, 1, "summand")

    def test_equal_column_sizes_fail(self):
        with pytest.raises(
            ColumnSizeMismatchError,
            match="subtrahend: expected equal column sizes but actual 2 != 4",
        ):
            check_equal_column_sizes(2, 4, "subtrahend")

    def test_inner_dimensions_pass(self):
        check_inner_dimensions(3, 3, "factor", "factor.row_size")

    def test_inner_dimensions_fail(self):
        with pytest.raises(DimensionMismatchError) as excinfo:
            check_inner_dimensions(2, 3, "factor", "factor.row_size")
        assert str(excinfo.value) == (
            "factor: expected column_size == factor.row_size but actual 2 != 3"
        )
        assert excinfo.value.operand == "factor"
        assert excinfo.value.expected == 2
        assert excinfo.value.actual == 3


class TestCheckDomain:

    def test_accepts_domain(self):
        assert check_domain(DECIMAL) is DECIMAL

    def test_rejects_string(self):
        with pytest.raises(ValidationError, match="domain: expected a ScalarDomain but actual str"):
            check_domain("decimal")

    def test_none(self):
        with pytest.raises(NullArgumentError, match="domain"):
            check_domain(None)
