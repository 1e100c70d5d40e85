"""
Tests for VectorBuilder and MatrixBuilder.

Validates:
    - Size validation at construction
    - Bounds and type checks on every put
    - put_all / nulls_to_element / append fill semantics
    - build() refuses incomplete containers and snapshots the state
"""

from decimal import Decimal

import pytest

from pyexact.core.exceptions import (
    IncompleteContainerError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NullArgumentError,
    ValidationError,
)
from pyexact.linear import Matrix, MatrixBuilder, Vector, VectorBuilder
from pyexact.number import DECIMAL, INTEGER, INTEGER_COMPLEX, IntegerComplex


# ═══════════════════════════════════════════════════════════════════════
# VectorBuilder
# ═══════════════════════════════════════════════════════════════════════


class TestVectorBuilderConstruction:

    def test_properties(self):
        builder = VectorBuilder(3, DECIMAL)
        assert builder.size == 3
        assert builder.domain is DECIMAL

    def test_default_domain_is_integer(self):
        assert VectorBuilder(2).domain is INTEGER

    def test_via_vector(self):
        assert isinstance(Vector.builder(2), VectorBuilder)

    @pytest.mark.parametrize("size", [0, -1])
    def test_non_positive_size(self, size):
        with pytest.raises(InvalidDimensionError, match=f"expected size > 0 but actual {size}"):
            VectorBuilder(size)

    def test_none_domain(self):
        with pytest.raises(NullArgumentError, match="domain"):
            VectorBuilder(2, None)

    def test_invalid_domain(self):
        with pytest.raises(ValidationError, match="expected a ScalarDomain"):
            VectorBuilder(2, "integer")

    def test_repr(self):
        assert repr(VectorBuilder(2).put(1, 5)) == "VectorBuilder(size=2, domain=integer, set=1)"


class TestVectorBuilderPut:

    def test_put_and_element(self):
        builder = VectorBuilder(3).put(2, 7)
        assert builder.element(2) == 7
        assert builder.element(1) is None

    def test_last_write_wins(self):
        vector = VectorBuilder(1).put(1, 1).put(1, 2).build()
        assert vector.element(1) == 2

    @pytest.mark.parametrize("index", [0, 4])
    def test_index_out_of_range(self, index):
        with pytest.raises(
            IndexOutOfRangeError, match=rf"expected index in \[1, 3\] but actual {index}"
        ):
            VectorBuilder(3).put(index, 1)

    def test_element_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            VectorBuilder(3).element(4)

    def test_none_index(self):
        with pytest.raises(NullArgumentError, match="index"):
            VectorBuilder(3).put(None, 1)

    def test_none_value(self):
        with pytest.raises(NullArgumentError, match="value: must not be None"):
            VectorBuilder(3).put(1, None)

    def test_wrong_domain_type(self):
        with pytest.raises(ValidationError, match="for domain integer"):
            VectorBuilder(3).put(1, Decimal(1))

    def test_append(self):
        vector = VectorBuilder(3).append(4).append(5).append(6).build()
        assert vector.elements() == (4, 5, 6)

    def test_append_when_full(self):
        builder = VectorBuilder(1).append(4)
        with pytest.raises(IndexOutOfRangeError, match=r"expected index in \[1, 1\] but actual 2"):
            builder.append(5)


class TestVectorBuilderFill:

    def test_put_all(self):
        assert VectorBuilder(3).put_all(9).build().elements() == (9, 9, 9)

    def test_put_all_overwrites(self):
        assert VectorBuilder(2).put(1, 1).put_all(0).build().elements() == (0, 0)

    def test_nulls_to_element_keeps_set_values(self):
        vector = VectorBuilder(3).put(2, 5).nulls_to_element(0).build()
        assert vector.elements() == (0, 5, 0)

    def test_fill_value_validated(self):
        with pytest.raises(ValidationError):
            VectorBuilder(2).nulls_to_element(0.0)


class TestVectorBuilderBuild:

    def test_incomplete(self):
        builder = VectorBuilder(3).put(1, 1)
        with pytest.raises(IncompleteContainerError, match="first missing index 2") as excinfo:
            builder.build()
        assert excinfo.value.missing == 2

    def test_snapshot(self):
        builder = VectorBuilder(2).put_all(1)
        vector = builder.build()
        builder.put(1, 99)
        assert vector.elements() == (1, 1)
        assert builder.build().elements() == (99, 1)

    def test_complex_domain(self):
        vector = VectorBuilder(2, INTEGER_COMPLEX).put_all(IntegerComplex(1, 1)).build()
        assert vector.domain is INTEGER_COMPLEX


# ═══════════════════════════════════════════════════════════════════════
# MatrixBuilder
# ═══════════════════════════════════════════════════════════════════════


class TestMatrixBuilder:

    def test_properties(self):
        builder = MatrixBuilder(2, 3, DECIMAL)
        assert builder.row_size == 2
        assert builder.column_size == 3
        assert builder.domain is DECIMAL

    def test_via_matrix(self):
        assert isinstance(Matrix.builder(1, 1), MatrixBuilder)

    def test_zero_rows(self):
        with pytest.raises(InvalidDimensionError, match="expected row_size > 0 but actual 0"):
            MatrixBuilder(0, 2)

    def test_zero_columns(self):
        with pytest.raises(InvalidDimensionError, match="expected column_size > 0 but actual 0"):
            MatrixBuilder(2, 0)

    def test_row_index_out_of_range(self):
        with pytest.raises(
            IndexOutOfRangeError, match=r"expected row_index in \[1, 2\] but actual 3"
        ):
            MatrixBuilder(2, 2).put(3, 1, 0)

    def test_column_index_out_of_range(self):
        with pytest.raises(
            IndexOutOfRangeError, match=r"expected column_index in \[1, 2\] but actual 0"
        ):
            MatrixBuilder(2, 2).put(1, 0, 0)

    def test_put_and_element(self):
        builder = MatrixBuilder(2, 2).put(1, 2, 5)
        assert builder.element(1, 2) == 5
        assert builder.element(2, 1) is None

    def test_put_all_equals_full_puts(self):
        filled = MatrixBuilder(2, 2).put_all(0).build()
        manual = MatrixBuilder(2, 2).put(1, 1, 0).put(1, 2, 0).put(2, 1, 0).put(2, 2, 0).build()
        assert filled == manual

    def test_nulls_to_element(self):
        matrix = MatrixBuilder(2, 2).put(1, 1, 1).put(2, 2, 1).nulls_to_element(0).build()
        assert matrix.elements() == (1, 0, 0, 1)

    def test_incomplete(self):
        builder = MatrixBuilder(2, 2).put(1, 1, 1)
        with pytest.raises(IncompleteContainerError, match=r"first missing cell \(1, 2\)") as excinfo:
            builder.build()
        assert excinfo.value.missing == 3

    def test_snapshot(self):
        builder = MatrixBuilder(1, 2).put_all(1)
        matrix = builder.build()
        builder.put(1, 1, 7)
        assert matrix.element(1, 1) == 1

    def test_wrong_domain_type(self):
        with pytest.raises(ValidationError, match="for domain decimal"):
            MatrixBuilder(1, 1, DECIMAL).put(1, 1, 1)

    def test_repr(self):
        assert repr(MatrixBuilder(1, 2)) == (
            "MatrixBuilder(row_size=1, column_size=2, domain=integer, set=0)"
        )
