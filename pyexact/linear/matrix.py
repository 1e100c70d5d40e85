"""
Matrix: immutable 1-indexed table of scalars of one domain.

Element-wise and product operations validate shapes up front and raise on
mismatch. trace() and determinant() are the exception: on a non-square
matrix they return a failed Result instead of raising, so callers can
process many matrices without exception-driven control flow.

Structural predicates never raise; questions that do not apply to a
non-square matrix (triangularity, symmetry, invertibility) answer False.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike

from pyexact.core.exceptions import IncompleteContainerError, NotSquareError, ValidationError
from pyexact.core.protocols import ScalarDomain
from pyexact.core.result import Result
from pyexact.core.validation import (
    check_domain,
    check_equal_column_sizes,
    check_equal_row_sizes,
    check_index,
    check_inner_dimensions,
    check_not_none,
    check_same_domain,
    check_size,
)
from pyexact.linear import _determinant
from pyexact.linear._common import as_object_array, exact_sum
from pyexact.linear.builders import MatrixBuilder, VectorBuilder
from pyexact.linear.vector import Vector
from pyexact.number.domains import INTEGER
from pyexact.sqrt.calculator import sqrt
from pyexact.sqrt.context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext


@dataclass(frozen=True)
class Matrix:
    """
    Immutable matrix over a ScalarDomain.

    Construction:
        Matrix.builder(row_size, column_size, domain).put(...).build()
        Matrix.from_array([[1, 2], [3, 4]], domain=INTEGER)

    Rows and columns are 1-based. Equality and hashing are structural.
    """
    _domain: ScalarDomain
    _rows: tuple[tuple[Any, ...], ...]

    def __post_init__(self):
        check_domain(self._domain)
        if not isinstance(self._rows, tuple) or not all(
            isinstance(row, tuple) for row in self._rows
        ):
            raise ValidationError("rows: expected a tuple of tuples")
        check_size(len(self._rows), 'row_size')
        column_size = check_size(len(self._rows[0]), 'column_size')
        for i, row in enumerate(self._rows, start=1):
            if len(row) != column_size:
                raise IncompleteContainerError(
                    f"expected every row to have {column_size} elements "
                    f"but row {i} has {len(row)}",
                    missing=abs(column_size - len(row)),
                )
            for j, value in enumerate(row, start=1):
                self._domain.validate(value, f'element ({i}, {j})')

    @staticmethod
    def builder(
        row_size: int, column_size: int, domain: ScalarDomain = INTEGER
    ) -> MatrixBuilder:
        """Start building a Matrix of the given shape."""
        return MatrixBuilder(row_size, column_size, domain)

    @classmethod
    def from_array(cls, values: ArrayLike, domain: ScalarDomain = INTEGER) -> Matrix:
        """
        Build a Matrix from any 2D array-like (nested lists, numpy array).

        Elements are validated by the domain; no type coercion happens
        beyond numpy integer -> int.
        """
        array = as_object_array(values, 2, 'values')
        row_size, column_size = array.shape
        builder = MatrixBuilder(row_size, column_size, domain)
        for (i, j), value in np.ndenumerate(array):
            builder.put(i + 1, j + 1, value)
        return builder.build()

    # --- Accessors ---

    @property
    def domain(self) -> ScalarDomain:
        return self._domain

    @property
    def row_size(self) -> int:
        return len(self._rows)

    @property
    def column_size(self) -> int:
        return len(self._rows[0])

    @property
    def size(self) -> int:
        """Number of elements, row_size * column_size."""
        return self.row_size * self.column_size

    def element(self, row_index: int, column_index: int) -> Any:
        """Element at 1-based coordinates."""
        row_index = check_index(row_index, self.row_size, 'row_index')
        column_index = check_index(column_index, self.column_size, 'column_index')
        return self._rows[row_index - 1][column_index - 1]

    def row(self, row_index: int) -> dict[int, Any]:
        """Row as {column_index: element}."""
        row_index = check_index(row_index, self.row_size, 'row_index')
        return dict(enumerate(self._rows[row_index - 1], start=1))

    def column(self, column_index: int) -> dict[int, Any]:
        """Column as {row_index: element}."""
        column_index = check_index(column_index, self.column_size, 'column_index')
        return {i: row[column_index - 1] for i, row in enumerate(self._rows, start=1)}

    def rows(self) -> dict[int, dict[int, Any]]:
        return {i: self.row(i) for i in self.row_indexes()}

    def columns(self) -> dict[int, dict[int, Any]]:
        return {j: self.column(j) for j in self.column_indexes()}

    def row_indexes(self) -> range:
        return range(1, self.row_size + 1)

    def column_indexes(self) -> range:
        return range(1, self.column_size + 1)

    def cells(self) -> Iterator[tuple[int, int, Any]]:
        """(row_index, column_index, element) triples in row-major order."""
        for i, row in enumerate(self._rows, start=1):
            for j, value in enumerate(row, start=1):
                yield i, j, value

    def elements(self) -> tuple[Any, ...]:
        """All elements in row-major order."""
        return tuple(value for row in self._rows for value in row)

    def to_array(self) -> np.ndarray:
        """Elements as a 2D numpy object array (scalars stay exact)."""
        array = np.empty((self.row_size, self.column_size), dtype=object)
        for i, j, value in self.cells():
            array[i - 1, j - 1] = value
        return array

    # --- Validation ---

    def _check_matrix(self, other: Matrix, name: str) -> None:
        check_not_none(other, name)
        if not isinstance(other, Matrix):
            raise ValidationError(f"{name}: expected Matrix but actual {type(other).__name__}")
        check_same_domain(self._domain, other.domain, name)

    def _check_same_shape(self, other: Matrix, name: str) -> None:
        self._check_matrix(other, name)
        check_equal_row_sizes(self.row_size, other.row_size, name)
        check_equal_column_sizes(self.column_size, other.column_size, name)

    def _not_square_error(self) -> NotSquareError:
        return NotSquareError(
            f"expected square matrix but actual {self.row_size} x {self.column_size}",
            row_size=self.row_size,
            column_size=self.column_size,
        )

    # --- Arithmetic ---

    def add(self, summand: Matrix, context: Context | None = None) -> Matrix:
        """Element-wise sum."""
        self._check_same_shape(summand, 'summand')
        add = self._domain.add
        builder = MatrixBuilder(self.row_size, self.column_size, self._domain)
        for i, j, value in self.cells():
            builder.put(i, j, add(value, summand.element(i, j), context))
        return builder.build()

    def subtract(self, subtrahend: Matrix, context: Context | None = None) -> Matrix:
        """Element-wise difference."""
        self._check_same_shape(subtrahend, 'subtrahend')
        subtract = self._domain.subtract
        builder = MatrixBuilder(self.row_size, self.column_size, self._domain)
        for i, j, value in self.cells():
            builder.put(i, j, subtract(value, subtrahend.element(i, j), context))
        return builder.build()

    def _row_times_column(self, row, column, context: Context | None) -> Any:
        domain = self._domain
        result = domain.zero
        for a, b in zip(row, column):
            result = domain.add(result, domain.multiply(a, b, context), context)
        return result

    def multiply(self, factor: Matrix, context: Context | None = None) -> Matrix:
        """
        Matrix product self x factor.

        Raises:
            DimensionMismatchError: If column_size != factor.row_size
        """
        self._check_matrix(factor, 'factor')
        check_inner_dimensions(self.column_size, factor.row_size, 'factor', 'factor.row_size')
        factor_columns = [tuple(factor.column(j).values()) for j in factor.column_indexes()]
        builder = MatrixBuilder(self.row_size, factor.column_size, self._domain)
        for i, row in enumerate(self._rows, start=1):
            for j, column in enumerate(factor_columns, start=1):
                builder.put(i, j, self._row_times_column(row, column, context))
        return builder.build()

    def multiply_vector(self, vector: Vector, context: Context | None = None) -> Vector:
        """
        Matrix-vector product.

        Raises:
            DimensionMismatchError: If column_size != vector.size
        """
        check_not_none(vector, 'vector')
        if not isinstance(vector, Vector):
            raise ValidationError(f"vector: expected Vector but actual {type(vector).__name__}")
        check_same_domain(self._domain, vector.domain, 'vector')
        check_inner_dimensions(self.column_size, vector.size, 'vector', 'vector.size')
        builder = VectorBuilder(self.row_size, self._domain)
        for i, row in enumerate(self._rows, start=1):
            builder.put(i, self._row_times_column(row, vector.elements(), context))
        return builder.build()

    def scalar_multiply(self, scalar: Any, context: Context | None = None) -> Matrix:
        """Multiply every element by scalar."""
        scalar = self._domain.validate(scalar, 'scalar')
        multiply = self._domain.multiply
        builder = MatrixBuilder(self.row_size, self.column_size, self._domain)
        for i, j, value in self.cells():
            builder.put(i, j, multiply(scalar, value, context))
        return builder.build()

    def negate(self, context: Context | None = None) -> Matrix:
        """Equivalent to scalar_multiply(-1)."""
        minus_one = self._domain.negate(self._domain.one)
        return self.scalar_multiply(minus_one, context)

    def transpose(self) -> Matrix:
        builder = MatrixBuilder(self.column_size, self.row_size, self._domain)
        for i, j, value in self.cells():
            builder.put(j, i, value)
        return builder.build()

    def minor(self, row_index: int, column_index: int) -> Matrix:
        """
        Delete one row and one column and reindex the rest contiguously.

        Raises:
            IndexOutOfRangeError: If an index is out of range
            InvalidDimensionError: If the matrix has a single row or column
        """
        row_index = check_index(row_index, self.row_size, 'row_index')
        column_index = check_index(column_index, self.column_size, 'column_index')
        builder = MatrixBuilder(self.row_size - 1, self.column_size - 1, self._domain)
        for i, j, value in self.cells():
            if i == row_index or j == column_index:
                continue
            new_i = i - 1 if i > row_index else i
            new_j = j - 1 if j > column_index else j
            builder.put(new_i, new_j, value)
        return builder.build()

    # --- Partial operations ---

    def trace(self, context: Context | None = None) -> Result[Any]:
        """
        Sum of the diagonal.

        Returns:
            Result carrying the trace, or a NotSquareError failure.
        """
        if not self.square():
            return Result.failure(self._not_square_error(), info={'operation': 'trace'})
        domain = self._domain
        result = domain.zero
        for i in range(self.row_size):
            result = domain.add(result, self._rows[i][i], context)
        return Result.success(result, info={'operation': 'trace', 'size': self.row_size})

    def determinant(self, context: Context | None = None) -> Result[Any]:
        """
        Determinant.

        Triangular matrices use the diagonal product, sizes 1-3 closed
        forms, larger sizes the Leibniz expansion (factorial time).
        info['method'] names the path taken.

        Returns:
            Result carrying the determinant, or a NotSquareError failure.
        """
        if not self.square():
            return Result.failure(self._not_square_error(), info={'operation': 'determinant'})
        value, method = _determinant.determinant(
            self._rows, self._domain, self.triangular(), context
        )
        return Result.success(
            value,
            info={'operation': 'determinant', 'method': method, 'size': self.row_size},
        )

    # --- Predicates ---

    def square(self) -> bool:
        return self.row_size == self.column_size

    def upper_triangular(self) -> bool:
        """Square with every entry below the diagonal zero."""
        if not self.square():
            return False
        is_zero = self._domain.is_zero
        return all(is_zero(value) for i, j, value in self.cells() if i > j)

    def lower_triangular(self) -> bool:
        """Square with every entry above the diagonal zero."""
        if not self.square():
            return False
        is_zero = self._domain.is_zero
        return all(is_zero(value) for i, j, value in self.cells() if i < j)

    def triangular(self) -> bool:
        return self.upper_triangular() or self.lower_triangular()

    def diagonal(self) -> bool:
        return self.upper_triangular() and self.lower_triangular()

    def identity(self) -> bool:
        one = self._domain.one
        return self.diagonal() and all(
            self._rows[i][i] == one for i in range(self.row_size)
        )

    def symmetric(self) -> bool:
        return self.square() and self == self.transpose()

    def skew_symmetric(self) -> bool:
        return self.square() and self.transpose() == self.negate()

    def invertible(self) -> bool:
        """
        Square with a determinant that is a unit of the domain.

        Integer matrices need determinant +-1 and Gaussian-integer matrices
        one of +-1, +-i, since the inverse must stay in the domain. Decimal
        and decimal-complex matrices only need a non-zero determinant.
        """
        if not self.square():
            return False
        return self._domain.is_unit(self.determinant().unwrap())

    # --- Norms ---

    def max_abs_column_sum_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> int | Decimal:
        """Largest column sum of absolute values."""
        check_not_none(sqrt_context, 'sqrt_context')
        abs_ = self._domain.abs
        return max(
            exact_sum(abs_(value, sqrt_context) for value in column)
            for column in zip(*self._rows)
        )

    def max_abs_row_sum_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> int | Decimal:
        """Largest row sum of absolute values."""
        check_not_none(sqrt_context, 'sqrt_context')
        abs_ = self._domain.abs
        return max(
            exact_sum(abs_(value, sqrt_context) for value in row)
            for row in self._rows
        )

    def frobenius_norm_pow2(self) -> int | Decimal:
        """Sum of squared absolute values of all entries (exact)."""
        return exact_sum(self._domain.abs_pow2(value) for value in self.elements())

    def frobenius_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> Decimal:
        """Approximate square root of frobenius_norm_pow2()."""
        check_not_none(sqrt_context, 'sqrt_context')
        return sqrt(self.frobenius_norm_pow2(), sqrt_context)

    def max_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> int | Decimal:
        """Largest absolute value of any entry."""
        check_not_none(sqrt_context, 'sqrt_context')
        abs_ = self._domain.abs
        return max(abs_(value, sqrt_context) for value in self.elements())

    # --- Operators ---

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        return NotImplemented

    def __neg__(self):
        return self.negate()
