"""
Vector: immutable 1-indexed sequence of scalars of one domain.

Every operation returns a new Vector or a scalar; nothing mutates. Operands
must share the receiver's domain and size. Norm results are int for the
integer domain and Decimal for every other domain.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from pyexact.core.protocols import ScalarDomain
from pyexact.core.exceptions import ValidationError
from pyexact.core.validation import (
    check_domain,
    check_equal_sizes,
    check_index,
    check_not_none,
    check_same_domain,
    check_size,
)
from pyexact.linear._common import as_object_array, exact_sum
from pyexact.linear.builders import MatrixBuilder, VectorBuilder
from pyexact.number.domains import INTEGER
from pyexact.sqrt.calculator import sqrt
from pyexact.sqrt.context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext

if TYPE_CHECKING:
    from pyexact.linear.matrix import Matrix


@dataclass(frozen=True)
class Vector:
    """
    Immutable vector over a ScalarDomain.

    Construction:
        Vector.builder(size, domain).put(...).build()
        Vector.from_array([1, 2, 3], domain=INTEGER)

    Equality and hashing are structural: two vectors are equal iff they
    have the same domain and the same element at every index.

    Direct construction is checked as strictly as build(): the domain must
    be a ScalarDomain, there must be at least one element and every
    element must belong to the domain.
    """
    _domain: ScalarDomain
    _elements: tuple[Any, ...]

    def __post_init__(self):
        check_domain(self._domain)
        if not isinstance(self._elements, tuple):
            raise ValidationError(
                f"elements: expected tuple but actual {type(self._elements).__name__}"
            )
        check_size(len(self._elements), 'size')
        for index, value in enumerate(self._elements, start=1):
            self._domain.validate(value, f'element {index}')

    @staticmethod
    def builder(size: int, domain: ScalarDomain = INTEGER) -> VectorBuilder:
        """Start building a Vector of the given size."""
        return VectorBuilder(size, domain)

    @classmethod
    def from_array(cls, values: ArrayLike, domain: ScalarDomain = INTEGER) -> Vector:
        """
        Build a Vector from any 1D array-like (list, tuple, numpy array).

        Elements are validated by the domain; no type coercion happens
        beyond numpy integer -> int.
        """
        array = as_object_array(values, 1, 'values')
        builder = VectorBuilder(array.shape[0], domain)
        for index, value in enumerate(array, start=1):
            builder.put(index, value)
        return builder.build()

    # --- Accessors ---

    @property
    def domain(self) -> ScalarDomain:
        return self._domain

    @property
    def size(self) -> int:
        return len(self._elements)

    def element(self, index: int) -> Any:
        """Element at a 1-based index."""
        index = check_index(index, self.size, 'index')
        return self._elements[index - 1]

    def elements(self) -> tuple[Any, ...]:
        return self._elements

    def indexes(self) -> range:
        return range(1, self.size + 1)

    def entries(self) -> Iterator[tuple[int, Any]]:
        """(index, element) pairs in index order."""
        return enumerate(self._elements, start=1)

    def to_array(self) -> np.ndarray:
        """Elements as a numpy object array (scalars stay exact)."""
        array = np.empty(self.size, dtype=object)
        array[:] = list(self._elements)
        return array

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._elements)

    # --- Validation ---

    def _check_operand(self, other: Vector, name: str) -> None:
        check_not_none(other, name)
        if not isinstance(other, Vector):
            raise ValidationError(f"{name}: expected Vector but actual {type(other).__name__}")
        check_same_domain(self._domain, other.domain, name)
        check_equal_sizes(self.size, other.size, name)

    def _new(self, elements) -> Vector:
        builder = VectorBuilder(self.size, self._domain)
        for index, element in enumerate(elements, start=1):
            builder.put(index, element)
        return builder.build()

    # --- Arithmetic ---

    def add(self, summand: Vector, context: Context | None = None) -> Vector:
        """Element-wise sum."""
        self._check_operand(summand, 'summand')
        add = self._domain.add
        return self._new(add(a, b, context) for a, b in zip(self._elements, summand))

    def subtract(self, subtrahend: Vector, context: Context | None = None) -> Vector:
        """Element-wise difference."""
        self._check_operand(subtrahend, 'subtrahend')
        subtract = self._domain.subtract
        return self._new(subtract(a, b, context) for a, b in zip(self._elements, subtrahend))

    def scalar_multiply(self, scalar: Any, context: Context | None = None) -> Vector:
        """Multiply every element by scalar."""
        scalar = self._domain.validate(scalar, 'scalar')
        multiply = self._domain.multiply
        return self._new(multiply(scalar, a, context) for a in self._elements)

    def negate(self, context: Context | None = None) -> Vector:
        """Equivalent to scalar_multiply(-1)."""
        minus_one = self._domain.negate(self._domain.one)
        return self.scalar_multiply(minus_one, context)

    def dot_product(self, other: Vector, context: Context | None = None) -> Any:
        """
        Sum of element-wise products.

        For complex domains this is the bilinear form: no element is
        conjugated.
        """
        self._check_operand(other, 'other')
        domain = self._domain
        result = domain.zero
        for a, b in zip(self._elements, other):
            result = domain.add(result, domain.multiply(a, b, context), context)
        return result

    def orthogonal_to(self, other: Vector) -> bool:
        """True if the (bilinear) dot product with other is zero."""
        return self._domain.is_zero(self.dot_product(other))

    def dyadic_product(self, other: Vector, context: Context | None = None) -> Matrix:
        """
        Outer product: Matrix with element (i, j) = self[i] * other[j].

        Sizes may differ; the result is self.size x other.size.
        """
        check_not_none(other, 'other')
        if not isinstance(other, Vector):
            raise ValidationError(f"other: expected Vector but actual {type(other).__name__}")
        check_same_domain(self._domain, other.domain, 'other')
        builder = MatrixBuilder(self.size, other.size, self._domain)
        for i, a in self.entries():
            for j, b in other.entries():
                builder.put(i, j, self._domain.multiply(a, b, context))
        return builder.build()

    # --- Norms ---

    def taxicab_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> int | Decimal:
        """
        Sum of absolute values.

        sqrt_context only matters for complex domains, whose absolute
        values are square roots.
        """
        check_not_none(sqrt_context, 'sqrt_context')
        return exact_sum(self._domain.abs(a, sqrt_context) for a in self._elements)

    def euclidean_norm_pow2(self) -> int | Decimal:
        """Sum of squared absolute values (exact, no rounding)."""
        return exact_sum(self._domain.abs_pow2(a) for a in self._elements)

    def euclidean_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> Decimal:
        """Approximate square root of euclidean_norm_pow2()."""
        check_not_none(sqrt_context, 'sqrt_context')
        return sqrt(self.euclidean_norm_pow2(), sqrt_context)

    def max_norm(
        self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> int | Decimal:
        """Largest absolute value of any element."""
        check_not_none(sqrt_context, 'sqrt_context')
        return max(self._domain.abs(a, sqrt_context) for a in self._elements)

    # --- Distances ---

    def taxicab_distance(
        self,
        other: Vector,
        context: Context | None = None,
        sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT,
    ) -> int | Decimal:
        """taxicab_norm of self - other."""
        self._check_operand(other, 'other')
        return self.subtract(other, context).taxicab_norm(sqrt_context)

    def euclidean_distance_pow2(self, other: Vector) -> int | Decimal:
        """euclidean_norm_pow2 of self - other (exact)."""
        self._check_operand(other, 'other')
        return self.subtract(other).euclidean_norm_pow2()

    def euclidean_distance(
        self,
        other: Vector,
        sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT,
    ) -> Decimal:
        """euclidean_norm of self - other."""
        self._check_operand(other, 'other')
        check_not_none(sqrt_context, 'sqrt_context')
        return sqrt(self.euclidean_distance_pow2(other), sqrt_context)

    def max_distance(
        self,
        other: Vector,
        context: Context | None = None,
        sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT,
    ) -> int | Decimal:
        """max_norm of self - other."""
        self._check_operand(other, 'other')
        return self.subtract(other, context).max_norm(sqrt_context)

    # --- Operators ---

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()
