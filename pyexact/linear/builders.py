"""
Builders: the only way to assemble Vectors and Matrices.

A builder stages a partial index -> value mapping under fixed, validated
dimensions. Every put is bounds- and type-checked immediately; build()
refuses to produce a container while any coordinate is unset.

Builders are single-owner, single-thread objects. build() takes a snapshot,
so mutating a builder afterwards never affects containers already built.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pyexact.core.exceptions import IncompleteContainerError, IndexOutOfRangeError
from pyexact.core.protocols import ScalarDomain
from pyexact.core.validation import check_domain, check_index, check_size
from pyexact.number.domains import INTEGER

if TYPE_CHECKING:
    from pyexact.linear.matrix import Matrix
    from pyexact.linear.vector import Vector


class VectorBuilder:
    """
    Staging area for a Vector of fixed size.

    Usage:
        vector = (
            VectorBuilder(3, INTEGER)
            .put(1, 7)
            .put(3, -2)
            .nulls_to_element(0)
            .build()
        )
    """

    def __init__(self, size: int, domain: ScalarDomain = INTEGER):
        """
        Args:
            size: Number of elements, >= 1
            domain: Scalar domain of the elements

        Raises:
            InvalidDimensionError: If size < 1
        """
        self._size = check_size(size, 'size')
        self._domain = check_domain(domain)
        self._elements: dict[int, Any] = {}

    @property
    def size(self) -> int:
        return self._size

    @property
    def domain(self) -> ScalarDomain:
        return self._domain

    def element(self, index: int) -> Any | None:
        """Staged value at index, or None if unset."""
        index = check_index(index, self._size, 'index')
        return self._elements.get(index)

    def put(self, index: int, value: Any) -> VectorBuilder:
        """Set the element at a 1-based index; last write wins."""
        index = check_index(index, self._size, 'index')
        self._elements[index] = self._domain.validate(value, 'value')
        return self

    def append(self, value: Any) -> VectorBuilder:
        """
        Set the element at the next index after those already set.

        Raises:
            IndexOutOfRangeError: If the builder is already full
        """
        index = len(self._elements) + 1
        if index > self._size:
            raise IndexOutOfRangeError(
                f"expected index in [1, {self._size}] but actual {index}",
                name='index',
                upper=self._size,
                actual=index,
            )
        return self.put(index, value)

    def put_all(self, value: Any) -> VectorBuilder:
        """Set every element to value."""
        value = self._domain.validate(value, 'value')
        for index in range(1, self._size + 1):
            self._elements[index] = value
        return self

    def nulls_to_element(self, value: Any) -> VectorBuilder:
        """Set every still-unset element to value."""
        value = self._domain.validate(value, 'value')
        for index in range(1, self._size + 1):
            self._elements.setdefault(index, value)
        return self

    def build(self) -> Vector:
        """
        Snapshot the staged elements as an immutable Vector.

        Raises:
            IncompleteContainerError: If any index is unset
        """
        from pyexact.linear.vector import Vector

        missing = [i for i in range(1, self._size + 1) if i not in self._elements]
        if missing:
            raise IncompleteContainerError(
                f"expected all {self._size} elements to be set but {len(missing)} "
                f"are missing, first missing index {missing[0]}",
                missing=len(missing),
            )
        elements = tuple(self._elements[i] for i in range(1, self._size + 1))
        return Vector(_domain=self._domain, _elements=elements)

    def __repr__(self) -> str:
        return (
            f"VectorBuilder(size={self._size}, domain={self._domain.name}, "
            f"set={len(self._elements)})"
        )


class MatrixBuilder:
    """
    Staging area for a Matrix of fixed row and column size.

    Usage:
        identity = (
            MatrixBuilder(2, 2, INTEGER)
            .put(1, 1, 1)
            .put(2, 2, 1)
            .nulls_to_element(0)
            .build()
        )
    """

    def __init__(self, row_size: int, column_size: int, domain: ScalarDomain = INTEGER):
        """
        Args:
            row_size: Number of rows, >= 1
            column_size: Number of columns, >= 1
            domain: Scalar domain of the elements

        Raises:
            InvalidDimensionError: If row_size < 1 or column_size < 1
        """
        self._row_size = check_size(row_size, 'row_size')
        self._column_size = check_size(column_size, 'column_size')
        self._domain = check_domain(domain)
        self._cells: dict[tuple[int, int], Any] = {}

    @property
    def row_size(self) -> int:
        return self._row_size

    @property
    def column_size(self) -> int:
        return self._column_size

    @property
    def domain(self) -> ScalarDomain:
        return self._domain

    def _check_cell(self, row_index, column_index) -> tuple[int, int]:
        row_index = check_index(row_index, self._row_size, 'row_index')
        column_index = check_index(column_index, self._column_size, 'column_index')
        return row_index, column_index

    def element(self, row_index: int, column_index: int) -> Any | None:
        """Staged value at (row_index, column_index), or None if unset."""
        return self._cells.get(self._check_cell(row_index, column_index))

    def put(self, row_index: int, column_index: int, value: Any) -> MatrixBuilder:
        """Set the element at 1-based coordinates; last write wins."""
        cell = self._check_cell(row_index, column_index)
        self._cells[cell] = self._domain.validate(value, 'value')
        return self

    def put_all(self, value: Any) -> MatrixBuilder:
        """Set every element to value."""
        value = self._domain.validate(value, 'value')
        for cell in self._grid():
            self._cells[cell] = value
        return self

    def nulls_to_element(self, value: Any) -> MatrixBuilder:
        """Set every still-unset element to value."""
        value = self._domain.validate(value, 'value')
        for cell in self._grid():
            self._cells.setdefault(cell, value)
        return self

    def _grid(self):
        for row_index in range(1, self._row_size + 1):
            for column_index in range(1, self._column_size + 1):
                yield row_index, column_index

    def build(self) -> Matrix:
        """
        Snapshot the staged elements as an immutable Matrix.

        Raises:
            IncompleteContainerError: If any cell is unset
        """
        from pyexact.linear.matrix import Matrix

        missing = [cell for cell in self._grid() if cell not in self._cells]
        if missing:
            row_index, column_index = missing[0]
            raise IncompleteContainerError(
                f"expected all {self._row_size} x {self._column_size} elements to be set "
                f"but {len(missing)} are missing, first missing cell "
                f"({row_index}, {column_index})",
                missing=len(missing),
            )
        rows = tuple(
            tuple(self._cells[(r, c)] for c in range(1, self._column_size + 1))
            for r in range(1, self._row_size + 1)
        )
        return Matrix(_domain=self._domain, _rows=rows)

    def __repr__(self) -> str:
        return (
            f"MatrixBuilder(row_size={self._row_size}, column_size={self._column_size}, "
            f"domain={self._domain.name}, set={len(self._cells)})"
        )
