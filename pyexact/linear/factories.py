"""
Zero and identity containers for any domain.
"""

from __future__ import annotations

from pyexact.core.protocols import ScalarDomain
from pyexact.linear.builders import MatrixBuilder, VectorBuilder
from pyexact.linear.matrix import Matrix
from pyexact.linear.vector import Vector
from pyexact.number.domains import INTEGER


def zero_vector(size: int, domain: ScalarDomain = INTEGER) -> Vector:
    """Vector of the given size with every element domain.zero."""
    builder = VectorBuilder(size, domain)
    return builder.put_all(builder.domain.zero).build()


def zero_matrix(row_size: int, column_size: int, domain: ScalarDomain = INTEGER) -> Matrix:
    """Matrix of the given shape with every element domain.zero."""
    builder = MatrixBuilder(row_size, column_size, domain)
    return builder.put_all(builder.domain.zero).build()


def identity_matrix(size: int, domain: ScalarDomain = INTEGER) -> Matrix:
    """Square matrix with domain.one on the diagonal and domain.zero elsewhere."""
    builder = MatrixBuilder(size, size, domain)
    for index in range(1, builder.row_size + 1):
        builder.put(index, index, builder.domain.one)
    return builder.nulls_to_element(builder.domain.zero).build()
