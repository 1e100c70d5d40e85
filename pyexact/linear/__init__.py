"""
Exact vectors and matrices.

Public API:
    Vector, Matrix                  - immutable 1-indexed containers
    VectorBuilder, MatrixBuilder    - staged construction
    zero_vector, zero_matrix,
    identity_matrix                 - factory helpers

Random fixtures live in pyexact.linear.random.
"""

from pyexact.linear.builders import MatrixBuilder, VectorBuilder
from pyexact.linear.vector import Vector
from pyexact.linear.matrix import Matrix
from pyexact.linear.factories import identity_matrix, zero_matrix, zero_vector

__all__ = [
    "Matrix",
    "MatrixBuilder",
    "Vector",
    "VectorBuilder",
    "identity_matrix",
    "zero_matrix",
    "zero_vector",
]
