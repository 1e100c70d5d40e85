"""
PyExact: exact linear algebra over integers, decimals and complex numbers.

Immutable vectors and matrices whose arithmetic never rounds unless a
decimal.Context asks for it. Square roots (Euclidean norms, complex
moduli) are the only approximations and are controlled by a
SquareRootContext.

Submodules:
    core: Result envelope, exceptions, validation, decimal contexts
    number: complex scalars and the four scalar domains
    sqrt: square roots with configurable precision
    linear: Vector, Matrix, builders, factories, random fixtures
"""

__version__ = "0.1.0"

from pyexact.core import Result
from pyexact.number import (
    DECIMAL,
    DECIMAL_COMPLEX,
    INTEGER,
    INTEGER_COMPLEX,
    DecimalComplex,
    IntegerComplex,
    PolarForm,
)
from pyexact.sqrt import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext, sqrt
from pyexact.linear import (
    Matrix,
    MatrixBuilder,
    Vector,
    VectorBuilder,
    identity_matrix,
    zero_matrix,
    zero_vector,
)

__all__ = [
    "__version__",
    "Result",
    # Domains and scalars
    "DECIMAL",
    "DECIMAL_COMPLEX",
    "INTEGER",
    "INTEGER_COMPLEX",
    "DecimalComplex",
    "IntegerComplex",
    "PolarForm",
    # Square roots
    "DEFAULT_SQUARE_ROOT_CONTEXT",
    "SquareRootContext",
    "sqrt",
    # Linear algebra
    "Matrix",
    "MatrixBuilder",
    "Vector",
    "VectorBuilder",
    "identity_matrix",
    "zero_matrix",
    "zero_vector",
]
