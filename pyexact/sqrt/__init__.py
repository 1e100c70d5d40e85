"""
Square roots with caller-controlled precision.

Public API:
    sqrt(radicand, sqrt_context)    - Newton approximation as Decimal
    perfect_square(n)               - exact perfect-square test
    sqrt_of_perfect_square(n)       - exact integer root
    SquareRootContext               - precision / tolerance / iteration bound
"""

from pyexact.sqrt.context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext
from pyexact.sqrt.calculator import perfect_square, sqrt, sqrt_of_perfect_square

__all__ = [
    "DEFAULT_SQUARE_ROOT_CONTEXT",
    "SquareRootContext",
    "perfect_square",
    "sqrt",
    "sqrt_of_perfect_square",
]
