"""
Core infrastructure for PyExact.

Shared abstractions used by the number, sqrt and linear subpackages.

Key components:
    protocols: ScalarDomain protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Decimal contexts and tolerance tiers
"""

from pyexact.core.protocols import ScalarDomain
from pyexact.core.result import Result
from pyexact.core.exceptions import (
    PyExactError,
    ValidationError,
    NullArgumentError,
    InvalidArgumentError,
    DimensionError,
    InvalidDimensionError,
    IndexOutOfRangeError,
    ShapeMismatchError,
    SizeMismatchError,
    RowSizeMismatchError,
    ColumnSizeMismatchError,
    DimensionMismatchError,
    IncompleteContainerError,
    NumericalError,
    NotSquareError,
    NotInvertibleError,
)

__all__ = [
    # Protocols
    "ScalarDomain",
    # Result
    "Result",
    # Exceptions
    "PyExactError",
    "ValidationError",
    "NullArgumentError",
    "InvalidArgumentError",
    "DimensionError",
    "InvalidDimensionError",
    "IndexOutOfRangeError",
    "ShapeMismatchError",
    "SizeMismatchError",
    "RowSizeMismatchError",
    "ColumnSizeMismatchError",
    "DimensionMismatchError",
    "IncompleteContainerError",
    "NumericalError",
    "NotSquareError",
    "NotInvertibleError",
]
