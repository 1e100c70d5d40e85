"""
Exception hierarchy for PyExact.

All exceptions inherit from PyExactError to allow catching any
library-specific error. Shape and index problems are ValidationErrors
because they are caller mistakes detected at the call boundary.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Every message names the offending argument or operand
"""


class PyExactError(Exception):
    """Base exception for all PyExact errors."""
    pass


class ValidationError(PyExactError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class NullArgumentError(ValidationError):
    """
    A required argument is missing (None).

    Attributes:
        argument_name: Name of the missing argument
    """

    def __init__(self, argument_name: str):
        super().__init__(f"{argument_name}: must not be None")
        self.argument_name = argument_name


class InvalidArgumentError(ValidationError):
    """
    An argument is present but outside the domain of the operation.

    Raised e.g. for the square root of a negative number.
    """
    pass


class DimensionError(ValidationError):
    """
    Sizes or indices are incorrect or inconsistent.

    Base class for every size, index and shape problem.
    """
    pass


class InvalidDimensionError(DimensionError):
    """
    A declared size is not positive.

    Attributes:
        name: Name of the size argument ('size', 'row_size', 'column_size')
        actual: The rejected value
    """

    def __init__(self, message: str, name: str | None = None, actual: int | None = None):
        super().__init__(message)
        self.name = name
        self.actual = actual


class IndexOutOfRangeError(DimensionError):
    """
    An index lies outside [1, upper].

    Attributes:
        name: Name of the index argument
        upper: Largest valid index
        actual: The rejected index
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        upper: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.name = name
        self.upper = upper
        self.actual = actual


class ShapeMismatchError(DimensionError):
    """
    Operands have incompatible dimensions for the requested operation.

    Attributes:
        operand: Name of the offending operand ('summand', 'factor', ...)
        expected: Size required by the receiver
        actual: Size found on the operand
    """

    def __init__(
        self,
        message: str,
        operand: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.operand = operand
        self.expected = expected
        self.actual = actual


class SizeMismatchError(ShapeMismatchError):
    """Vectors of different sizes were combined."""
    pass


class RowSizeMismatchError(ShapeMismatchError):
    """Matrices with different row counts were combined element-wise."""
    pass


class ColumnSizeMismatchError(ShapeMismatchError):
    """Matrices with different column counts were combined element-wise."""
    pass


class DimensionMismatchError(ShapeMismatchError):
    """Inner dimensions of a product do not agree."""
    pass


class IncompleteContainerError(ValidationError):
    """
    A builder was asked to build while coordinates are still unset.

    Attributes:
        missing: Number of unset coordinates
    """

    def __init__(self, message: str, missing: int | None = None):
        super().__init__(message)
        self.missing = missing


class NumericalError(PyExactError):
    """
    Numerical computation failed.

    Base class for errors arising from the mathematical preconditions
    of an operation rather than from malformed arguments.
    """
    pass


class NotSquareError(NumericalError):
    """
    Matrix is not square.

    Never raised by trace() or determinant() directly; those return a
    failed Result carrying this error. Raised by Result.unwrap().

    Attributes:
        row_size: Row count of the offending matrix
        column_size: Column count of the offending matrix
    """

    def __init__(
        self,
        message: str,
        row_size: int | None = None,
        column_size: int | None = None,
    ):
        super().__init__(message)
        self.row_size = row_size
        self.column_size = column_size


class NotInvertibleError(NumericalError):
    """
    A scalar has no multiplicative inverse or no defined argument.

    Raised by invert() and argument() on complex zero.

    Attributes:
        value: The offending scalar
    """

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
