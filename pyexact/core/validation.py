"""
Input validation utilities for PyExact.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except operator.index on integer-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operand names included in all error messages
"""

import operator
from typing import Any

from pyexact.core.exceptions import (
    ColumnSizeMismatchError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    InvalidDimensionError,
    NullArgumentError,
    RowSizeMismatchError,
    SizeMismatchError,
    ValidationError,
)
from pyexact.core.protocols import ScalarDomain


def check_not_none(value: Any, name: str) -> Any:
    """
    Verify a required argument is present.

    Args:
        value: Argument to check
        name: Parameter name for error messages

    Returns:
        The value unchanged

    Raises:
        NullArgumentError: If value is None
    """
    if value is None:
        raise NullArgumentError(name)
    return value


def check_integer(value: Any, name: str) -> int:
    """
    Validate and convert an integer-like argument to int.

    Accepts int and anything implementing __index__ (numpy integers).
    Rejects bool, float and strings.

    Raises:
        NullArgumentError: If value is None
        ValidationError: If value is not integer-like
    """
    check_not_none(value, name)
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected an integer but actual bool {value!r}")
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer but actual {type(value).__name__} {value!r}"
        ) from e


def check_size(size: Any, name: str) -> int:
    """
    Verify a declared container size is positive.

    Args:
        size: Declared size
        name: Size name for error messages ('size', 'row_size', 'column_size')

    Returns:
        The size as int

    Raises:
        InvalidDimensionError: If size < 1
    """
    size = check_integer(size, name)
    if size < 1:
        raise InvalidDimensionError(
            f"expected {name} > 0 but actual {size}", name=name, actual=size
        )
    return size


def check_index(index: Any, upper: int, name: str) -> int:
    """
    Verify a 1-based index lies in [1, upper].

    Args:
        index: Index to check
        upper: Largest valid index
        name: Index name for error messages

    Returns:
        The index as int

    Raises:
        NullArgumentError: If index is None
        IndexOutOfRangeError: If index is outside [1, upper]
    """
    index = check_integer(index, name)
    if not 1 <= index <= upper:
        raise IndexOutOfRangeError(
            f"expected {name} in [1, {upper}] but actual {index}",
            name=name,
            upper=upper,
            actual=index,
        )
    return index


def check_same_domain(domain: Any, other_domain: Any, operand: str) -> None:
    """
    Verify an operand lives in the receiver's scalar domain.

    Raises:
        ValidationError: If the domains differ
    """
    if domain is not other_domain:
        raise ValidationError(
            f"{operand}: expected domain {domain.name} but actual {other_domain.name}"
        )


def check_equal_sizes(size: int, other_size: int, operand: str) -> None:
    """
    Verify two vectors have the same size.

    Raises:
        SizeMismatchError: If sizes differ
    """
    if size != other_size:
        raise SizeMismatchError(
            f"{operand}: expected equal sizes but actual {size} != {other_size}",
            operand=operand,
            expected=size,
            actual=other_size,
        )


def check_equal_row_sizes(row_size: int, other_row_size: int, operand: str) -> None:
    """
    Verify two matrices have the same number of rows.

    Raises:
        RowSizeMismatchError: If row counts differ
    """
    if row_size != other_row_size:
        raise RowSizeMismatchError(
            f"{operand}: expected equal row sizes but actual {row_size} != {other_row_size}",
            operand=operand,
            expected=row_size,
            actual=other_row_size,
        )


def check_equal_column_sizes(column_size: int, other_column_size: int, operand: str) -> None:
    """
    Verify two matrices have the same number of columns.

    Raises:
        ColumnSizeMismatchError: If column counts differ
    """
    if column_size != other_column_size:
        raise ColumnSizeMismatchError(
            f"{operand}: expected equal column sizes but actual "
            f"{column_size} != {other_column_size}",
            operand=operand,
            expected=column_size,
            actual=other_column_size,
        )


def check_inner_dimensions(
    column_size: int,
    other_size: int,
    operand: str,
    other_label: str,
) -> None:
    """
    Verify the inner dimensions of a product agree.

    Args:
        column_size: Column count of the left operand
        other_size: Row count (or size) of the right operand
        operand: Name of the right operand ('factor', 'vector')
        other_label: How the right size is named in the message
            ('factor.row_size', 'vector.size')

    Raises:
        DimensionMismatchError: If the sizes differ
    """
    if column_size != other_size:
        raise DimensionMismatchError(
            f"{operand}: expected column_size == {other_label} but actual "
            f"{column_size} != {other_size}",
            operand=operand,
            expected=column_size,
            actual=other_size,
        )


def check_domain(domain: Any, name: str = 'domain') -> ScalarDomain:
    """
    Verify an argument implements ScalarDomain.

    Raises:
        NullArgumentError: If domain is None
        ValidationError: If domain is not a ScalarDomain
    """
    check_not_none(domain, name)
    if not isinstance(domain, ScalarDomain):
        raise ValidationError(
            f"{name}: expected a ScalarDomain but actual {type(domain).__name__}"
        )
    return domain
