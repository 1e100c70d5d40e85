"""
Shared helpers for the linear algebra containers.
"""

from __future__ import annotations

from decimal import Decimal
from functools import reduce
from typing import Any, Iterable

import numpy as np

from pyexact.core.compute.precision import EXACT_CONTEXT
from pyexact.core.exceptions import DimensionError, NullArgumentError, ValidationError


def exact_sum(values: Iterable[int | Decimal]) -> int | Decimal:
    """
    Sum norm contributions without rounding.

    The builtin sum() would round Decimals with the ambient 28-digit
    context, so decimal contributions are added with EXACT_CONTEXT.
    """
    values = list(values)
    if all(isinstance(v, int) for v in values):
        return sum(values)
    return reduce(EXACT_CONTEXT.add, (Decimal(v) for v in values), Decimal(0))


def as_object_array(values: Any, ndim: int, name: str) -> np.ndarray:
    """
    Convert array-like input to a numpy object array of the given rank.

    numpy integers become Python ints; everything else is passed through
    unchanged for the domain to validate.

    Raises:
        ValidationError: If the input cannot be converted
        DimensionError: If the result does not have ndim dimensions
    """
    if values is None:
        raise NullArgumentError(name)
    try:
        array = np.asarray(values, dtype=object)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )

    converted = np.empty(array.shape, dtype=object)
    for position, value in np.ndenumerate(array):
        converted[position] = int(value) if isinstance(value, np.integer) else value
    return converted
