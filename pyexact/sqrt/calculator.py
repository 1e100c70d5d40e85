"""
Square roots of non-negative integers and decimals.

sqrt() approximates with Heron's (Newton's) method under a caller-supplied
SquareRootContext. The seed (r + 1) / 2 is never below the true root, so the
exact iterates decrease monotonically; once rounding stops them from
decreasing no further progress is possible and the iteration ends.

perfect_square() and sqrt_of_perfect_square() are exact integer helpers.
"""

from __future__ import annotations

import math
import warnings
from decimal import Decimal

from pyexact.core.compute.precision import EXACT_CONTEXT
from pyexact.core.exceptions import InvalidArgumentError, ValidationError
from pyexact.core.validation import check_integer, check_not_none
from pyexact.sqrt.context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext

_TWO = Decimal(2)


def sqrt(
    radicand: int | Decimal,
    sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT,
) -> Decimal:
    """
    Approximate the square root of a non-negative number.

    Parameters
    ----------
    radicand : int or Decimal
        Number whose square root is computed. Must be finite and >= 0.
    sqrt_context : SquareRootContext
        Precision, tolerance and iteration bound.

    Returns
    -------
    Decimal within sqrt_context.epsilon of the root in the sense
    |result^2 - radicand| <= epsilon, unless a RuntimeWarning was emitted.

    Raises
    ------
    NullArgumentError
        If radicand or sqrt_context is None.
    InvalidArgumentError
        If radicand < 0.
    """
    check_not_none(radicand, 'radicand')
    check_not_none(sqrt_context, 'sqrt_context')
    decimal_radicand = _to_decimal(radicand)
    if decimal_radicand < 0:
        raise InvalidArgumentError(f"radicand: expected >= 0 but actual {radicand}")
    if decimal_radicand == 0:
        return Decimal(0)
    return _herons_method(decimal_radicand, sqrt_context)


def perfect_square(integer: int) -> bool:
    """
    Check whether a non-negative integer is the square of an integer.

    Raises
    ------
    InvalidArgumentError
        If integer < 0.
    """
    integer = check_integer(integer, 'integer')
    if integer < 0:
        raise InvalidArgumentError(f"integer: expected >= 0 but actual {integer}")
    root = math.isqrt(integer)
    return root * root == integer


def sqrt_of_perfect_square(integer: int) -> int:
    """
    Exact square root of a perfect square.

    Raises
    ------
    InvalidArgumentError
        If integer < 0 or is not a perfect square.
    """
    if not perfect_square(integer):
        raise InvalidArgumentError(f"integer: expected perfect square but actual {integer}")
    return math.isqrt(integer)


def _to_decimal(radicand) -> Decimal:
    """Convert an int/Decimal radicand, rejecting everything else."""
    if isinstance(radicand, Decimal):
        if not radicand.is_finite():
            raise ValidationError(f"radicand: expected a finite number but actual {radicand}")
        return radicand
    if isinstance(radicand, bool) or not isinstance(radicand, int):
        raise ValidationError(
            f"radicand: expected int or Decimal but actual {type(radicand).__name__}"
        )
    return Decimal(radicand)


def _residual(candidate: Decimal, radicand: Decimal) -> Decimal:
    """Exact |candidate^2 - radicand|."""
    square = EXACT_CONTEXT.multiply(candidate, candidate)
    return EXACT_CONTEXT.subtract(square, radicand).copy_abs()


def _herons_method(radicand: Decimal, sqrt_context: SquareRootContext) -> Decimal:
    context = sqrt_context.math_context
    epsilon = sqrt_context.epsilon
    max_iterations = sqrt_context.max_iterations

    current = context.divide(context.add(radicand, Decimal(1)), _TWO)
    converged = _residual(current, radicand) <= epsilon
    iterations = 0
    stalled = False

    while not converged:
        if max_iterations is not None and iterations >= max_iterations:
            break
        quotient = context.divide(radicand, current)
        successor = context.divide(context.add(current, quotient), _TWO)
        iterations += 1
        if successor >= current:
            stalled = True
            break
        current = successor
        converged = _residual(current, radicand) <= epsilon

    if not converged:
        reason = 'rounding stalled' if stalled else 'max_iterations reached'
        warnings.warn(
            f"Square root of {radicand} did not reach epsilon={epsilon} "
            f"after {iterations} iterations ({reason}). "
            f"Increase precision or max_iterations.",
            RuntimeWarning,
            stacklevel=3,
        )

    return current
