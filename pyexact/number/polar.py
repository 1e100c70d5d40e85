"""
Polar form of complex numbers.

Arguments, sines and cosines are transcendental, so they are evaluated with
sympy to the precision of a decimal.Context and rounded with that context.
Moduli come from the Newton square root like every other absolute value.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal
from typing import TYPE_CHECKING

import sympy

from pyexact.core.compute.precision import DECIMAL128
from pyexact.core.exceptions import NotInvertibleError, ValidationError
from pyexact.core.validation import check_not_none

if TYPE_CHECKING:
    from pyexact.number.complex import DecimalComplex

# Extra digits requested from sympy before rounding with the caller's context
_GUARD_DIGITS = 5


def _check_context(context) -> Context:
    check_not_none(context, 'context')
    if not isinstance(context, Context):
        raise ValidationError(
            f"context: expected decimal.Context but actual {type(context).__name__}"
        )
    return context


def _rational(value: int | Decimal) -> sympy.Rational:
    return sympy.Rational(*value.as_integer_ratio())


def _to_decimal(expression, context: Context) -> Decimal:
    approximation = expression.evalf(context.prec + _GUARD_DIGITS)
    return context.plus(Decimal(str(approximation)))


def argument(
    real: int | Decimal, imaginary: int | Decimal, context: Context = DECIMAL128
) -> Decimal:
    """
    Angle of real + imaginary*i in (-pi, pi], rounded with context.

    Raises:
        NotInvertibleError: If both parts are zero
    """
    context = _check_context(context)
    if real == 0 and imaginary == 0:
        raise NotInvertibleError("argument: undefined for zero", value=(real, imaginary))
    return _to_decimal(sympy.atan2(_rational(imaginary), _rational(real)), context)


@dataclass(frozen=True)
class PolarForm:
    """
    Complex number as radial * (cos(angular) + i*sin(angular)).

    Attributes:
        radial: Modulus, >= 0
        angular: Argument in radians
    """
    radial: Decimal
    angular: Decimal

    def __post_init__(self):
        for name in ('radial', 'angular'):
            value = getattr(self, name)
            check_not_none(value, name)
            if not isinstance(value, Decimal) or not value.is_finite():
                raise ValidationError(
                    f"{name}: expected a finite Decimal but actual {value!r}"
                )
        if self.radial < 0:
            raise ValidationError(f"radial: expected >= 0 but actual {self.radial}")

    def complex_number(self, context: Context = DECIMAL128) -> DecimalComplex:
        """Rectangular form, each part rounded with context."""
        from pyexact.number.complex import DecimalComplex

        context = _check_context(context)
        angle = _rational(self.angular)
        return DecimalComplex(
            context.multiply(self.radial, _to_decimal(sympy.cos(angle), context)),
            context.multiply(self.radial, _to_decimal(sympy.sin(angle), context)),
        )
