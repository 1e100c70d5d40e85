"""
SquareRootContext: configuration for approximate square roots.

Bundles the rounding precision used inside the Newton iteration, the
absolute tolerance that ends it, and an optional cap on the number of
iterations. Immutable and hashable; passed by value into every Euclidean
norm or distance and into complex absolute values.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass
from decimal import Decimal

from pyexact.core.exceptions import ValidationError
from pyexact.core.validation import check_integer, check_not_none

VALID_ROUNDINGS = (
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
)


@dataclass(frozen=True)
class SquareRootContext:
    """
    Precision, tolerance and iteration bound for square roots.

    Attributes
    ----------
    epsilon : Decimal
        Absolute tolerance: iteration stops once |x^2 - radicand| <= epsilon.
        Must lie in the open interval (0, 1).
    max_iterations : int or None
        Upper bound on Newton steps. None means iterate until the tolerance
        is met or rounding stops the iterates from decreasing.
    precision : int
        Significant digits for the rounded division inside each step.
        Default 34 (IEEE 754 decimal128).
    rounding : str
        One of the decimal.ROUND_* constants. Default ROUND_HALF_EVEN.
    """
    epsilon: Decimal = Decimal('1E-10')
    max_iterations: int | None = None
    precision: int = 34
    rounding: str = decimal.ROUND_HALF_EVEN

    def __post_init__(self):
        check_not_none(self.epsilon, 'epsilon')
        if not isinstance(self.epsilon, Decimal):
            raise ValidationError(
                f"epsilon: expected Decimal but actual {type(self.epsilon).__name__}"
            )
        if not Decimal(0) < self.epsilon < Decimal(1):
            raise ValidationError(f"epsilon: expected in (0, 1) but actual {self.epsilon}")

        if self.max_iterations is not None:
            max_iterations = check_integer(self.max_iterations, 'max_iterations')
            if max_iterations < 1:
                raise ValidationError(
                    f"max_iterations: expected > 0 but actual {max_iterations}"
                )

        precision = check_integer(self.precision, 'precision')
        if precision < 1:
            raise ValidationError(f"precision: expected > 0 but actual {precision}")

        if self.rounding not in VALID_ROUNDINGS:
            raise ValidationError(
                f"rounding: expected one of {VALID_ROUNDINGS} but actual {self.rounding!r}"
            )

    @property
    def math_context(self) -> decimal.Context:
        """Fresh decimal.Context with this precision and rounding."""
        return decimal.Context(prec=self.precision, rounding=self.rounding)

    @classmethod
    def from_decimal_context(
        cls,
        context: decimal.Context,
        *,
        epsilon: Decimal = Decimal('1E-10'),
        max_iterations: int | None = None,
    ) -> SquareRootContext:
        """Build a context that rounds like an existing decimal.Context."""
        check_not_none(context, 'context')
        return cls(
            epsilon=epsilon,
            max_iterations=max_iterations,
            precision=context.prec,
            rounding=context.rounding,
        )


DEFAULT_SQUARE_ROOT_CONTEXT = SquareRootContext()
