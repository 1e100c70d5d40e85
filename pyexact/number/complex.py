"""
Complex scalars with exact parts.

IntegerComplex has arbitrary-precision integer parts (Gaussian integers);
DecimalComplex has decimal parts. Both are immutable, hashable and
compare structurally. Arithmetic is exact; DecimalComplex accepts an
optional decimal.Context to round each part.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Context, Decimal
from typing import ClassVar, TYPE_CHECKING

from pyexact.core.compute.precision import DECIMAL128, resolve_context
from pyexact.core.exceptions import InvalidArgumentError, NotInvertibleError, ValidationError
from pyexact.core.validation import check_integer, check_not_none
from pyexact.number.polar import PolarForm, argument as _argument
from pyexact.sqrt.calculator import sqrt
from pyexact.sqrt.context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext

if TYPE_CHECKING:
    from pyexact.linear.matrix import Matrix


def _check_int_part(value, name: str) -> None:
    check_not_none(value, name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name}: expected int but actual {type(value).__name__}")


def _check_decimal_part(value, name: str) -> None:
    check_not_none(value, name)
    if not isinstance(value, Decimal):
        raise ValidationError(f"{name}: expected Decimal but actual {type(value).__name__}")
    if not value.is_finite():
        raise ValidationError(f"{name}: expected a finite number but actual {value}")


@dataclass(frozen=True)
class IntegerComplex:
    """
    Complex number real + imaginary*i with int parts.

    Examples:
        >>> IntegerComplex(1, 2).multiply(IntegerComplex(3, -1))
        IntegerComplex(real=5, imaginary=5)
    """
    real: int
    imaginary: int

    ZERO: ClassVar[IntegerComplex]
    ONE: ClassVar[IntegerComplex]
    IMAGINARY: ClassVar[IntegerComplex]

    def __post_init__(self):
        _check_int_part(self.real, 'real')
        _check_int_part(self.imaginary, 'imaginary')

    def _check_operand(self, other, name: str) -> None:
        check_not_none(other, name)
        if not isinstance(other, IntegerComplex):
            raise ValidationError(
                f"{name}: expected IntegerComplex but actual {type(other).__name__}"
            )

    def add(self, summand: IntegerComplex) -> IntegerComplex:
        self._check_operand(summand, 'summand')
        return IntegerComplex(self.real + summand.real, self.imaginary + summand.imaginary)

    def subtract(self, subtrahend: IntegerComplex) -> IntegerComplex:
        self._check_operand(subtrahend, 'subtrahend')
        return IntegerComplex(
            self.real - subtrahend.real, self.imaginary - subtrahend.imaginary
        )

    def multiply(self, factor: IntegerComplex) -> IntegerComplex:
        self._check_operand(factor, 'factor')
        return IntegerComplex(
            self.real * factor.real - self.imaginary * factor.imaginary,
            self.real * factor.imaginary + self.imaginary * factor.real,
        )

    def negate(self) -> IntegerComplex:
        return IntegerComplex(-self.real, -self.imaginary)

    def pow(self, exponent: int) -> IntegerComplex:
        """Non-negative integer power by repeated squaring."""
        exponent = check_integer(exponent, 'exponent')
        if exponent < 0:
            raise InvalidArgumentError(f"exponent: expected >= 0 but actual {exponent}")
        result = IntegerComplex.ONE
        base = self
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent >>= 1
        return result

    def conjugate(self) -> IntegerComplex:
        return IntegerComplex(self.real, -self.imaginary)

    def abs_pow2(self) -> int:
        """Squared modulus real^2 + imaginary^2 (exact)."""
        return self.real * self.real + self.imaginary * self.imaginary

    def abs(self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT) -> Decimal:
        """Modulus as an approximate square root of abs_pow2()."""
        return sqrt(self.abs_pow2(), sqrt_context)

    def invertible(self) -> bool:
        """True unless this is zero (inverse taken in DecimalComplex)."""
        return self != IntegerComplex.ZERO

    def divide(self, divisor: IntegerComplex, context: Context = DECIMAL128) -> DecimalComplex:
        """
        Quotient as a DecimalComplex rounded with context.

        Gaussian integers are not closed under division, so the quotient
        leaves the integer domain.

        Raises:
            InvalidArgumentError: If divisor is zero
        """
        self._check_operand(divisor, 'divisor')
        return DecimalComplex.from_integer_complex(self).divide(
            DecimalComplex.from_integer_complex(divisor), context
        )

    def invert(self, context: Context = DECIMAL128) -> DecimalComplex:
        """1 / self as a DecimalComplex rounded with context."""
        return DecimalComplex.from_integer_complex(self).invert(context)

    def argument(self, context: Context = DECIMAL128) -> Decimal:
        """Angle in (-pi, pi]; raises NotInvertibleError for zero."""
        return _argument(self.real, self.imaginary, context)

    def polar_form(
        self,
        context: Context = DECIMAL128,
        sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT,
    ) -> PolarForm:
        return PolarForm(self.abs(sqrt_context), self.argument(context))

    def matrix(self) -> Matrix:
        """Real 2 x 2 representation [[real, -imaginary], [imaginary, real]]."""
        from pyexact.linear.matrix import Matrix
        from pyexact.number.domains import INTEGER

        return Matrix.from_array(
            [[self.real, -self.imaginary], [self.imaginary, self.real]], INTEGER
        )

    def __add__(self, other):
        if not isinstance(other, IntegerComplex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, IntegerComplex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, IntegerComplex):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.negate()


IntegerComplex.ZERO = IntegerComplex(0, 0)
IntegerComplex.ONE = IntegerComplex(1, 0)
IntegerComplex.IMAGINARY = IntegerComplex(0, 1)


@dataclass(frozen=True)
class DecimalComplex:
    """
    Complex number real + imaginary*i with Decimal parts.

    Without a context every operation is exact. Passing a decimal.Context
    rounds each resulting part with it.
    """
    real: Decimal
    imaginary: Decimal

    ZERO: ClassVar[DecimalComplex]
    ONE: ClassVar[DecimalComplex]
    IMAGINARY: ClassVar[DecimalComplex]

    def __post_init__(self):
        _check_decimal_part(self.real, 'real')
        _check_decimal_part(self.imaginary, 'imaginary')

    @classmethod
    def from_integer_complex(cls, value: IntegerComplex) -> DecimalComplex:
        """Lossless conversion from IntegerComplex."""
        check_not_none(value, 'value')
        if not isinstance(value, IntegerComplex):
            raise ValidationError(
                f"value: expected IntegerComplex but actual {type(value).__name__}"
            )
        return cls(Decimal(value.real), Decimal(value.imaginary))

    def _check_operand(self, other, name: str) -> None:
        check_not_none(other, name)
        if not isinstance(other, DecimalComplex):
            raise ValidationError(
                f"{name}: expected DecimalComplex but actual {type(other).__name__}"
            )

    def add(self, summand: DecimalComplex, context: Context | None = None) -> DecimalComplex:
        self._check_operand(summand, 'summand')
        ctx = resolve_context(context)
        return DecimalComplex(
            ctx.add(self.real, summand.real), ctx.add(self.imaginary, summand.imaginary)
        )

    def subtract(
        self, subtrahend: DecimalComplex, context: Context | None = None
    ) -> DecimalComplex:
        self._check_operand(subtrahend, 'subtrahend')
        ctx = resolve_context(context)
        return DecimalComplex(
            ctx.subtract(self.real, subtrahend.real),
            ctx.subtract(self.imaginary, subtrahend.imaginary),
        )

    def multiply(self, factor: DecimalComplex, context: Context | None = None) -> DecimalComplex:
        self._check_operand(factor, 'factor')
        ctx = resolve_context(context)
        real = ctx.subtract(
            ctx.multiply(self.real, factor.real), ctx.multiply(self.imaginary, factor.imaginary)
        )
        imaginary = ctx.add(
            ctx.multiply(self.real, factor.imaginary), ctx.multiply(self.imaginary, factor.real)
        )
        return DecimalComplex(real, imaginary)

    def divide(self, divisor: DecimalComplex, context: Context = DECIMAL128) -> DecimalComplex:
        """
        Quotient rounded with context (division is never exact in general).

        Raises:
            InvalidArgumentError: If divisor is zero
        """
        self._check_operand(divisor, 'divisor')
        check_not_none(context, 'context')
        if not divisor.invertible():
            raise InvalidArgumentError(f"divisor: expected to be invertible but actual {divisor}")
        denominator = divisor.abs_pow2()
        conjugated = self.multiply(divisor.conjugate())
        return DecimalComplex(
            context.divide(conjugated.real, denominator),
            context.divide(conjugated.imaginary, denominator),
        )

    def negate(self, context: Context | None = None) -> DecimalComplex:
        ctx = resolve_context(context)
        return DecimalComplex(ctx.minus(self.real), ctx.minus(self.imaginary))

    def pow(self, exponent: int) -> DecimalComplex:
        """Non-negative integer power by repeated squaring (exact)."""
        exponent = check_integer(exponent, 'exponent')
        if exponent < 0:
            raise InvalidArgumentError(f"exponent: expected >= 0 but actual {exponent}")
        result = DecimalComplex.ONE
        base = self
        while exponent:
            if exponent & 1:
                result = result.multiply(base)
            base = base.multiply(base)
            exponent >>= 1
        return result

    def conjugate(self) -> DecimalComplex:
        return DecimalComplex(self.real, self.imaginary.copy_negate())

    def abs_pow2(self) -> Decimal:
        """Squared modulus real^2 + imaginary^2 (exact)."""
        ctx = resolve_context(None)
        return ctx.add(
            ctx.multiply(self.real, self.real), ctx.multiply(self.imaginary, self.imaginary)
        )

    def abs(self, sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT) -> Decimal:
        """Modulus as an approximate square root of abs_pow2()."""
        return sqrt(self.abs_pow2(), sqrt_context)

    def invertible(self) -> bool:
        return not (self.real == 0 and self.imaginary == 0)

    def invert(self, context: Context = DECIMAL128) -> DecimalComplex:
        """
        Multiplicative inverse rounded with context.

        Raises:
            NotInvertibleError: If this is zero
        """
        check_not_none(context, 'context')
        if not self.invertible():
            raise NotInvertibleError(f"expected to be invertible but actual {self}", value=self)
        return DecimalComplex.ONE.divide(self, context)

    def argument(self, context: Context = DECIMAL128) -> Decimal:
        """Angle in (-pi, pi] rounded with context."""
        return _argument(self.real, self.imaginary, context)

    def polar_form(
        self,
        context: Context = DECIMAL128,
        sqrt_context: SquareRootContext = DEFAULT_SQUARE_ROOT_CONTEXT,
    ) -> PolarForm:
        """
        Modulus and argument.

        Args:
            context: Rounds the argument
            sqrt_context: Governs the modulus

        Raises:
            NotInvertibleError: If this is zero
        """
        return PolarForm(self.abs(sqrt_context), self.argument(context))

    def matrix(self) -> Matrix:
        """Real 2 x 2 representation [[real, -imaginary], [imaginary, real]]."""
        from pyexact.linear.matrix import Matrix
        from pyexact.number.domains import DECIMAL

        return Matrix.from_array(
            [[self.real, self.imaginary.copy_negate()], [self.imaginary, self.real]], DECIMAL
        )

    def __add__(self, other):
        if not isinstance(other, DecimalComplex):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, DecimalComplex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, DecimalComplex):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.negate()


DecimalComplex.ZERO = DecimalComplex(Decimal(0), Decimal(0))
DecimalComplex.ONE = DecimalComplex(Decimal(1), Decimal(0))
DecimalComplex.IMAGINARY = DecimalComplex(Decimal(0), Decimal(1))
