"""
The four scalar domains.

Each domain implements the ScalarDomain protocol and is used as a singleton:
INTEGER (int), DECIMAL (Decimal), INTEGER_COMPLEX (IntegerComplex) and
DECIMAL_COMPLEX (DecimalComplex). Vector and Matrix hold a reference to one
of these and route every scalar operation through it.
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Any

from pyexact.core.compute.precision import resolve_context
from pyexact.core.exceptions import InvalidArgumentError, ValidationError
from pyexact.core.validation import check_integer, check_not_none
from pyexact.number.complex import DecimalComplex, IntegerComplex
from pyexact.sqrt.context import DEFAULT_SQUARE_ROOT_CONTEXT, SquareRootContext


def _check_exponent(exponent) -> int:
    exponent = check_integer(exponent, 'exponent')
    if exponent < 0:
        raise InvalidArgumentError(f"exponent: expected >= 0 but actual {exponent}")
    return exponent


def _sign(difference) -> int:
    return (difference > 0) - (difference < 0)


class _Domain:
    """Shared behaviour; subclasses define the arithmetic."""

    name: str = ''
    exact: bool = True
    scalar_type: type = object

    def validate(self, value: Any, name: str) -> Any:
        check_not_none(value, name)
        if isinstance(value, bool) or not isinstance(value, self.scalar_type):
            raise ValidationError(
                f"{name}: expected {self.scalar_type.__name__} for domain {self.name} "
                f"but actual {type(value).__name__}"
            )
        return value

    def is_zero(self, a: Any) -> bool:
        return a == self.zero

    def __repr__(self) -> str:
        return f"<ScalarDomain {self.name}>"

    def __reduce__(self):
        # singletons survive pickling and copying
        return self.name.upper()


class IntegerDomain(_Domain):
    """Arbitrary-precision integers. Units are 1 and -1."""

    name = 'integer'
    exact = True
    scalar_type = int
    zero = 0
    one = 1

    def add(self, a: int, b: int, context: Context | None = None) -> int:
        return a + b

    def subtract(self, a: int, b: int, context: Context | None = None) -> int:
        return a - b

    def multiply(self, a: int, b: int, context: Context | None = None) -> int:
        return a * b

    def negate(self, a: int, context: Context | None = None) -> int:
        return -a

    def pow(self, a: int, exponent: int) -> int:
        return a ** _check_exponent(exponent)

    def conjugate(self, a: int) -> int:
        return a

    def abs(self, a: int, sqrt_context: SquareRootContext | None = None) -> int:
        return abs(a)

    def abs_pow2(self, a: int) -> int:
        return a * a

    def compare(self, a: int, b: int) -> int:
        return _sign(a - b)

    def is_unit(self, a: int) -> bool:
        return a in (1, -1)


class DecimalDomain(_Domain):
    """
    Arbitrary-precision decimals.

    Exact unless a decimal.Context is passed. Every non-zero value is a unit.
    """

    name = 'decimal'
    exact = False
    scalar_type = Decimal
    zero = Decimal(0)
    one = Decimal(1)

    def validate(self, value: Any, name: str) -> Any:
        super().validate(value, name)
        if not value.is_finite():
            raise ValidationError(f"{name}: expected a finite number but actual {value}")
        return value

    def add(self, a: Decimal, b: Decimal, context: Context | None = None) -> Decimal:
        return resolve_context(context).add(a, b)

    def subtract(self, a: Decimal, b: Decimal, context: Context | None = None) -> Decimal:
        return resolve_context(context).subtract(a, b)

    def multiply(self, a: Decimal, b: Decimal, context: Context | None = None) -> Decimal:
        return resolve_context(context).multiply(a, b)

    def negate(self, a: Decimal, context: Context | None = None) -> Decimal:
        return resolve_context(context).minus(a)

    def pow(self, a: Decimal, exponent: int) -> Decimal:
        exponent = _check_exponent(exponent)
        ctx = resolve_context(None)
        result = self.one
        for _ in range(exponent):
            result = ctx.multiply(result, a)
        return result

    def conjugate(self, a: Decimal) -> Decimal:
        return a

    def abs(self, a: Decimal, sqrt_context: SquareRootContext | None = None) -> Decimal:
        return a.copy_abs()

    def abs_pow2(self, a: Decimal) -> Decimal:
        return resolve_context(None).multiply(a, a)

    def compare(self, a: Decimal, b: Decimal) -> int:
        return int(a.compare(b))

    def is_unit(self, a: Decimal) -> bool:
        return a != 0


class IntegerComplexDomain(_Domain):
    """Gaussian integers. Units are 1, -1, i and -i."""

    name = 'integer_complex'
    exact = True
    scalar_type = IntegerComplex
    zero = IntegerComplex.ZERO
    one = IntegerComplex.ONE

    _UNITS = frozenset({
        IntegerComplex(1, 0),
        IntegerComplex(-1, 0),
        IntegerComplex(0, 1),
        IntegerComplex(0, -1),
    })

    def add(self, a, b, context: Context | None = None) -> IntegerComplex:
        return a.add(b)

    def subtract(self, a, b, context: Context | None = None) -> IntegerComplex:
        return a.subtract(b)

    def multiply(self, a, b, context: Context | None = None) -> IntegerComplex:
        return a.multiply(b)

    def negate(self, a, context: Context | None = None) -> IntegerComplex:
        return a.negate()

    def pow(self, a, exponent: int) -> IntegerComplex:
        return a.pow(exponent)

    def conjugate(self, a) -> IntegerComplex:
        return a.conjugate()

    def abs(
        self, a, sqrt_context: SquareRootContext | None = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> Decimal:
        check_not_none(sqrt_context, 'sqrt_context')
        return a.abs(sqrt_context)

    def abs_pow2(self, a) -> int:
        return a.abs_pow2()

    def compare(self, a, b) -> int:
        return _sign(a.real - b.real) or _sign(a.imaginary - b.imaginary)

    def is_unit(self, a) -> bool:
        return a in self._UNITS


class DecimalComplexDomain(_Domain):
    """Complex numbers with decimal parts. Every non-zero value is a unit."""

    name = 'decimal_complex'
    exact = False
    scalar_type = DecimalComplex
    zero = DecimalComplex.ZERO
    one = DecimalComplex.ONE

    def add(self, a, b, context: Context | None = None) -> DecimalComplex:
        return a.add(b, context)

    def subtract(self, a, b, context: Context | None = None) -> DecimalComplex:
        return a.subtract(b, context)

    def multiply(self, a, b, context: Context | None = None) -> DecimalComplex:
        return a.multiply(b, context)

    def negate(self, a, context: Context | None = None) -> DecimalComplex:
        return a.negate(context)

    def pow(self, a, exponent: int) -> DecimalComplex:
        return a.pow(exponent)

    def conjugate(self, a) -> DecimalComplex:
        return a.conjugate()

    def abs(
        self, a, sqrt_context: SquareRootContext | None = DEFAULT_SQUARE_ROOT_CONTEXT
    ) -> Decimal:
        check_not_none(sqrt_context, 'sqrt_context')
        return a.abs(sqrt_context)

    def abs_pow2(self, a) -> Decimal:
        return a.abs_pow2()

    def compare(self, a, b) -> int:
        return int(a.real.compare(b.real)) or int(a.imaginary.compare(b.imaginary))

    def is_unit(self, a) -> bool:
        return a.invertible()


INTEGER = IntegerDomain()
DECIMAL = DecimalDomain()
INTEGER_COMPLEX = IntegerComplexDomain()
DECIMAL_COMPLEX = DecimalComplexDomain()

ALL_DOMAINS = (INTEGER, DECIMAL, INTEGER_COMPLEX, DECIMAL_COMPLEX)
