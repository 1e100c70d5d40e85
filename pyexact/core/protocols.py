"""
Core protocols for PyExact.

These define structural interfaces that the numeric domains must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing): Vector
and Matrix are written once against ScalarDomain and never inspect which
concrete domain they hold.

Design Principles:
    - Minimal contracts: only what the container algorithms need
    - Exact by default: add/subtract/multiply never round unless a
      decimal.Context is passed explicitly
    - No silent coercion: validate() rejects values of the wrong type
"""

from __future__ import annotations

from decimal import Context
from typing import Protocol, Any, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:
    from pyexact.sqrt.context import SquareRootContext


@runtime_checkable
class ScalarDomain(Protocol):
    """
    Arithmetic capability set for one kind of scalar.

    Implementations: INTEGER, DECIMAL, INTEGER_COMPLEX, DECIMAL_COMPLEX
    (see pyexact.number.domains).

    The optional context argument of the arithmetic methods is a
    decimal.Context. Decimal domains round with it; integer domains are
    always exact and ignore it.
    """

    @property
    def name(self) -> str:
        """Domain identifier, e.g. 'integer' or 'decimal_complex'."""
        ...

    @property
    def zero(self) -> Any:
        """Additive identity."""
        ...

    @property
    def one(self) -> Any:
        """Multiplicative identity."""
        ...

    @property
    def exact(self) -> bool:
        """True if every operation of the domain is free of rounding."""
        ...

    def validate(self, value: Any, name: str) -> Any:
        """
        Check that value is a scalar of this domain.

        Raises:
            NullArgumentError: If value is None
            ValidationError: If value has the wrong type
        """
        ...

    def add(self, a: Any, b: Any, context: Context | None = None) -> Any:
        ...

    def subtract(self, a: Any, b: Any, context: Context | None = None) -> Any:
        ...

    def multiply(self, a: Any, b: Any, context: Context | None = None) -> Any:
        ...

    def negate(self, a: Any, context: Context | None = None) -> Any:
        ...

    def pow(self, a: Any, exponent: int) -> Any:
        ...

    def conjugate(self, a: Any) -> Any:
        ...

    def abs(self, a: Any, sqrt_context: SquareRootContext | None = None) -> Any:
        """
        Absolute value.

        Real domains return the exact absolute value. Complex domains return
        the decimal square root of abs_pow2(a), computed with sqrt_context.
        """
        ...

    def abs_pow2(self, a: Any) -> Any:
        """Exact squared modulus."""
        ...

    def compare(self, a: Any, b: Any) -> int:
        """Return -1, 0 or 1; complex domains order by real then imaginary part."""
        ...

    def is_zero(self, a: Any) -> bool:
        ...

    def is_unit(self, a: Any) -> bool:
        """True if a has a multiplicative inverse inside the domain."""
        ...
