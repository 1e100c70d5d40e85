"""
Decimal precision constants and utilities.

Python's ambient decimal context rounds every operation to 28 significant
digits. The decimal domains must add and multiply without any rounding, so
they run on EXACT_CONTEXT unless the caller passes a context explicitly.
EXACT_CONTEXT must never be used for division or roots: a non-terminating
quotient at MAX_PREC exhausts memory.
"""

import decimal
from decimal import Context

from pyexact.core.exceptions import ValidationError

# Unlimited precision and exponent range: add/subtract/multiply are exact
EXACT_CONTEXT: Context = Context(
    prec=decimal.MAX_PREC,
    rounding=decimal.ROUND_HALF_EVEN,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
)

# IEEE 754 decimal formats
DECIMAL32: Context = Context(prec=7, rounding=decimal.ROUND_HALF_EVEN)
DECIMAL64: Context = Context(prec=16, rounding=decimal.ROUND_HALF_EVEN)
DECIMAL128: Context = Context(prec=34, rounding=decimal.ROUND_HALF_EVEN)


def resolve_context(context: Context | None) -> Context:
    """Return context, or EXACT_CONTEXT when none was supplied."""
    if context is None:
        return EXACT_CONTEXT
    if not isinstance(context, Context):
        raise ValidationError(
            f"context: expected decimal.Context but actual {type(context).__name__}"
        )
    return context
