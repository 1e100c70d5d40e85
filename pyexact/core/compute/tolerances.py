"""
Tolerance tiers for approximate comparison of decimal results.

Defines precision expectations for the different computation paths:
- Exact domains (integer, integer complex): no tolerance at all
- Square roots with the default context: bounded by its epsilon
- Decimal arithmetic rounded with a decimal.Context

Used by the test suite and by callers comparing Euclidean norms,
distances and rounded determinants.
"""

from dataclasses import dataclass
from decimal import Decimal

from pyexact.core.validation import check_not_none


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute tolerance specification for decimal comparison."""
    atol: Decimal
    name: str
    description: str


# Integer and integer-complex arithmetic never rounds
EXACT = ToleranceTier(
    atol=Decimal(0),
    name='exact',
    description='Exact arithmetic: results must be equal',
)

# Square roots computed with DEFAULT_SQUARE_ROOT_CONTEXT (epsilon 1E-10)
SQRT_DEFAULT = ToleranceTier(
    atol=Decimal('1E-9'),
    name='sqrt_default',
    description='Newton square root with the default context',
)

# Decimal arithmetic rounded to 34 significant digits (DECIMAL128)
DECIMAL_ROUNDED = ToleranceTier(
    atol=Decimal('1E-20'),
    name='decimal_rounded',
    description='Decimal arithmetic rounded to DECIMAL128 precision',
)


def within(actual, expected, tier: ToleranceTier) -> bool:
    """
    Check |actual - expected| <= tier.atol.

    Args:
        actual: int or Decimal
        expected: int or Decimal
        tier: Tolerance to apply

    Returns:
        True if the values agree within the tier's tolerance
    """
    check_not_none(actual, 'actual')
    check_not_none(expected, 'expected')
    check_not_none(tier, 'tier')
    return abs(Decimal(actual) - Decimal(expected)) <= tier.atol
