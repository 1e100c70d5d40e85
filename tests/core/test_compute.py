"""
Tests for decimal contexts and tolerance tiers.
"""

import decimal
from decimal import Decimal

import pytest

from pyexact.core.compute import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    DECIMAL_ROUNDED,
    EXACT,
    EXACT_CONTEXT,
    SQRT_DEFAULT,
    resolve_context,
    within,
)
from pyexact.core.exceptions import NullArgumentError, ValidationError


class TestPrecision:

    def test_ieee_precisions(self):
        assert DECIMAL32.prec == 7
        assert DECIMAL64.prec == 16
        assert DECIMAL128.prec == 34

    def test_exact_context_does_not_round(self):
        """The ambient 28-digit context would round this product."""
        n = 1234567890123456789012345678
        a = Decimal(n).scaleb(-18)
        product = EXACT_CONTEXT.multiply(a, a)
        assert int(product.scaleb(36, EXACT_CONTEXT)) == n * n
        assert len(product.as_tuple().digits) > 28

    def test_resolve_none_is_exact(self):
        assert resolve_context(None) is EXACT_CONTEXT

    def test_resolve_passes_context_through(self):
        assert resolve_context(DECIMAL64) is DECIMAL64

    def test_resolve_rejects_other_types(self):
        with pytest.raises(ValidationError, match="expected decimal.Context"):
            resolve_context(34)

    def test_rounding_mode(self):
        assert DECIMAL128.rounding == decimal.ROUND_HALF_EVEN


class TestTolerances:

    def test_exact_requires_equality(self):
        assert within(5, 5, EXACT)
        assert not within(Decimal("5.0000000001"), 5, EXACT)

    def test_sqrt_default(self):
        assert within(Decimal("1.4142135623"), Decimal("1.41421356237"), SQRT_DEFAULT)
        assert not within(Decimal("1.414"), Decimal("1.41421356237"), SQRT_DEFAULT)

    def test_decimal_rounded(self):
        assert within(Decimal("0.1") + Decimal("1E-25"), Decimal("0.1"), DECIMAL_ROUNDED)

    def test_tiers_ordered(self):
        assert EXACT.atol < DECIMAL_ROUNDED.atol < SQRT_DEFAULT.atol

    def test_none_rejected(self):
        with pytest.raises(NullArgumentError, match="actual"):
            within(None, 1, EXACT)
