"""
Shared compute infrastructure for PyExact.

Submodules:
    precision: decimal contexts (exact and IEEE 754 decimal formats)
    tolerances: tolerance tiers for approximate decimal comparison
"""

from pyexact.core.compute.precision import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    EXACT_CONTEXT,
    resolve_context,
)
from pyexact.core.compute.tolerances import (
    DECIMAL_ROUNDED,
    EXACT,
    SQRT_DEFAULT,
    ToleranceTier,
    within,
)

__all__ = [
    # Precision
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "EXACT_CONTEXT",
    "resolve_context",
    # Tolerances
    "DECIMAL_ROUNDED",
    "EXACT",
    "SQRT_DEFAULT",
    "ToleranceTier",
    "within",
]
