"""
Scalar types and numeric domains.

Public API:
    IntegerComplex, DecimalComplex   - complex scalars with exact parts
    PolarForm                        - modulus and argument of a complex number
    INTEGER, DECIMAL,
    INTEGER_COMPLEX, DECIMAL_COMPLEX - ScalarDomain singletons
"""

from pyexact.number.complex import DecimalComplex, IntegerComplex
from pyexact.number.domains import (
    ALL_DOMAINS,
    DECIMAL,
    DECIMAL_COMPLEX,
    INTEGER,
    INTEGER_COMPLEX,
    DecimalComplexDomain,
    DecimalDomain,
    IntegerComplexDomain,
    IntegerDomain,
)
from pyexact.number.polar import PolarForm

__all__ = [
    "DecimalComplex",
    "IntegerComplex",
    "PolarForm",
    "ALL_DOMAINS",
    "DECIMAL",
    "DECIMAL_COMPLEX",
    "INTEGER",
    "INTEGER_COMPLEX",
    "DecimalComplexDomain",
    "DecimalDomain",
    "IntegerComplexDomain",
    "IntegerDomain",
]
