"""
pytest configuration and shared fixtures.
"""

from decimal import Decimal

import pytest
import numpy as np

from pyexact.linear import Matrix, Vector
from pyexact.number import DECIMAL, DECIMAL_COMPLEX, INTEGER_COMPLEX, DecimalComplex, IntegerComplex


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_matrix_2x2():
    """[[1, 2], [3, 4]]: determinant -2."""
    return Matrix.from_array([[1, 2], [3, 4]])


@pytest.fixture
def int_matrix_2x3():
    """Non-square integer matrix."""
    return Matrix.from_array([[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def decimal_vector():
    """(0.5, -1.25, 2) over DECIMAL."""
    return Vector.from_array([Decimal("0.5"), Decimal("-1.25"), Decimal("2")], DECIMAL)


@pytest.fixture
def gaussian_vector():
    """(1 + 2i, 3 - i) over INTEGER_COMPLEX."""
    return Vector.from_array([IntegerComplex(1, 2), IntegerComplex(3, -1)], INTEGER_COMPLEX)


@pytest.fixture
def decimal_complex_matrix():
    """[[1 + i, 0.5], [-i, 2]] over DECIMAL_COMPLEX."""
    def dc(real, imaginary):
        return DecimalComplex(Decimal(real), Decimal(imaginary))

    return Matrix.from_array(
        [[dc(1, 1), dc("0.5", 0)], [dc(0, -1), dc(2, 0)]], DECIMAL_COMPLEX
    )
