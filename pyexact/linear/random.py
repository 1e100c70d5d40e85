"""
Random vectors and matrices for tests and experiments.

Every function takes a caller-owned numpy Generator, so results are
reproducible from a seed and no module-level random state exists:

    rng = np.random.default_rng(42)
    matrix = random_invertible_matrix(rng, 4, domain=INTEGER_COMPLEX)

Scalars are drawn uniformly from the integers in [-bound, bound]. Decimal
parts are drawn the same way on a grid of 10**-scale, i.e. with `scale`
digits after the point.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import numpy as np

from pyexact.core.exceptions import InvalidArgumentError, ValidationError
from pyexact.core.protocols import ScalarDomain
from pyexact.core.validation import check_integer, check_not_none
from pyexact.linear.builders import MatrixBuilder, VectorBuilder
from pyexact.linear.matrix import Matrix
from pyexact.linear.vector import Vector
from pyexact.number.complex import DecimalComplex, IntegerComplex
from pyexact.number.domains import INTEGER

# rng.integers draws int64 values
_INT64_MAX = np.iinfo(np.int64).max


def _check_rng(rng) -> np.random.Generator:
    check_not_none(rng, 'rng')
    if not isinstance(rng, np.random.Generator):
        raise ValidationError(
            f"rng: expected numpy.random.Generator but actual {type(rng).__name__}"
        )
    return rng


def _check_bound(bound, scale) -> tuple[int, int]:
    bound = check_integer(bound, 'bound')
    if bound < 1:
        raise InvalidArgumentError(f"bound: expected >= 1 but actual {bound}")
    scale = check_integer(scale, 'scale')
    if scale < 0:
        raise InvalidArgumentError(f"scale: expected >= 0 but actual {scale}")
    if bound * 10 ** scale > _INT64_MAX:
        raise InvalidArgumentError(
            f"bound: expected bound * 10**scale <= {_INT64_MAX} but actual "
            f"{bound} * 10**{scale}"
        )
    return bound, scale


def _random_int(rng: np.random.Generator, bound: int) -> int:
    return int(rng.integers(-bound, bound, endpoint=True))


def _random_decimal(rng: np.random.Generator, bound: int, scale: int) -> Decimal:
    limit = bound * 10 ** scale
    return Decimal(_random_int(rng, limit)).scaleb(-scale)


_GENERATORS: dict[str, Callable[[np.random.Generator, int, int], Any]] = {
    'integer': lambda rng, bound, scale: _random_int(rng, bound),
    'decimal': _random_decimal,
    'integer_complex': lambda rng, bound, scale: IntegerComplex(
        _random_int(rng, bound), _random_int(rng, bound)
    ),
    'decimal_complex': lambda rng, bound, scale: DecimalComplex(
        _random_decimal(rng, bound, scale), _random_decimal(rng, bound, scale)
    ),
}


def _scalar_source(rng, domain, bound, scale) -> Callable[[], Any]:
    rng = _check_rng(rng)
    check_not_none(domain, 'domain')
    if not isinstance(domain, ScalarDomain) or domain.name not in _GENERATORS:
        raise ValidationError(
            f"domain: expected one of {sorted(_GENERATORS)} but actual {domain!r}"
        )
    bound, scale = _check_bound(bound, scale)
    generate = _GENERATORS[domain.name]
    return lambda: generate(rng, bound, scale)


def random_scalar(
    rng: np.random.Generator,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Any:
    """
    Draw one scalar of the domain.

    Args:
        rng: Caller-owned generator
        domain: Domain of the result
        bound: Integer parts lie in [-bound, bound], bound >= 1
        scale: Digits after the decimal point for decimal domains

    Raises:
        InvalidArgumentError: If bound < 1 or scale < 0
    """
    return _scalar_source(rng, domain, bound, scale)()


def random_vector(
    rng: np.random.Generator,
    size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Vector:
    """Vector with independently drawn elements."""
    source = _scalar_source(rng, domain, bound, scale)
    builder = VectorBuilder(size, domain)
    for index in range(1, builder.size + 1):
        builder.put(index, source())
    return builder.build()


def random_matrix(
    rng: np.random.Generator,
    row_size: int,
    column_size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Matrix:
    """Matrix with independently drawn elements."""
    source = _scalar_source(rng, domain, bound, scale)
    builder = MatrixBuilder(row_size, column_size, domain)
    for row_index in range(1, builder.row_size + 1):
        for column_index in range(1, builder.column_size + 1):
            builder.put(row_index, column_index, source())
    return builder.build()


def _fill(builder: MatrixBuilder, keep, value) -> Matrix:
    size = builder.row_size
    for row_index in range(1, size + 1):
        for column_index in range(1, size + 1):
            if keep(row_index, column_index):
                builder.put(row_index, column_index, value(row_index, column_index))
    return builder.nulls_to_element(builder.domain.zero).build()


def random_upper_triangular_matrix(
    rng: np.random.Generator,
    size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Matrix:
    """Square matrix with zeros below the diagonal."""
    source = _scalar_source(rng, domain, bound, scale)
    return _fill(MatrixBuilder(size, size, domain), lambda i, j: i <= j, lambda i, j: source())


def random_lower_triangular_matrix(
    rng: np.random.Generator,
    size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Matrix:
    """Square matrix with zeros above the diagonal."""
    source = _scalar_source(rng, domain, bound, scale)
    return _fill(MatrixBuilder(size, size, domain), lambda i, j: i >= j, lambda i, j: source())


def random_triangular_matrix(
    rng: np.random.Generator,
    size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Matrix:
    """Upper or lower triangular, chosen by rng with equal probability."""
    rng = _check_rng(rng)
    if rng.integers(2):
        return random_upper_triangular_matrix(rng, size, domain, bound, scale)
    return random_lower_triangular_matrix(rng, size, domain, bound, scale)


def random_diagonal_matrix(
    rng: np.random.Generator,
    size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Matrix:
    """Square matrix with zeros off the diagonal."""
    source = _scalar_source(rng, domain, bound, scale)
    return _fill(MatrixBuilder(size, size, domain), lambda i, j: i == j, lambda i, j: source())


def random_invertible_matrix(
    rng: np.random.Generator,
    size: int,
    domain: ScalarDomain = INTEGER,
    bound: int = 10,
    scale: int = 2,
) -> Matrix:
    """
    Square matrix with determinant exactly one.

    Built as L x U where L is unit lower triangular and U is unit upper
    triangular, so the result is invertible in every domain, including
    the integers and the Gaussian integers.
    """
    source = _scalar_source(rng, domain, bound, scale)
    one = domain.one

    def unit_triangular(keep) -> Matrix:
        return _fill(
            MatrixBuilder(size, size, domain),
            keep,
            lambda i, j: one if i == j else source(),
        )

    lower = unit_triangular(lambda i, j: i >= j)
    upper = unit_triangular(lambda i, j: i <= j)
    return lower.multiply(upper)
