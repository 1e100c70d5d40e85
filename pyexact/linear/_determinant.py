"""
Determinant algorithms for square matrices.

Rows are 0-based tuples here; callers guarantee the matrix is square.

Dispatch:
    triangular  - product of the diagonal
    size 1      - the sole element
    size 2      - ad - bc
    size 3      - rule of Sarrus (six terms)
    size >= 4   - Leibniz expansion over all n! permutations

The Leibniz expansion is factorial-time and only practical for small
matrices; no elimination-based algorithm is used because exact domains such
as the integers have no division.
"""

from __future__ import annotations

from decimal import Context
from itertools import permutations
from typing import Any, Sequence

from pyexact.core.protocols import ScalarDomain

Rows = Sequence[Sequence[Any]]


def _product(values, domain: ScalarDomain, context: Context | None) -> Any:
    result = domain.one
    for value in values:
        result = domain.multiply(result, value, context)
    return result


def diagonal_product(rows: Rows, domain: ScalarDomain, context: Context | None = None) -> Any:
    """Product of the diagonal entries."""
    return _product((rows[i][i] for i in range(len(rows))), domain, context)


def closed_form_2x2(rows: Rows, domain: ScalarDomain, context: Context | None = None) -> Any:
    """a11*a22 - a12*a21."""
    (a, b), (c, d) = rows
    return domain.subtract(
        domain.multiply(a, d, context), domain.multiply(b, c, context), context
    )


def rule_of_sarrus(rows: Rows, domain: ScalarDomain, context: Context | None = None) -> Any:
    """Six-term rule for 3x3 matrices."""
    m = rows
    positive = (
        (m[0][0], m[1][1], m[2][2]),
        (m[0][1], m[1][2], m[2][0]),
        (m[0][2], m[1][0], m[2][1]),
    )
    negative = (
        (m[2][0], m[1][1], m[0][2]),
        (m[2][1], m[1][2], m[0][0]),
        (m[2][2], m[1][0], m[0][1]),
    )
    result = domain.zero
    for term in positive:
        result = domain.add(result, _product(term, domain, context), context)
    for term in negative:
        result = domain.subtract(result, _product(term, domain, context), context)
    return result


def inversions(permutation: Sequence[int]) -> int:
    """Number of pairs i < j with permutation[i] > permutation[j]."""
    count = 0
    size = len(permutation)
    for i in range(size):
        for j in range(i + 1, size):
            if permutation[i] > permutation[j]:
                count += 1
    return count


def leibniz_formula(rows: Rows, domain: ScalarDomain, context: Context | None = None) -> Any:
    """
    Sum over all permutations sigma of sign(sigma) * prod_i M[sigma(i), i].

    sign(sigma) = (-1)^inversions(sigma).
    """
    size = len(rows)
    result = domain.zero
    for sigma in permutations(range(size)):
        product = _product((rows[sigma[i]][i] for i in range(size)), domain, context)
        if inversions(sigma) % 2:
            result = domain.subtract(result, product, context)
        else:
            result = domain.add(result, product, context)
    return result


def determinant(
    rows: Rows,
    domain: ScalarDomain,
    triangular: bool,
    context: Context | None = None,
) -> tuple[Any, str]:
    """
    Determinant of a square matrix and the name of the method used.

    Returns:
        (value, method) with method one of 'triangular', 'single',
        'closed_form', 'sarrus', 'leibniz'
    """
    size = len(rows)
    if triangular:
        return diagonal_product(rows, domain, context), 'triangular'
    if size == 1:
        return rows[0][0], 'single'
    if size == 2:
        return closed_form_2x2(rows, domain, context), 'closed_form'
    if size == 3:
        return rule_of_sarrus(rows, domain, context), 'sarrus'
    return leibniz_formula(rows, domain, context), 'leibniz'
