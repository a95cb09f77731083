# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

"""Products of Milnor basis elements.

Every function takes basis monomials and returns a MilnorElement; elements
are multiplied through milnor_element_product, the bilinear extension.
"""

import logging

import numpy as np

from .algebra import (
    debug_enabled,
    validate_exponents,
    validate_monomial,
    validate_prime,
)
from .combinatorics import minus_one_to_the_n, multinomial, trim_trailing_zeros
from .element import MilnorElement, Monomial
from .errors import InvalidInputError

LOG = logging.getLogger(__name__)


#####################################################################
#                       Milnor matrices                             #
#####################################################################


def initialize_milnor_matrix(r, s):
    """(len(r) + 1) x (len(s) + 1) matrix with r down column 0, s along row 0"""

    M = np.zeros((len(r) + 1, len(s) + 1), dtype=np.int64)
    M[0, 1:] = s
    M[1:, 0] = r

    return M


def step_milnor_matrix(M, r, i, j, x):
    """Move one unit of column j from row 0 into row i, clearing what is
    above and to the left of it"""

    N = np.zeros_like(M)
    N[0] = M[0]

    # rows 1, ..., i - 1 start over: their entries go back to row 0
    N[1:i, 0] = r[: i - 1]
    N[0, 1:] += M[1:i, 1:].sum(axis=0)

    N[i:] = M[i:]

    N[0, 1:j] += M[i, 1:j]
    N[i, 1:j] = 0

    N[0, j] -= 1
    N[i, j] += 1
    N[i, 0] = x

    return N


def next_milnor_matrix(p, r, M):
    """OUTPUT: the matrix following M in Monks' order, None after the last"""

    rows, cols = M.shape

    for i in range(1, rows):
        total = int(M[i, 0])

        for j in range(1, cols):
            p_to_the_j = p**j
            column_above_is_empty = not M[:i, j].any()

            if total < p_to_the_j or column_above_is_empty:
                total += int(M[i, j]) * p_to_the_j
            else:
                return step_milnor_matrix(M, r, i, j, total - p_to_the_j)

    return None


def _milnor_matrices(p, r, s):
    M = initialize_milnor_matrix(r, s)
    while M is not None:
        yield M
        M = next_milnor_matrix(p, r, M)


def milnor_matrices(p, r, s):
    """All matrices X, X[i, j] >= 0, with r_i = sum_j p^j X[i, j] and
    s_j = sum_i X[i, j], each exactly once.

    Uses the iteration of Monks' Maple package
    (https://monks.scranton.edu/files/software/Steenrod/steen.html). Row 0 and
    column 0 hold the parts of s and r not used by the free entries.
    """

    p = validate_prime(p)
    r = validate_exponents(r)
    s = validate_exponents(s)

    return _milnor_matrices(p, r, s)


#####################################################################
#                       Even subalgebra                             #
#####################################################################


def _milnor_matrix_coeff(p, M):
    """OUTPUT: (coefficient, antidiagonal sums) of the term of M"""

    rows, cols = M.shape
    flipped = np.fliplr(M)

    coeff = 1
    list_diagonal_sums = []

    for n in range(1, rows + cols - 1):
        nth_diagonal = [int(d) for d in flipped.diagonal(cols - 1 - n)]

        coeff = (coeff * multinomial(nth_diagonal, p)) % p
        if coeff == 0:
            return 0, ()

        list_diagonal_sums.append(sum(nth_diagonal))

    return coeff, trim_trailing_zeros(list_diagonal_sums)


def _milnor_product_even(p, r, s):
    result = MilnorElement(p, generic=p != 2)
    num_matrices = 0

    for M in _milnor_matrices(p, r, s):
        num_matrices += 1

        coeff, diagonal_sums = _milnor_matrix_coeff(p, M)
        if coeff != 0:
            result.add(Monomial((), diagonal_sums), coeff)

    LOG.debug(
        "P%s * P%s at p = %d: %d matrices, %d terms",
        r, s, p, num_matrices, len(result),
    )

    return result


def milnor_product_even(p, r, s):
    """Product P(r) P(s) in the even subalgebra at the prime p.

    At p = 2 this is the whole Steenrod algebra.
    """

    p = validate_prime(p)
    r = validate_exponents(r)
    s = validate_exponents(s)

    return _checked(_milnor_product_even(p, r, s))


#####################################################################
#                       Generic case                                #
#####################################################################


def _milnor_product_full_q_part(p, m1, f):
    result = MilnorElement.basis_vector(p, m1, generic=True)

    for k in f:
        old_result = result
        result = MilnorElement(p, generic=True)
        p_to_the_k = p**k

        for (q_mono, p_mono), coeff in old_result.items():
            for i in range(len(p_mono) + 1):
                if k + i in q_mono:
                    continue

                # p_mono[i - 1] has to absorb the p^k
                if i > 0 and p_mono[i - 1] < p_to_the_k:
                    continue

                if i > 0:
                    new_p_mono = list(p_mono)
                    new_p_mono[i - 1] -= p_to_the_k
                else:
                    new_p_mono = p_mono

                ind = 0
                for x in q_mono:
                    if x >= k + i:
                        ind += 1

                pos = len(q_mono) - ind
                new_q_mono = q_mono[:pos] + (k + i,) + q_mono[pos:]

                result.add(
                    Monomial(new_q_mono, new_p_mono), minus_one_to_the_n(ind) * coeff
                )

    LOG.debug("%s * Q%s at p = %d: %d terms", m1, tuple(f), p, len(result))

    return result


def milnor_product_full_q_part(p, m1, f):
    """INPUT: prime p, monomial m1 = (e, r), indices f = (f_1, ..., f_t)"""
    """OUTPUT: Q(e) P(r) Q_f_1 ... Q_f_t written in the basis Q(e') P(r')"""

    p = validate_prime(p)
    m1 = validate_monomial(m1)
    f = validate_exponents(f)

    return _checked(_milnor_product_full_q_part(p, m1, f))


def _milnor_product_full(p, m1, m2):
    f, s = m2

    m1_times_f = _milnor_product_full_q_part(p, m1, f)
    if len(s) == 0:
        return m1_times_f

    # the Q's are now all on the left: multiply each r by s
    result = MilnorElement(p, generic=True)
    for (e, r), coeff in m1_times_f.items():
        prod = _milnor_product_even(p, r, s)
        for (_, even_part), c in prod.items():
            result.add(Monomial(e, even_part), coeff * c)

    return result


def milnor_product_full(p, m1, m2):
    """Product of Q(e) P(r) and Q(f) P(s) at the prime p.

    INPUT: m1 = (e, r), m2 = (f, s), with e, f strictly increasing.
    """

    p = validate_prime(p)
    m1 = validate_monomial(m1)
    m2 = validate_monomial(m2)

    return _checked(_milnor_product_full(p, m1, m2))


def _milnor_product(p, generic, m1, m2):
    if generic:
        return _milnor_product_full(p, m1, m2)

    result = _milnor_product_even(p, m1[1], m2[1])
    result.generic = False
    return result


def milnor_product(algebra, m1, m2):
    """Product of two basis monomials in the algebra; the profile plays no
    role since a sub-Hopf-algebra is closed under products"""

    m1 = validate_monomial(m1, algebra.generic)
    m2 = validate_monomial(m2, algebra.generic)

    return _checked(_milnor_product(algebra.p, algebra.generic, m1, m2))


def milnor_element_product(x, y):
    """Bilinear extension of milnor_product to MilnorElement objects"""

    if x.p != y.p:
        raise InvalidInputError(f"cannot multiply elements at p = {x.p} and p = {y.p}")

    generic = x.generic or y.generic
    result = MilnorElement(x.p, generic)

    for m1, c1 in x.items():
        for m2, c2 in y.items():
            result.add_element(_milnor_product(x.p, generic, m1, m2), c1 * c2)

    return _checked(result)


def _checked(result):
    if debug_enabled():
        result.check_invariant()
    return result
