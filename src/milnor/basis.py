# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

"""Milnor basis in a given degree, filtered by the algebra's profile.

At p = 2 the basis consists of the Sq(r_1, ..., r_t); at odd primes of the
Q(e_1, ..., e_k) P(r_1, ..., r_t) with e_1 < ... < e_k. All enumerations are
generators and can be dropped at any point.
"""

import logging

import numpy as np

from .algebra import validate_degree
from .combinatorics import (
    p_to_the_n_minus_1_over_p_minus_1,
    restricted_partitions,
    tau_degrees,
    trim_trailing_zeros,
    weighted_integer_vectors,
    xi_degrees,
)
from .element import Monomial
from .profile import check_even_profile, check_odd_profile

LOG = logging.getLogger(__name__)


def _milnor_basis_even(algebra, n):
    p = algebra.p
    profile = algebra.profile.even_part

    if n == 0:
        yield ()
        return

    for exponents in weighted_integer_vectors(n, xi_degrees(n, p)):
        exponents = trim_trailing_zeros(exponents)
        if check_even_profile(p, profile, exponents):
            yield exponents


def milnor_basis_even(algebra, n):
    """Exponent vectors r of the P(r) in degree n * 2(p - 1).

    In the non generic case this is the whole basis in degree n: note the
    factor of two between 2(2 - 1) and the degree 1 of Sq(1).
    """

    n = validate_degree(n)
    return _milnor_basis_even(algebra, n)


def _milnor_basis_generic_q_part(algebra, q_deg):
    p = algebra.p
    profile = algebra.profile.odd_part
    q_degrees = tau_degrees(q_deg, p)

    for sigma in restricted_partitions(q_deg, q_degrees):
        # indices of the tau's occurring in the partition
        q_mono = tuple(int(i) for i in np.flatnonzero(sigma))
        if check_odd_profile(profile, q_mono):
            yield q_mono


def milnor_basis_generic_q_part(algebra, q_deg):
    """Increasing index lists (i_1, ..., i_k) with Q_i_1 ... Q_i_k in degree
    q_deg, i.e. partitions of q_deg into distinct parts 2p^i - 1"""

    q_deg = validate_degree(q_deg)
    return _milnor_basis_generic_q_part(algebra, q_deg)


def _milnor_basis_generic(algebra, n):
    p = algebra.p
    q = algebra.q

    if n == 0:
        yield Monomial((), ())
        return

    # every Q_i has degree 1 mod q, so at least n mod q of them occur
    num_q = n % q
    min_q_deg = 2 * p_to_the_n_minus_1_over_p_minus_1(p, num_q) - num_q

    for p_deg in range(n // q + 1):
        q_deg = n - p_deg * q

        if q_deg < min_q_deg:
            break

        list_p_parts = list(_milnor_basis_even(algebra, p_deg))
        if len(list_p_parts) == 0:
            continue

        num_monomials = 0
        for q_part in _milnor_basis_generic_q_part(algebra, q_deg):
            for p_part in list_p_parts:
                num_monomials += 1
                yield Monomial(q_part, p_part)

        LOG.debug(
            "degree %d at p = %d: p_deg = %d, q_deg = %d, %d monomials",
            n, p, p_deg, q_deg, num_monomials,
        )


def milnor_basis_generic(algebra, n):
    """Monomials Q(e) P(r) of degree n, P-part degree first increasing"""

    n = validate_degree(n)
    return _milnor_basis_generic(algebra, n)


def _milnor_basis(algebra, n):
    if algebra.generic:
        yield from _milnor_basis_generic(algebra, n)
    else:
        for exponents in _milnor_basis_even(algebra, n):
            yield Monomial((), exponents)


def milnor_basis(algebra, n):
    """Basis of the algebra in degree n as Monomial objects"""

    n = validate_degree(n)
    return _milnor_basis(algebra, n)
