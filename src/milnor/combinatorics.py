# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

"""Integer primitives used by the product and basis routines.

Nothing here knows about monomials or profiles: these are the multinomial
coefficients, degree tables and partition generators the Milnor basis code
is built on.
"""

from functools import cache


@cache
def factorial(n):
    r = 1
    if n > 1:
        for i in range(2, n + 1):
            r = r * i
    else:
        r = 1
    return r


@cache
def is_prime(n):
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def minus_one_to_the_n(n):
    if n % 2 == 0:
        return 1
    return -1


def trim_trailing_zeros(list_exponents):
    """OUTPUT: tuple without its trailing zeros, () for the zero vector"""

    end = len(list_exponents)
    while end > 0 and list_exponents[end - 1] == 0:
        end -= 1

    return tuple(int(x) for x in list_exponents[:end])


def p_to_the_n_minus_1_over_p_minus_1(p, n):
    """OUTPUT: 1 + p + ... + p^(n-1), which is 0 for n <= 0"""

    if n <= 0:
        return 0
    return (p**n - 1) // (p - 1)


def _digit_multinomial(digits):
    r = factorial(sum(digits))
    for d in digits:
        r //= factorial(d)
    return r


def multinomial(list_weights, p):
    """INPUT: list of non-negative integers l_1, ..., l_k and a prime p"""
    """OUTPUT: (l_1 + ... + l_k)! / (l_1! ... l_k!) mod p"""

    # Lucas: digit by digit in base p, zero as soon as adding the digits carries
    r = 1
    remaining = [int(w) for w in list_weights]

    while any(remaining):
        digits = [w % p for w in remaining]
        if sum(digits) >= p:
            return 0

        r = (r * _digit_multinomial(digits)) % p
        remaining = [w // p for w in remaining]

    return r % p


@cache
def xi_degrees(n, p):
    """OUTPUT: degrees (p^i - 1) / (p - 1), i >= 1, of the xi_i not exceeding n"""

    r = []
    d = 1
    while d <= n:
        r.append(d)
        d = d * p + 1

    return tuple(r)


@cache
def tau_degrees(n, p):
    """OUTPUT: degrees 2p^i - 1, i >= 0, of the tau_i not exceeding n"""

    r = []
    p_pow = 1
    while 2 * p_pow - 1 <= n:
        r.append(2 * p_pow - 1)
        p_pow *= p

    return tuple(r)


def weighted_integer_vectors(n, weights):
    """Vectors (x_1, ..., x_k) of non-negative integers with sum x_i w_i = n.

    The heaviest weight is decided first and its multiplicity decreases, so
    for weights (1, 3, 7) and n = 7 the order is (0, 0, 1), (1, 2, 0),
    (4, 1, 0), (7, 0, 0).
    """

    if len(weights) == 0:
        if n == 0:
            yield ()
        return

    w = weights[-1]
    for x in range(n // w, -1, -1):
        for prefix in weighted_integer_vectors(n - x * w, weights[:-1]):
            yield prefix + (x,)


def restricted_partitions(n, part_degrees):
    """Partitions of n into distinct parts taken from part_degrees.

    Each partition is yielded as an inclusion mask with one 0/1 entry per
    part; larger parts are tried (included) first.
    """

    if n == 0:
        yield (0,) * len(part_degrees)
        return

    if len(part_degrees) == 0 or sum(part_degrees) < n:
        return

    last = part_degrees[-1]
    rest = part_degrees[:-1]

    if last <= n:
        for mask in restricted_partitions(n - last, rest):
            yield mask + (1,)

    for mask in restricted_partitions(n, rest):
        yield mask + (0,)
