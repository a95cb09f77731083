# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

import numbers
import os

from .combinatorics import is_prime
from .constants import ENV_DEBUG, PARAM_DEFAULT_PRIME, TRUNCATION_ZERO
from .element import Monomial
from .errors import InvalidInputError
from .profile import FullProfile, ProfileFunction, ProfileList, unrestricted_profile


class MilnorAlgebra:
    """Descriptor (p, generic, profile) of a Milnor algebra.

    generic is true at odd primes and selects the Q/P product and basis; it
    may be forced at p = 2, where degrees then follow the odd prime
    conventions (P(r) in degree 2r, Q_0 in degree 1).
    """

    def __init__(self, p=PARAM_DEFAULT_PRIME, generic=None, profile=None):
        validate_prime(p)

        if generic is None:
            generic = p != 2
        if profile is None:
            profile = FullProfile()

        self._p = p
        self._generic = bool(generic)
        self._profile = profile

    @classmethod
    def from_profile(cls, p=PARAM_DEFAULT_PRIME, profile=None, truncation_type=None,
                     generic=None):
        """INPUT: profile in Sage's conventions: a list of exponents at p = 2,
        a pair (e, k) at odd primes, where e bounds the xi's and k the tau's"""

        if generic is None:
            generic = p != 2

        # no profile is the whole algebra, whatever the truncation type
        if profile is None:
            return cls(p, generic)

        if truncation_type is None:
            truncation_type = TRUNCATION_ZERO
        truncated = truncation_type == TRUNCATION_ZERO

        if generic:
            try:
                e, k = profile
            except (TypeError, ValueError) as exc:
                raise InvalidInputError(
                    f"generic profile must be a pair (e, k), got {profile!r}"
                ) from exc
            full_profile = FullProfile(_as_profile(k, truncated), _as_profile(e, truncated))
        else:
            full_profile = FullProfile(
                unrestricted_profile(), _as_profile(profile, truncated)
            )

        return cls(p, generic, full_profile)

    @property
    def p(self):
        return self._p

    @property
    def generic(self):
        return self._generic

    @property
    def profile(self):
        return self._profile

    @property
    def q(self):
        """Degree 2(p - 1) of P(1) in the generic case"""
        return 2 * (self._p - 1)

    def __eq__(self, other):
        return (
            isinstance(other, MilnorAlgebra)
            and self._p == other._p
            and self._generic == other._generic
            and self._profile == other._profile
        )

    def __hash__(self):
        return hash((self._p, self._generic, self._profile))

    def __repr__(self):
        return f"MilnorAlgebra(p={self._p}, generic={self._generic}, profile={self._profile!r})"


def _as_profile(profile, truncated):
    if hasattr(profile, "restricted"):
        return profile
    if callable(profile):
        return ProfileFunction(profile)
    return ProfileList(profile, truncated=truncated, restricted=True)


def milnor_basis_deg(algebra, monomial):
    """INPUT: MilnorAlgebra and Monomial"""
    """OUTPUT: topological degree"""

    p = algebra.p
    q_tuple, p_tuple = monomial

    if not algebra.generic:
        return sum(p_tuple[i] * (p ** (i + 1) - 1) for i in range(len(p_tuple)))

    r = 0

    for q_index in q_tuple:
        r += 2 * p**q_index - 1

    for i in range(len(p_tuple)):
        r += p_tuple[i] * (2 * p ** (i + 1) - 2)

    return r


# Validation, applied by the outermost calls only


def _is_integer(x):
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def validate_prime(p):
    if not _is_integer(p) or not is_prime(int(p)):
        raise InvalidInputError(f"{p!r} is not a prime")
    return int(p)


def validate_exponents(list_exponents):
    for x in list_exponents:
        if not _is_integer(x) or x < 0:
            raise InvalidInputError(
                f"exponents must be non-negative integers, got {tuple(list_exponents)!r}"
            )
    return tuple(int(x) for x in list_exponents)


def validate_monomial(monomial, generic=True):
    try:
        q_part, p_part = monomial
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{monomial!r} is not a pair (odd part, even part)") from exc

    q_part = validate_exponents(q_part)
    p_part = validate_exponents(p_part)

    for i in range(1, len(q_part)):
        if q_part[i - 1] >= q_part[i]:
            raise InvalidInputError(f"odd part {q_part!r} is not strictly increasing")

    if not generic and len(q_part) > 0:
        raise InvalidInputError(f"odd part {q_part!r} given to a non generic algebra")

    return Monomial(q_part, p_part)


def validate_degree(n):
    if not _is_integer(n) or n < 0:
        raise InvalidInputError(f"degree must be a non-negative integer, got {n!r}")
    return int(n)


def debug_enabled():
    return os.environ.get(ENV_DEBUG, "") not in ("", "0")
