# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

"""Profiles describing sub-Hopf-algebras of the Steenrod algebra.

A profile bounds, for every index i, which power of the i-th generator may
appear. For the polynomial generators P the bound b_i allows exponents
< p^b_i; for the exterior generators Q a bound <= 1 removes Q_i. Profiles are
read-only once built.
"""

from .constants import INFINITY


class ProfileList:
    """Explicit list of bounds; indices past the end are 0 if truncated and
    unbounded otherwise"""

    def __init__(self, profile=(), truncated=False, restricted=True):
        self._profile = tuple(profile)
        self._truncated = bool(truncated)
        self._restricted = bool(restricted)

    def index(self, i):
        if i < len(self._profile):
            return self._profile[i]
        if self._truncated:
            return 0
        return INFINITY

    def exponent(self, p, i):
        if i < len(self._profile):
            if self._profile[i] == INFINITY:
                return INFINITY
            return p ** self._profile[i]
        if self._truncated:
            return 1
        return INFINITY

    def restricted(self):
        return self._restricted

    def __eq__(self, other):
        return (
            isinstance(other, ProfileList)
            and self._profile == other._profile
            and self._truncated == other._truncated
            and self._restricted == other._restricted
        )

    def __hash__(self):
        return hash((self._profile, self._truncated, self._restricted))

    def __repr__(self):
        return (
            f"ProfileList({list(self._profile)}, truncated={self._truncated}, "
            f"restricted={self._restricted})"
        )


class ProfileFunction:
    """Bounds given by a function of the index; always restricted"""

    def __init__(self, profile_func):
        self._profile_func = profile_func

    def index(self, i):
        return self._profile_func(i)

    def exponent(self, p, i):
        n = self._profile_func(i)
        if n == INFINITY:
            return INFINITY
        return p**n

    def restricted(self):
        return True

    def __repr__(self):
        return f"ProfileFunction({self._profile_func!r})"


class FullProfile:
    """Pair (odd part, even part): bounds on the Q's and on the P's"""

    def __init__(self, odd_part=None, even_part=None):
        if odd_part is None:
            odd_part = unrestricted_profile()
        if even_part is None:
            even_part = unrestricted_profile()

        self._odd_part = odd_part
        self._even_part = even_part

    @property
    def odd_part(self):
        return self._odd_part

    @property
    def even_part(self):
        return self._even_part

    def __iter__(self):
        yield self._odd_part
        yield self._even_part

    def __eq__(self, other):
        return (
            isinstance(other, FullProfile)
            and self._odd_part == other._odd_part
            and self._even_part == other._even_part
        )

    def __hash__(self):
        return hash((self._odd_part, self._even_part))

    def __repr__(self):
        return f"FullProfile({self._odd_part!r}, {self._even_part!r})"


def unrestricted_profile():
    return ProfileList((), truncated=False, restricted=False)


def check_odd_profile(profile, q_mono):
    """True iff no Q_i of q_mono is killed by the profile"""

    if not profile.restricted():
        return True

    for i in q_mono:
        if profile.index(i) <= 1:
            return False

    return True


def check_even_profile(p, profile, exponents):
    """True iff every non-zero exponent lies strictly under its bound"""

    if not profile.restricted():
        return True

    for i, exp in enumerate(exponents):
        if exp != 0 and exp >= profile.exponent(p, i):
            return False

    return True
