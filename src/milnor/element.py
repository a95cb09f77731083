# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

import numbers
import re
from collections import namedtuple

from .combinatorics import trim_trailing_zeros
from .errors import ArithmeticInvariantError, InvalidInputError

REGEX_OPERATION = re.compile(r"(Sq|Q|P)\(\s*([0-9,\s]*?)\s*\)")


class Monomial(namedtuple("Monomial", ["odd_part", "even_part"])):
    """Milnor basis monomial Q(e_1, ..., e_k) P(r_1, ..., r_l)"""

    __slots__ = ()

    def __new__(cls, odd_part=(), even_part=()):
        return super().__new__(cls, tuple(odd_part), trim_trailing_zeros(even_part))


class MilnorElement(dict):
    """F_p-linear combination of Milnor basis monomials.

    Keys are Monomial objects, values are coefficients in [1, p - 1]; a key
    whose coefficient adds up to 0 mod p is removed.
    """

    def __init__(self, p, generic=None, terms=None):
        super().__init__()
        self.p = p
        if generic is None:
            generic = p != 2
        self.generic = generic

        if terms is not None:
            for monomial, coeff in dict(terms).items():
                self.add(monomial, coeff)

    @classmethod
    def basis_vector(cls, p, monomial, generic=None):
        r = cls(p, generic)
        r.add(monomial, 1)
        return r

    def add(self, monomial, coeff):
        if not isinstance(monomial, Monomial):
            monomial = Monomial(*monomial)

        c = (self.get(monomial, 0) + coeff) % self.p
        if c == 0:
            self.pop(monomial, None)
        else:
            self[monomial] = c

    def add_element(self, other, coeff=1):
        if other.p != self.p:
            raise InvalidInputError(
                f"cannot add elements at p = {self.p} and p = {other.p}"
            )

        for monomial, c in other.items():
            self.add(monomial, coeff * c)

    def isZero(self):
        return len(self) == 0

    def copy(self):
        r = MilnorElement(self.p, self.generic)
        r.update(self)
        return r

    def check_invariant(self):
        for monomial, c in self.items():
            if not 0 < c < self.p:
                raise ArithmeticInvariantError(
                    f"coefficient {c} stored for {monomial} at p = {self.p}"
                )
        return self

    def __add__(self, other):
        r = self.copy()
        r.add_element(other)
        return r

    def __rmul__(self, other):
        r = MilnorElement(self.p, self.generic)
        r.add_element(self, other)
        return r

    def __mul__(self, other):
        if isinstance(other, numbers.Integral):
            return self.__rmul__(int(other))

        from .product import milnor_element_product

        return milnor_element_product(self, other)

    def __str__(self):
        if self.isZero():
            return "0"

        list_terms = []
        for monomial in sorted(self):
            str_monomial = monomial_to_str(monomial, self.generic)
            c = self[monomial]
            if c == 1:
                list_terms.append(str_monomial)
            elif str_monomial == "1":
                list_terms.append(f"{c}")
            else:
                list_terms.append(f"{c}{str_monomial}")

        return " + ".join(list_terms)

    def __repr__(self):
        return f"MilnorElement(p={self.p}, {dict(self)!r})"


def monomial_to_str(monomial, generic=True):
    q_tuple, p_tuple = monomial

    if len(q_tuple) == 0 and len(p_tuple) == 0:
        return "1"

    if not generic:
        return f"Sq{str(tuple(p_tuple))}".replace(",)", ")").replace(", ", ",")

    str_operations = ""
    if len(q_tuple) > 0:
        str_operations = f"Q{str(tuple(q_tuple))}".replace(",)", ")").replace(
            ", ", ","
        )

    if len(p_tuple) > 0:
        str_operations = f"{str_operations}P{str(tuple(p_tuple))}".replace(
            ",)", ")"
        ).replace(", ", ",")

    return str_operations


def str2monomial(str_operations):
    """INPUT: 'Q(0,2)P(1,1)', 'Sq(3,1)', 'P(4)' or '1'"""
    """OUTPUT: Monomial object"""

    s = str_operations.replace(" ", "")
    if s == "1":
        return Monomial((), ())

    q_part = ()
    p_part = ()
    list_seen = []
    pos = 0
    for match in REGEX_OPERATION.finditer(s):
        if match.start() != pos:
            break
        pos = match.end()

        # at most one Q group, then at most one P (or Sq) group
        operation = "Q" if match.group(1) == "Q" else "P"
        if operation in list_seen or (operation == "Q" and "P" in list_seen):
            raise InvalidInputError(
                f"repeated or misplaced {match.group(1)} in {str_operations!r}"
            )
        list_seen.append(operation)

        entries = tuple(int(x) for x in match.group(2).split(",") if x != "")
        if operation == "Q":
            q_part = entries
        else:
            p_part = entries

    if pos != len(s) or pos == 0:
        raise InvalidInputError(f"cannot parse monomial {str_operations!r}")

    return Monomial(q_part, p_part)
