"""
Tests for monomials and the MilnorElement accumulator
"""

import numpy as np
import pytest

from milnor import ArithmeticInvariantError, InvalidInputError, MilnorElement, Monomial
from milnor.element import monomial_to_str, str2monomial


class TestMonomial:
    def test_trims_even_part(self):
        assert Monomial((), (1, 0, 0)) == Monomial((), (1,))
        assert Monomial((0,), (0,)).even_part == ()

    def test_is_a_pair_of_tuples(self):
        q_part, p_part = Monomial([0, 2], [3, 1])
        assert q_part == (0, 2)
        assert p_part == (3, 1)
        assert hash(Monomial([0], [1])) == hash(Monomial((0,), (1,)))


class TestMilnorElement:
    def test_add_reduces_mod_p(self):
        x = MilnorElement(3)
        x.add(Monomial((), (1,)), 5)
        assert x == {Monomial((), (1,)): 2}

    def test_add_drops_zero(self):
        x = MilnorElement(3)
        x.add(Monomial((), (1,)), 1)
        x.add(Monomial((), (1,)), 2)
        assert x.isZero()
        assert len(x) == 0

    def test_add_accepts_plain_pairs(self):
        x = MilnorElement(5)
        x.add(((0,), (2,)), 3)
        assert x[Monomial((0,), (2,))] == 3

    def test_sum_and_scalar(self):
        m = Monomial((), (1,))
        x = MilnorElement.basis_vector(3, m)
        assert x + x == {m: 2}
        assert (2 * x) + x == {}
        assert (x * 4) == {m: 1}

    def test_sum_at_different_primes(self):
        x = MilnorElement.basis_vector(3, Monomial((), (1,)))
        y = MilnorElement.basis_vector(2, Monomial((), (1,)))
        with pytest.raises(InvalidInputError):
            x + y
        with pytest.raises(InvalidInputError):
            x.add_element(y)
        assert x == {Monomial((), (1,)): 1}

    def test_numpy_scalar(self):
        m = Monomial((), (1,))
        x = MilnorElement.basis_vector(5, m)
        assert x * np.int64(2) == {m: 2}
        assert x * np.int64(5) == {}

    def test_copy_is_independent(self):
        x = MilnorElement.basis_vector(3, Monomial((), (1,)))
        y = x.copy()
        y.add(Monomial((), (2,)), 1)
        assert len(x) == 1
        assert y.p == 3

    def test_check_invariant(self):
        x = MilnorElement.basis_vector(3, Monomial((), (1,)))
        assert x.check_invariant() is x

        x[Monomial((), (2,))] = 0
        with pytest.raises(ArithmeticInvariantError):
            x.check_invariant()


class TestStrings:
    def test_generic(self):
        x = MilnorElement(3, terms={Monomial((0,), (1,)): 1, Monomial((1,), ()): 2})
        assert str(x) == "Q(0)P(1) + 2Q(1)"

    def test_non_generic(self):
        x = MilnorElement(2, terms={Monomial((), (3,)): 1, Monomial((), (0, 1)): 1})
        assert str(x) == "Sq(0,1) + Sq(3)"

    def test_zero_and_unit(self):
        assert str(MilnorElement(5)) == "0"
        assert str(MilnorElement(5, terms={Monomial(): 1})) == "1"
        assert str(MilnorElement(5, terms={Monomial(): 2})) == "2"

    def test_monomial_to_str(self):
        assert monomial_to_str(Monomial((0, 2), (1, 1))) == "Q(0,2)P(1,1)"
        assert monomial_to_str(Monomial((), (0, 0, 1)), generic=False) == "Sq(0,0,1)"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Q(0,2)P(1,1)", Monomial((0, 2), (1, 1))),
            ("Sq(3,1)", Monomial((), (3, 1))),
            ("P(1,0)", Monomial((), (1,))),
            ("Q(1)", Monomial((1,), ())),
            ("Q( 0, 1 ) P( 2 )", Monomial((0, 1), (2,))),
            ("1", Monomial()),
        ],
    )
    def test_str2monomial(self, text, expected):
        assert str2monomial(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["X(1)", "Q(1)junk", "", "P(a)", "Q(0)Q(1)", "P(1)Q(0)", "P(1)Sq(2)", "Sq(1)P(1)"],
    )
    def test_str2monomial_invalid(self, text):
        with pytest.raises(InvalidInputError):
            str2monomial(text)
