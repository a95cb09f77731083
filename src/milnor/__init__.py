# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

"""Milnor basis of the mod p Steenrod algebra: products and bases"""

import logging

from .algebra import MilnorAlgebra, milnor_basis_deg
from .basis import (
    milnor_basis,
    milnor_basis_even,
    milnor_basis_generic,
    milnor_basis_generic_q_part,
)
from .element import MilnorElement, Monomial, monomial_to_str, str2monomial
from .errors import ArithmeticInvariantError, InvalidInputError, MilnorError
from .product import (
    milnor_element_product,
    milnor_matrices,
    milnor_product,
    milnor_product_even,
    milnor_product_full,
    milnor_product_full_q_part,
)
from .profile import FullProfile, ProfileFunction, ProfileList

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ArithmeticInvariantError",
    "FullProfile",
    "InvalidInputError",
    "MilnorAlgebra",
    "MilnorElement",
    "MilnorError",
    "Monomial",
    "ProfileFunction",
    "ProfileList",
    "milnor_basis",
    "milnor_basis_deg",
    "milnor_basis_even",
    "milnor_basis_generic",
    "milnor_basis_generic_q_part",
    "milnor_element_product",
    "milnor_matrices",
    "milnor_product",
    "milnor_product_even",
    "milnor_product_full",
    "milnor_product_full_q_part",
    "monomial_to_str",
    "str2monomial",
]

__version__ = "0.1.0"
