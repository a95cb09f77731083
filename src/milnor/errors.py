# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).


class MilnorError(Exception):
    """Base class for every error raised by this package"""


class InvalidInputError(MilnorError, ValueError):
    """Malformed prime, exponent vector, monomial or degree"""


class ArithmeticInvariantError(MilnorError, AssertionError):
    """An accumulated element holds a coefficient that is not in [1, p - 1]"""
