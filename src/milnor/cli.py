# Copyright (c) 2025 Andrés Morán (andres.moran.l@uc.cl)
# Licensed under the terms of the MIT License (see ./LICENSE).

"""Command line front end.

    milnor basis 7
    milnor basis 17 -p 3
    milnor basis 4 --profile 2 1
    milnor product "Q(0)P(1)" "P(1)" -p 3
"""

import argparse
import logging

from .algebra import MilnorAlgebra
from .basis import milnor_basis
from .constants import INFINITY, PARAM_DEFAULT_PRIME, TRUNCATION_ZERO
from .element import monomial_to_str, str2monomial
from .errors import MilnorError
from .product import milnor_product


def _truncation_type(value):
    if value in ("inf", "infinity", "Infinity"):
        return INFINITY
    if value == "0":
        return TRUNCATION_ZERO
    raise argparse.ArgumentTypeError(f"truncation type must be 0 or inf, got {value!r}")


def build_parser():
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-p", "--prime", type=int, default=PARAM_DEFAULT_PRIME)
    common.add_argument(
        "--generic",
        action="store_true",
        default=None,
        help="use the odd prime conventions even at p = 2",
    )
    common.add_argument(
        "--profile",
        type=int,
        nargs="*",
        default=None,
        help="bounds on the P part (exponents < p^bound)",
    )
    common.add_argument(
        "--odd-profile",
        type=int,
        nargs="*",
        default=None,
        help="bounds on the Q part (bound <= 1 removes Q_i)",
    )
    common.add_argument("--truncation-type", type=_truncation_type, default=None)
    common.add_argument("-v", "--verbose", action="store_true")

    parser = argparse.ArgumentParser(
        prog="milnor",
        description="Milnor basis of the mod p Steenrod algebra",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parser_basis = subparsers.add_parser(
        "basis", parents=[common], help="list the basis in a degree"
    )
    parser_basis.add_argument("degree", type=int)

    parser_product = subparsers.add_parser(
        "product", parents=[common], help="multiply two monomials"
    )
    parser_product.add_argument("left")
    parser_product.add_argument("right")

    return parser


def build_algebra(args):
    generic = args.generic
    if generic is None:
        generic = args.prime != 2

    if args.profile is None and args.odd_profile is None:
        profile = None
    elif generic:
        profile = (tuple(args.profile or ()), tuple(args.odd_profile or ()))
    else:
        profile = tuple(args.profile or ())

    return MilnorAlgebra.from_profile(
        args.prime, profile, truncation_type=args.truncation_type, generic=generic
    )


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s"
        )

    try:
        algebra = build_algebra(args)

        if args.command == "basis":
            for monomial in milnor_basis(algebra, args.degree):
                print(monomial_to_str(monomial, algebra.generic))
        else:
            m1 = str2monomial(args.left)
            m2 = str2monomial(args.right)
            print(milnor_product(algebra, m1, m2))
    except MilnorError as exc:
        parser.error(str(exc))

    return 0
