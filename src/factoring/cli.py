#!/usr/bin/env python
"""Command surface: factoring <POLYNOMIAL>"""

import argparse
import json
import logging
import sys

from src.core.contracts import validate_factoring_result
from src.factoring.formatter import format_roots
from src.factoring.input_gate import BLOCK_MESSAGES
from src.factoring.pipeline import factor

__version__ = "1.0"


def _build_arg_parser() -> argparse.ArgumentParser:
    arg_parser = argparse.ArgumentParser(
        prog="factoring",
        usage="factoring <POLYNOMIAL>",
        description="Factors basic polynomials into their (real) factors.",
        epilog="Use '--' before a polynomial starting with '-', e.g. factoring -- '-x^2 + 4'",
    )
    arg_parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    arg_parser.add_argument(
        "polynomial",
        metavar="POLYNOMIAL",
        help="A basic polynomial in the form of Ax^2 + Bx + C",
    )
    arg_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the factoring result as JSON",
    )
    arg_parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr",
    )
    return arg_parser


def main(argv=None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    result = factor(args.polynomial)

    # Блокировка Input Gate: ядро не вызывалось, exit code 2
    if result.block_reason in BLOCK_MESSAGES:
        parser.error(f"argument POLYNOMIAL: {BLOCK_MESSAGES[result.block_reason]}")

    if args.json:
        payload = result.to_dict()
        validate_factoring_result(payload)
        print(json.dumps(payload))
    elif result.roots is not None:
        print(format_roots(result.polynomial_str, result.roots))

    if result.parse_error is not None:
        print(f"factoring: error: {result.parse_error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
