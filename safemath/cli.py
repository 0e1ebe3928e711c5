"""Command-line calculator for the safe math kernel.

Usage:
    safemath-calc mul-div A B C [--round-up]
    safemath-calc ln X
    safemath-calc pow BASE EXP
    safemath-calc sqrt N

Integers accept decimal or 0x-prefixed hex. Fixed-point arguments are
decimal literals such as 0.75; a malformed or out-of-range literal is
reported like any other calculation error.

Exit codes:
    0 - Success
    1 - Arithmetic or domain error (printed as "Error: ...")
    2 - Invalid arguments (missing operands, malformed integers)
"""

from __future__ import annotations

import argparse
import logging
import sys

import structlog

from safemath.config import MathConfig
from safemath.errors import SafeMathError
from safemath.math import FixedDecimal, ln, pow, sqrt
from safemath.uint import Uint256, mul_div

logger = structlog.get_logger()


def _parse_int(text: str) -> int:
    return int(text, 0)


def _configure_logging(verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safemath-calc",
        description="Overflow-safe 256/512-bit and fixed-point calculator",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    p_mul_div = commands.add_parser("mul-div", help="Compute a * b / c over uint256")
    p_mul_div.add_argument("a", type=_parse_int)
    p_mul_div.add_argument("b", type=_parse_int)
    p_mul_div.add_argument("c", type=_parse_int)
    p_mul_div.add_argument(
        "--round-up", action="store_true", help="Round the quotient half-up instead of flooring"
    )

    p_ln = commands.add_parser("ln", help="Natural log of a value in (0, 2)")
    p_ln.add_argument("x")

    p_pow = commands.add_parser("pow", help="base^exp for a base in (0, 2)")
    p_pow.add_argument("base")
    p_pow.add_argument("exp")

    p_sqrt = commands.add_parser("sqrt", help="Floor square root of a u128")
    p_sqrt.add_argument("n", type=_parse_int)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    config = MathConfig.from_env()

    try:
        if args.command == "mul-div":
            result = mul_div(
                Uint256.from_int(args.a),
                Uint256.from_int(args.b),
                Uint256.from_int(args.c),
                rounding_up=args.round_up,
            )
        elif args.command == "ln":
            result = ln(FixedDecimal.from_str(args.x), config)
        elif args.command == "pow":
            result = pow(FixedDecimal.from_str(args.base), FixedDecimal.from_str(args.exp), config)
        else:
            result = sqrt(args.n)
    except (SafeMathError, ValueError) as err:
        logger.debug("calculation_failed", command=args.command, error=type(err).__name__)
        print(f"Error: {err}")
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
