"""Overflow-safe settlement math: wide unsigned integers and fixed point."""

from safemath.errors import (
    DidNotConverge,
    InvalidBaseRange,
    LengthMismatch,
    Overflow,
    SafeMathError,
    ShiftAmountInvalid,
    ZeroDivisor,
    ZeroValue,
)
from safemath.math import FixedDecimal, SignedDecimal, exp, ln, pow, sqrt
from safemath.uint import Ordering, Uint256, Uint512, mul_div, mul_div_int, mul_div_u128

__version__ = "0.1.0"
__all__ = [
    # Types
    "Uint256",
    "Uint512",
    "Ordering",
    "FixedDecimal",
    "SignedDecimal",
    # Functions
    "mul_div",
    "mul_div_int",
    "mul_div_u128",
    "ln",
    "exp",
    "pow",
    "sqrt",
    # Errors
    "SafeMathError",
    "LengthMismatch",
    "ZeroValue",
    "ZeroDivisor",
    "Overflow",
    "ShiftAmountInvalid",
    "InvalidBaseRange",
    "DidNotConverge",
    "__version__",
]
