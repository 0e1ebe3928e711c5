"""Fixed-width unsigned integers for overflow-free settlement math.

This package provides:
- Uint256, Uint512: immutable 256/512-bit values over 64-bit limbs
- mul_div: a * b / c for Uint256 via a 512-bit intermediate
"""

from safemath.uint.limbs import Ordering
from safemath.uint.mul_div import mul_div, mul_div_int, mul_div_u128
from safemath.uint.wide import U64_MAX, U128_MAX, Uint256, Uint512, WideUint

__all__ = [
    "Ordering",
    "WideUint",
    "Uint256",
    "Uint512",
    "mul_div",
    "mul_div_int",
    "mul_div_u128",
    "U64_MAX",
    "U128_MAX",
]
