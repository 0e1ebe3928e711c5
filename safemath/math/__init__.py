"""Fixed-point math for settlement calculations.

This package provides:
- FixedDecimal: unsigned 18-decimal fixed point (u128 raw)
- SignedDecimal: sign + magnitude accumulator
- ln, exp, pow: Taylor-series transcendental functions
- sqrt: floor square root of a u128
"""

from safemath.math.fixed_point import ONE_18, FixedDecimal, SignedDecimal
from safemath.math.transcendental import exp, ln, pow, sqrt

__all__ = ["FixedDecimal", "SignedDecimal", "ONE_18", "ln", "exp", "pow", "sqrt"]
