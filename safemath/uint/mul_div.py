"""Width-widening multiply-divide.

a * b / c over 256-bit operands cannot be computed directly: the product
needs up to 512 bits. mul_div zero-extends all three operands to Uint512,
multiplies (which always fits), divides, and narrows the quotient back.
This is the one route by which proportional-share math stays overflow-free.
"""

from __future__ import annotations

import structlog

from safemath.errors import Overflow
from safemath.uint.wide import Uint256, Uint512

logger = structlog.get_logger()


def mul_div(a: Uint256, b: Uint256, c: Uint256, rounding_up: bool = False) -> Uint256:
    """Compute a * b / c without intermediate overflow.

    Args:
        a: First factor
        b: Second factor
        c: Divisor
        rounding_up: Round the quotient half-up instead of flooring

    Returns:
        The quotient as Uint256

    Raises:
        ZeroDivisor: If c is zero
        Overflow: If the quotient exceeds 2^256 - 1
    """
    for name, operand in (("a", a), ("b", b), ("c", c)):
        if not isinstance(operand, Uint256):
            raise TypeError(f"mul_div operand {name} must be Uint256, got {type(operand).__name__}")

    product = Uint512.from_uint256(a).mul(Uint512.from_uint256(b))
    quotient = product.div(Uint512.from_uint256(c), rounding_up=rounding_up)
    try:
        return quotient.to_uint256()
    except Overflow:
        logger.debug("mul_div_narrow_overflow", a=str(a), b=str(b), c=str(c))
        raise


def mul_div_int(a: int, b: int, c: int, rounding_up: bool = False) -> int:
    """mul_div over native ints in the uint256 range.

    Raises:
        Overflow: If an operand or the result is outside [0, 2^256 - 1]
        ZeroDivisor: If c is zero
    """
    result = mul_div(Uint256.from_int(a), Uint256.from_int(b), Uint256.from_int(c), rounding_up)
    return result.to_int()


def mul_div_u128(a: int, b: int, c: int, rounding_up: bool = False) -> int:
    """mul_div for native u128 callers such as the fixed-point layer.

    Operands are promoted to 256 bits internally; the result must fit back
    into u128.

    Raises:
        Overflow: If an operand or the result is outside [0, 2^128 - 1]
        ZeroDivisor: If c is zero
    """
    result = mul_div(Uint256.from_u128(a), Uint256.from_u128(b), Uint256.from_u128(c), rounding_up)
    return result.as_u128()
