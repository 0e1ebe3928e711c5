"""Multiply and divide engine for fixed-width unsigned integers.

Multiplication is schoolbook over 64-bit limbs. Division is a bit-position
long division: align the divisor under the remainder's top bit, subtract,
record the quotient bit, repeat. Both are bounded by the width: at most
n_limbs^2 partial products and at most width subtractions.
"""

from __future__ import annotations

from safemath.errors import Overflow, ZeroDivisor, ZeroValue
from safemath.uint import limbs as L
from safemath.uint.limbs import LIMB_BITS, LIMB_MASK, Limbs, Ordering


def mul(a: Limbs, b: Limbs) -> Limbs:
    """Multiply two values of equal width without widening.

    Each partial product a[i] * b[j] is split into low and high 64-bit
    halves; the low half accumulates into limb i + j and the high half,
    with the running carry, into limb i + j + 1.

    Raises:
        Overflow: If any nonzero contribution lands above the top limb
    """
    n = len(a)
    result = [0] * n
    for i in range(n):
        if a[i] == 0:
            continue
        carry = 0
        for j in range(n):
            product = a[i] * b[j]
            k = i + j
            if k >= n:
                if product or carry:
                    raise Overflow(f"Multiplication overflows {n * LIMB_BITS} bits")
                continue
            low, high = product & LIMB_MASK, product >> LIMB_BITS
            total = result[k] + low + carry
            result[k] = total & LIMB_MASK
            carry = high + (total >> LIMB_BITS)
        if carry:
            raise Overflow(f"Multiplication overflows {n * LIMB_BITS} bits")
    return tuple(result)


def div_rem(a: Limbs, b: Limbs) -> tuple[Limbs, Limbs]:
    """Floor division returning (quotient, remainder).

    Raises:
        ZeroDivisor: If b is zero
    """
    try:
        divisor_bits = L.bit_length(b)
    except ZeroValue as err:
        raise ZeroDivisor("Division by zero") from err

    width = len(a)
    remainder = a
    quotient_bits: list[int] = []

    while L.cmp(remainder, b) != Ordering.LESS:
        shift = L.bit_length(remainder) - divisor_bits
        aligned = L.shl(b, shift)
        if L.cmp(aligned, remainder) == Ordering.GREATER:
            # Top bits line up but the divisor is larger; step one bit down
            shift -= 1
            aligned = L.shl(b, shift)
        remainder = L.sub(remainder, aligned)
        quotient_bits.append(shift)

    quotient = L.zero(width)
    for position in quotient_bits:
        quotient = L.set_bit(quotient, position)
    return quotient, remainder


def round_half_up_even_divisor(remainder: Limbs, divisor: Limbs) -> bool:
    """Decide whether a floor quotient should be bumped by one.

    Rounds up when remainder > floor(divisor / 2), or when the remainder
    equals floor(divisor / 2) and the divisor is even. For an odd divisor,
    remainder == floor(divisor / 2) is strictly below the true half, so the
    rule is exactly round-half-up.
    """
    half = L.shr(divisor, 1)
    order = L.cmp(remainder, half)
    if order == Ordering.GREATER:
        return True
    return order == Ordering.EQUAL and not L.is_odd(divisor)


def div(a: Limbs, b: Limbs, rounding_up: bool = False) -> Limbs:
    """Divide a by b, optionally rounding the quotient half-up.

    Raises:
        ZeroDivisor: If b is zero
    """
    quotient, remainder = div_rem(a, b)
    if rounding_up and not L.is_zero(remainder) and round_half_up_even_divisor(remainder, b):
        one = (1,) + (0,) * (len(a) - 1)
        quotient = L.add(quotient, one)
    return quotient
