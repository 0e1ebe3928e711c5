"""Limb-level primitives for fixed-width unsigned integers.

A value is a tuple of 64-bit limbs, least-significant limb first. Every
function here takes and returns tuples of the same length; the length is
the width. Results never exceed the width: operations that would need
more bits raise Overflow instead.
"""

from __future__ import annotations

from enum import IntEnum

from safemath.errors import Overflow, ShiftAmountInvalid, ZeroValue

LIMB_BITS = 64
LIMB_MASK = (1 << LIMB_BITS) - 1

Limbs = tuple[int, ...]


class Ordering(IntEnum):
    """Result of comparing two values."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def zero(n_limbs: int) -> Limbs:
    """Return the zero value with n_limbs limbs."""
    return (0,) * n_limbs


def is_zero(a: Limbs) -> bool:
    """True if every limb is zero."""
    return not any(a)


def cmp(a: Limbs, b: Limbs) -> Ordering:
    """Compare two values of equal width, most significant limb first.

    Equivalent to a lexicographic comparison of the big-endian bytes.
    """
    for i in range(len(a) - 1, -1, -1):
        if a[i] > b[i]:
            return Ordering.GREATER
        if a[i] < b[i]:
            return Ordering.LESS
    return Ordering.EQUAL


def add(a: Limbs, b: Limbs) -> Limbs:
    """Add limb-wise from least significant, propagating the carry.

    Raises:
        Overflow: If a carry escapes the most significant limb
    """
    result = []
    carry = 0
    for x, y in zip(a, b):
        total = x + y + carry
        result.append(total & LIMB_MASK)
        carry = total >> LIMB_BITS
    if carry:
        raise Overflow(f"Addition overflows {len(a) * LIMB_BITS} bits")
    return tuple(result)


def sub(a: Limbs, b: Limbs) -> Limbs:
    """Subtract b from a limb-wise, propagating the borrow.

    Raises:
        Overflow: If b > a (borrow underflow)
    """
    if cmp(a, b) == Ordering.LESS:
        raise Overflow("Subtraction underflow: subtrahend exceeds minuend")
    result = []
    borrow = 0
    for x, y in zip(a, b):
        diff = x - y - borrow
        if diff < 0:
            diff += 1 << LIMB_BITS
            borrow = 1
        else:
            borrow = 0
        result.append(diff)
    return tuple(result)


def bitwise_and(a: Limbs, b: Limbs) -> Limbs:
    return tuple(x & y for x, y in zip(a, b))


def bitwise_or(a: Limbs, b: Limbs) -> Limbs:
    return tuple(x | y for x, y in zip(a, b))


def bitwise_xor(a: Limbs, b: Limbs) -> Limbs:
    return tuple(x ^ y for x, y in zip(a, b))


def bit_length(a: Limbs) -> int:
    """Return the 1-based position of the highest set bit.

    Raises:
        ZeroValue: If a is zero
    """
    for i in range(len(a) - 1, -1, -1):
        if a[i]:
            return i * LIMB_BITS + a[i].bit_length()
    raise ZeroValue("Bit length of zero is undefined")


def set_bit(a: Limbs, position: int) -> Limbs:
    """Return a copy of a with the bit at position (0-based) set."""
    limb_index, bit = divmod(position, LIMB_BITS)
    if limb_index >= len(a):
        raise Overflow(f"Bit {position} is outside {len(a) * LIMB_BITS} bits")
    result = list(a)
    result[limb_index] |= 1 << bit
    return tuple(result)


def is_odd(a: Limbs) -> bool:
    return bool(a[0] & 1)


# --- Shifts ---
#
# A shift by n is a whole-limb index remap (n // 64 limbs, zero fill)
# followed by a sub-limb shift (n % 64 bits) that pulls the spilled bits in
# from the neighbouring limb.


def _shl_small(a: Limbs, bits: int) -> Limbs:
    """Shift left by fewer than LIMB_BITS bits, dropping bits past the top."""
    if not 0 <= bits < LIMB_BITS:
        raise ShiftAmountInvalid(f"Sub-limb shift amount must be in [0, 64), got {bits}")
    if bits == 0:
        return a
    result = []
    spill = 0
    for limb in a:
        result.append(((limb << bits) & LIMB_MASK) | spill)
        spill = limb >> (LIMB_BITS - bits)
    return tuple(result)


def _shr_small(a: Limbs, bits: int) -> Limbs:
    """Shift right by fewer than LIMB_BITS bits, dropping bits past the bottom."""
    if not 0 <= bits < LIMB_BITS:
        raise ShiftAmountInvalid(f"Sub-limb shift amount must be in [0, 64), got {bits}")
    if bits == 0:
        return a
    result = [0] * len(a)
    spill = 0
    for i in range(len(a) - 1, -1, -1):
        limb = a[i]
        result[i] = (limb >> bits) | spill
        spill = (limb << (LIMB_BITS - bits)) & LIMB_MASK
    return tuple(result)


def shl(a: Limbs, n: int) -> Limbs:
    """Shift left by n bits. Shifting by the full width or more yields zero."""
    if n < 0:
        raise ValueError(f"Shift amount must be non-negative, got {n}")
    width = len(a)
    if n >= width * LIMB_BITS:
        return zero(width)
    whole, bits = divmod(n, LIMB_BITS)
    moved = (0,) * whole + a[: width - whole]
    return _shl_small(moved, bits)


def shr(a: Limbs, n: int) -> Limbs:
    """Shift right by n bits. Shifting by the full width or more yields zero."""
    if n < 0:
        raise ValueError(f"Shift amount must be non-negative, got {n}")
    width = len(a)
    if n >= width * LIMB_BITS:
        return zero(width)
    whole, bits = divmod(n, LIMB_BITS)
    moved = a[whole:] + (0,) * whole
    return _shr_small(moved, bits)
