"""18-decimal fixed-point values.

FixedDecimal is an unsigned scaled integer: the raw u128 value r represents
r / 10^18. SignedDecimal pairs a FixedDecimal magnitude with a sign flag so
that series evaluation can carry negative partial sums exactly.

Products and quotients are computed natively while the intermediate fits in
u128, and are promoted through mul_div_u128 (256/512-bit) only when it does
not.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import ClassVar

from safemath.errors import Overflow, ZeroDivisor
from safemath.uint.mul_div import mul_div_u128
from safemath.uint.wide import U128_MAX

__all__ = [
    "FixedDecimal",
    "SignedDecimal",
    "ONE_18",
    "DECIMALS",
]

DECIMALS = 18
ONE_18 = 10**DECIMALS

_DIGITS = "0123456789"


def _scan_digits(text: str, source: str) -> int:
    value = 0
    for ch in text:
        if ch not in _DIGITS:
            raise ValueError(f"Invalid character {ch!r} in decimal literal {source!r}")
        value = value * 10 + (ord(ch) - ord("0"))
    return value


class FixedDecimal:
    """Unsigned 18-decimal fixed-point number stored as a u128.

    Example: 1.5 is stored as 1_500_000_000_000_000_000

    Attributes:
        value: The raw scaled integer (read-only)
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int) -> None:
        """Create from a raw scaled value.

        Raises:
            Overflow: If value is outside [0, 2^128 - 1]
            TypeError: If value is not an int
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"FixedDecimal requires int, got {type(value).__name__}")
        if not 0 <= value <= U128_MAX:
            raise Overflow(f"FixedDecimal raw value outside u128: {value}")
        self._value = value

    @property
    def value(self) -> int:
        """The raw scaled integer."""
        return self._value

    # --- Construction ---

    @classmethod
    def from_raw(cls, raw: int) -> FixedDecimal:
        """Create from a raw value already scaled by 10^18."""
        return cls(raw)

    @classmethod
    def from_int(cls, i: int) -> FixedDecimal:
        """Create from a whole number (scaled by 10^18)."""
        return cls(i * cls.ONE)

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> FixedDecimal:
        """Create numerator / denominator, floored to 18 decimals.

        Raises:
            ZeroDivisor: If denominator is zero
            Overflow: If an operand or the result is outside u128
        """
        return cls(mul_div_u128(numerator, cls.ONE, denominator))

    @classmethod
    def from_str(cls, text: str) -> FixedDecimal:
        """Parse a decimal literal such as "1.5", "42" or ".25".

        Fractional digits beyond the 18th are truncated.

        Raises:
            ValueError: If text is not a plain non-negative decimal literal
            Overflow: If the value exceeds the u128 range
        """
        stripped = text.strip()
        whole, _, fraction = stripped.partition(".")
        if not whole and not fraction:
            raise ValueError(f"Empty decimal literal: {text!r}")
        integer_part = _scan_digits(whole, text)
        fraction_part = _scan_digits(fraction[:DECIMALS].ljust(DECIMALS, "0"), text)
        # Still validate the truncated tail
        _scan_digits(fraction[DECIMALS:], text)
        return cls(integer_part * cls.ONE + fraction_part)

    @classmethod
    def from_decimal(cls, d: Decimal) -> FixedDecimal:
        """Create from a decimal.Decimal, rounding half-up to 18 decimals.

        Raises:
            ValueError: If d is negative
            Overflow: If the scaled value exceeds the u128 range
        """
        if d < 0:
            raise ValueError(f"FixedDecimal.from_decimal requires non-negative input, got {d}")
        # u128 needs 39 digits; the default context keeps only 28
        with localcontext() as ctx:
            ctx.prec = 40
            scaled = d * cls.ONE
            if scaled > U128_MAX:
                raise Overflow(f"FixedDecimal raw value outside u128: {scaled}")
            scaled = scaled.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return cls(int(scaled))

    @classmethod
    def zero(cls) -> FixedDecimal:
        return cls(0)

    @classmethod
    def one(cls) -> FixedDecimal:
        return cls(cls.ONE)

    # --- Conversion ---

    def to_decimal(self) -> Decimal:
        """Convert to Decimal for display."""
        with localcontext() as ctx:
            ctx.prec = 40
            return Decimal(self._value) / Decimal(self.ONE)

    def floor(self) -> int:
        """Largest whole number not above self."""
        return self._value // self.ONE

    def ceil(self) -> int:
        """Smallest whole number not below self."""
        return -(-self._value // self.ONE)

    def to_int(self) -> int:
        """Whole part, truncating the fraction."""
        return self.floor()

    def is_zero(self) -> bool:
        return self._value == 0

    # --- Arithmetic ---

    def add(self, other: FixedDecimal) -> FixedDecimal:
        """Add. Raises Overflow if the sum leaves the u128 range."""
        return FixedDecimal(self._value + other._value)

    def sub(self, other: FixedDecimal) -> FixedDecimal:
        """Subtract.

        Raises:
            Overflow: If other > self
        """
        if other._value > self._value:
            raise Overflow(f"FixedDecimal underflow: {self} - {other}")
        return FixedDecimal(self._value - other._value)

    def mul(self, other: FixedDecimal, rounding_up: bool = False) -> FixedDecimal:
        """Multiply: (a * b) / 10^18, floored or rounded half-up."""
        product = self._value * other._value
        if product <= U128_MAX and not rounding_up:
            return FixedDecimal(product // self.ONE)
        return FixedDecimal(mul_div_u128(self._value, other._value, self.ONE, rounding_up))

    def div(self, other: FixedDecimal, rounding_up: bool = False) -> FixedDecimal:
        """Divide: (a * 10^18) / b, floored or rounded half-up.

        Raises:
            ZeroDivisor: If other is zero
        """
        if other._value == 0:
            raise ZeroDivisor(f"FixedDecimal division by zero: {self} / 0")
        numerator = self._value * self.ONE
        if numerator <= U128_MAX and not rounding_up:
            return FixedDecimal(numerator // other._value)
        return FixedDecimal(mul_div_u128(self._value, self.ONE, other._value, rounding_up))

    def mul_int(self, n: int) -> FixedDecimal:
        """Multiply by a whole number."""
        return FixedDecimal(self._value * n)

    def div_int(self, n: int) -> FixedDecimal:
        """Divide by a whole number, flooring.

        Raises:
            ZeroDivisor: If n is zero
        """
        if n == 0:
            raise ZeroDivisor(f"FixedDecimal division by zero: {self} / 0")
        return FixedDecimal(self._value // n)

    def __add__(self, other: FixedDecimal) -> FixedDecimal:
        return self.add(other)

    def __sub__(self, other: FixedDecimal) -> FixedDecimal:
        return self.sub(other)

    def __mul__(self, other: FixedDecimal) -> FixedDecimal:
        return self.mul(other)

    def __truediv__(self, other: FixedDecimal) -> FixedDecimal:
        return self.div(other)

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._value >= other._value

    def __repr__(self) -> str:
        return f"FixedDecimal({self._value})"

    def __str__(self) -> str:
        whole, fraction = divmod(self._value, self.ONE)
        if fraction == 0:
            return str(whole)
        return f"{whole}.{fraction:0{DECIMALS}d}".rstrip("0")


@dataclass(frozen=True)
class SignedDecimal:
    """Fixed-point value with an explicit sign.

    Zero is always stored as non-negative, so equality is structural.

    Attributes:
        magnitude: Absolute value
        negative: True for values below zero
    """

    magnitude: FixedDecimal
    negative: bool = False

    def __post_init__(self) -> None:
        if self.negative and self.magnitude.is_zero():
            object.__setattr__(self, "negative", False)

    @classmethod
    def zero(cls) -> SignedDecimal:
        return cls(FixedDecimal.zero())

    @classmethod
    def one(cls) -> SignedDecimal:
        return cls(FixedDecimal.one())

    @property
    def value(self) -> int:
        """Raw scaled value as a signed Python int."""
        return -self.magnitude.value if self.negative else self.magnitude.value

    def is_zero(self) -> bool:
        return self.magnitude.is_zero()

    def __neg__(self) -> SignedDecimal:
        return SignedDecimal(self.magnitude, not self.negative)

    def add(self, other: SignedDecimal) -> SignedDecimal:
        """Add, choosing the result sign from the larger magnitude."""
        if self.negative == other.negative:
            return SignedDecimal(self.magnitude.add(other.magnitude), self.negative)
        if self.magnitude >= other.magnitude:
            return SignedDecimal(self.magnitude.sub(other.magnitude), self.negative)
        return SignedDecimal(other.magnitude.sub(self.magnitude), other.negative)

    def sub(self, other: SignedDecimal) -> SignedDecimal:
        return self.add(-other)

    def mul(self, other: SignedDecimal | FixedDecimal) -> SignedDecimal:
        """Multiply, flooring the magnitude."""
        if isinstance(other, FixedDecimal):
            other = SignedDecimal(other)
        return SignedDecimal(
            self.magnitude.mul(other.magnitude), self.negative != other.negative
        )

    def div_int(self, n: int) -> SignedDecimal:
        """Divide by a positive whole number, flooring the magnitude."""
        return SignedDecimal(self.magnitude.div_int(n), self.negative)

    def to_fixed(self) -> FixedDecimal:
        """Return the magnitude of a non-negative value.

        Raises:
            Overflow: If the value is negative
        """
        if self.negative:
            raise Overflow(f"Negative value has no unsigned representation: {self}")
        return self.magnitude

    def __add__(self, other: SignedDecimal) -> SignedDecimal:
        return self.add(other)

    def __sub__(self, other: SignedDecimal) -> SignedDecimal:
        return self.sub(other)

    def __str__(self) -> str:
        return f"-{self.magnitude}" if self.negative else str(self.magnitude)
