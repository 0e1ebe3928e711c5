"""Fixed-width unsigned integer value types.

WideUint is a single implementation parameterized by BITS; Uint256 and
Uint512 are its two concrete widths. Values are immutable tuples of 64-bit
limbs. Byte order only matters at the boundary: the canonical constructor
takes big-endian bytes, and from_bytes_le adapts little-endian input.

Usage pattern:
    from safemath.uint import Uint256

    a = Uint256.from_int(10**30)
    b = Uint256.from_u128(7)
    q = a.div(b, rounding_up=True)
"""

from __future__ import annotations

from typing import ClassVar, TypeVar

from safemath.errors import LengthMismatch, Overflow
from safemath.uint import engine
from safemath.uint import limbs as L
from safemath.uint.limbs import LIMB_BITS, LIMB_MASK, Limbs, Ordering

U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

W = TypeVar("W", bound="WideUint")
T = TypeVar("T", bound="WideUint")


class WideUint:
    """Unsigned integer of exactly BITS bits.

    Arithmetic never wraps: results that do not fit raise Overflow, and
    subtraction below zero raises Overflow. Operands must share a width;
    plain ints are accepted and range-checked.

    Attributes:
        BITS: Width in bits (set by subclasses)
        LIMBS: Number of 64-bit limbs
        BYTES: Encoded length in bytes
        ZERO: The value 0
        MAX: The value 2^BITS - 1
    """

    BITS: ClassVar[int]
    LIMBS: ClassVar[int]
    BYTES: ClassVar[int]
    ZERO: ClassVar[WideUint]
    MAX: ClassVar[WideUint]

    __slots__ = ("_limbs",)
    _limbs: Limbs

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.BITS <= 0 or cls.BITS % LIMB_BITS:
            raise TypeError(f"{cls.__name__}.BITS must be a positive multiple of {LIMB_BITS}")
        cls.LIMBS = cls.BITS // LIMB_BITS
        cls.BYTES = cls.BITS // 8
        cls.ZERO = cls._from_limbs(L.zero(cls.LIMBS))
        cls.MAX = cls._from_limbs((LIMB_MASK,) * cls.LIMBS)

    def __init__(self, data: bytes) -> None:
        """Create a value from exactly BYTES big-endian bytes.

        Raises:
            LengthMismatch: If len(data) != BYTES
            TypeError: If data is not bytes-like
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{type(self).__name__} requires bytes, got {type(data).__name__}")
        data = bytes(data)
        if len(data) != self.BYTES:
            raise LengthMismatch(
                f"{type(self).__name__} requires {self.BYTES} bytes, got {len(data)}"
            )
        self._limbs = tuple(
            int.from_bytes(data[self.BYTES - 8 * (i + 1) : self.BYTES - 8 * i], "big")
            for i in range(self.LIMBS)
        )

    @classmethod
    def _from_limbs(cls: type[W], limbs: Limbs) -> W:
        obj = cls.__new__(cls)
        obj._limbs = limbs
        return obj

    # --- Construction ---

    @classmethod
    def from_bytes_le(cls: type[W], data: bytes) -> W:
        """Create a value from exactly BYTES little-endian bytes.

        Raises:
            LengthMismatch: If len(data) != BYTES
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{cls.__name__} requires bytes, got {type(data).__name__}")
        return cls(bytes(data)[::-1])

    @classmethod
    def from_int(cls: type[W], value: int) -> W:
        """Create a value from a Python int.

        Raises:
            Overflow: If value is negative or exceeds MAX
            TypeError: If value is not an int
        """
        if not isinstance(value, int):
            raise TypeError(f"{cls.__name__} requires int, got {type(value).__name__}")
        if value < 0:
            raise Overflow(f"Negative value cannot be {cls.__name__}: {value}")
        if value >> cls.BITS:
            raise Overflow(f"Value exceeds {cls.__name__} max: {value}")
        return cls._from_limbs(
            tuple((value >> (LIMB_BITS * i)) & LIMB_MASK for i in range(cls.LIMBS))
        )

    @classmethod
    def from_u64(cls: type[W], value: int) -> W:
        """Zero-extend a native u64.

        Raises:
            Overflow: If value is outside [0, 2^64 - 1]
        """
        if not 0 <= value <= U64_MAX:
            raise Overflow(f"Value is not a u64: {value}")
        return cls.from_int(value)

    @classmethod
    def from_u128(cls: type[W], value: int) -> W:
        """Zero-extend a native u128.

        Raises:
            Overflow: If value is outside [0, 2^128 - 1]
        """
        if not 0 <= value <= U128_MAX:
            raise Overflow(f"Value is not a u128: {value}")
        return cls.from_int(value)

    @classmethod
    def from_hex(cls: type[W], text: str) -> W:
        """Parse a hex string, with or without a 0x prefix.

        Raises:
            ValueError: If text is not valid hex
            Overflow: If the value exceeds MAX
        """
        digits = text[2:] if text[:2].lower() == "0x" else text
        if not digits:
            raise ValueError(f"Empty hex string: {text!r}")
        return cls.from_int(int(digits, 16))

    # --- Conversion ---

    @property
    def limbs(self) -> Limbs:
        """The 64-bit limbs, least significant first."""
        return self._limbs

    def to_int(self) -> int:
        value = 0
        for i, limb in enumerate(self._limbs):
            value |= limb << (LIMB_BITS * i)
        return value

    def to_bytes(self) -> bytes:
        """Big-endian encoding, exactly BYTES long."""
        return b"".join(limb.to_bytes(8, "big") for limb in reversed(self._limbs))

    def to_bytes_le(self) -> bytes:
        """Little-endian encoding, exactly BYTES long."""
        return self.to_bytes()[::-1]

    def to_hex(self) -> str:
        """Zero-padded 0x-prefixed hex string."""
        return "0x" + self.to_bytes().hex()

    def as_u64(self) -> int:
        """Narrow to a native u64.

        Raises:
            Overflow: If any bit above bit 63 is set
        """
        if any(self._limbs[1:]):
            raise Overflow(f"{self} does not fit in u64")
        return self._limbs[0]

    def as_u128(self) -> int:
        """Narrow to a native u128.

        Raises:
            Overflow: If any bit above bit 127 is set
        """
        if any(self._limbs[2:]):
            raise Overflow(f"{self} does not fit in u128")
        return self._limbs[0] | (self._limbs[1] << LIMB_BITS)

    def convert(self, target: type[T]) -> T:
        """Convert to another width.

        Widening zero-extends. Narrowing checks that the dropped upper limbs
        are all zero before truncating.

        Raises:
            Overflow: If the value does not fit the target width
        """
        if target.LIMBS >= self.LIMBS:
            return target._from_limbs(self._limbs + L.zero(target.LIMBS - self.LIMBS))
        if any(self._limbs[target.LIMBS :]):
            raise Overflow(f"{type(self).__name__} {self} does not fit in {target.__name__}")
        return target._from_limbs(self._limbs[: target.LIMBS])

    # --- Operations ---

    def _coerce(self: W, other: WideUint | int) -> W:
        if type(other) is type(self):
            return other  # type: ignore[return-value]
        if isinstance(other, int) and not isinstance(other, bool):
            return self.from_int(other)
        if isinstance(other, WideUint):
            raise TypeError(
                f"Cannot mix {type(self).__name__} and {type(other).__name__}; convert() first"
            )
        raise TypeError(f"Unsupported operand type: {type(other).__name__}")

    def is_zero(self) -> bool:
        return L.is_zero(self._limbs)

    def cmp(self, other: WideUint | int) -> Ordering:
        """Total order over values of the same width."""
        return L.cmp(self._limbs, self._coerce(other)._limbs)

    def add(self: W, other: W | int) -> W:
        """Add. Raises Overflow if the sum needs more than BITS bits."""
        return self._from_limbs(L.add(self._limbs, self._coerce(other)._limbs))

    def sub(self: W, other: W | int) -> W:
        """Subtract. Raises Overflow if other > self."""
        return self._from_limbs(L.sub(self._limbs, self._coerce(other)._limbs))

    def mul(self: W, other: W | int) -> W:
        """Multiply without widening. Raises Overflow if the product needs more than BITS bits."""
        return self._from_limbs(engine.mul(self._limbs, self._coerce(other)._limbs))

    def div(self: W, other: W | int, rounding_up: bool = False) -> W:
        """Divide, flooring or rounding half-up.

        Raises:
            ZeroDivisor: If other is zero
        """
        return self._from_limbs(engine.div(self._limbs, self._coerce(other)._limbs, rounding_up))

    def div_rem(self: W, other: W | int) -> tuple[W, W]:
        """Floor division returning (quotient, remainder).

        Raises:
            ZeroDivisor: If other is zero
        """
        quotient, remainder = engine.div_rem(self._limbs, self._coerce(other)._limbs)
        return self._from_limbs(quotient), self._from_limbs(remainder)

    def shl(self: W, n: int) -> W:
        """Shift left, discarding bits shifted past the top."""
        return self._from_limbs(L.shl(self._limbs, n))

    def shr(self: W, n: int) -> W:
        """Shift right, discarding bits shifted past the bottom."""
        return self._from_limbs(L.shr(self._limbs, n))

    def bit_length(self) -> int:
        """1-based position of the highest set bit.

        Raises:
            ZeroValue: If the value is zero
        """
        return L.bit_length(self._limbs)

    # --- Operators ---

    def __add__(self: W, other: W | int) -> W:
        return self.add(other)

    def __radd__(self: W, other: int) -> W:
        return self._coerce(other).add(self)

    def __sub__(self: W, other: W | int) -> W:
        return self.sub(other)

    def __rsub__(self: W, other: int) -> W:
        return self._coerce(other).sub(self)

    def __mul__(self: W, other: W | int) -> W:
        return self.mul(other)

    def __rmul__(self: W, other: int) -> W:
        return self._coerce(other).mul(self)

    def __floordiv__(self: W, other: W | int) -> W:
        return self.div(other)

    def __rfloordiv__(self: W, other: int) -> W:
        return self._coerce(other).div(self)

    def __mod__(self: W, other: W | int) -> W:
        return self.div_rem(other)[1]

    def __divmod__(self: W, other: W | int) -> tuple[W, W]:
        return self.div_rem(other)

    def __lshift__(self: W, n: int) -> W:
        return self.shl(n)

    def __rshift__(self: W, n: int) -> W:
        return self.shr(n)

    def __and__(self: W, other: W | int) -> W:
        return self._from_limbs(L.bitwise_and(self._limbs, self._coerce(other)._limbs))

    def __or__(self: W, other: W | int) -> W:
        return self._from_limbs(L.bitwise_or(self._limbs, self._coerce(other)._limbs))

    def __xor__(self: W, other: W | int) -> W:
        return self._from_limbs(L.bitwise_xor(self._limbs, self._coerce(other)._limbs))

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if type(other) is type(self):
            return self._limbs == other._limbs  # type: ignore[attr-defined]
        if isinstance(other, int):
            return self.to_int() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_int())

    def _order(self, other: object) -> int | None:
        if type(other) is type(self):
            return int(L.cmp(self._limbs, other._limbs))  # type: ignore[attr-defined]
        if isinstance(other, int):
            value = self.to_int()
            return (value > other) - (value < other)
        return None

    def __lt__(self, other: object) -> bool:
        order = self._order(other)
        return NotImplemented if order is None else order < 0

    def __le__(self, other: object) -> bool:
        order = self._order(other)
        return NotImplemented if order is None else order <= 0

    def __gt__(self, other: object) -> bool:
        order = self._order(other)
        return NotImplemented if order is None else order > 0

    def __ge__(self, other: object) -> bool:
        order = self._order(other)
        return NotImplemented if order is None else order >= 0

    # --- Misc ---

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()

    def __index__(self) -> int:
        return self.to_int()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()})"

    def __str__(self) -> str:
        return str(self.to_int())


class Uint256(WideUint):
    """256-bit unsigned integer (4 limbs)."""

    BITS = 256
    __slots__ = ()


class Uint512(WideUint):
    """512-bit unsigned integer (8 limbs)."""

    BITS = 512
    __slots__ = ()

    @classmethod
    def from_uint256(cls, value: Uint256) -> Uint512:
        """Zero-extend a Uint256."""
        return value.convert(cls)

    def to_uint256(self) -> Uint256:
        """Narrow to Uint256.

        Raises:
            Overflow: If the top 256 bits are not all zero
        """
        return self.convert(Uint256)
