"""Tests for the Uint256/Uint512 value types."""

import pytest

from safemath.errors import LengthMismatch, Overflow, ZeroValue
from safemath.uint import Ordering, Uint256, Uint512
from tests.helpers import random_uint256

UINT256_MAX = 2**256 - 1


class TestConstruction:
    """Tests for byte and integer construction."""

    def test_big_endian_bytes(self):
        """The canonical constructor reads big-endian bytes."""
        data = bytes(31) + b"\x2a"
        assert Uint256(data).to_int() == 42

    def test_little_endian_bytes(self):
        """from_bytes_le reverses the byte order before decoding."""
        data = b"\x2a" + bytes(31)
        assert Uint256.from_bytes_le(data).to_int() == 42

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_length_raises(self, length):
        with pytest.raises(LengthMismatch):
            Uint256(bytes(length))
        with pytest.raises(LengthMismatch):
            Uint256.from_bytes_le(bytes(length))

    def test_uint512_requires_64_bytes(self):
        assert Uint512(bytes(64)).is_zero()
        with pytest.raises(LengthMismatch):
            Uint512(bytes(32))

    def test_rejects_non_bytes(self):
        with pytest.raises(TypeError):
            Uint256("00" * 32)  # type: ignore[arg-type]

    def test_from_int_range(self):
        assert Uint256.from_int(UINT256_MAX) == Uint256.MAX
        with pytest.raises(Overflow):
            Uint256.from_int(UINT256_MAX + 1)
        with pytest.raises(Overflow):
            Uint256.from_int(-1)

    def test_from_u64_and_u128(self):
        assert Uint256.from_u64(2**64 - 1).to_int() == 2**64 - 1
        assert Uint512.from_u128(2**128 - 1).to_int() == 2**128 - 1
        with pytest.raises(Overflow):
            Uint256.from_u64(2**64)
        with pytest.raises(Overflow):
            Uint256.from_u128(2**128)

    def test_from_hex(self):
        assert Uint256.from_hex("0xff").to_int() == 255
        assert Uint256.from_hex("FF").to_int() == 255
        with pytest.raises(ValueError):
            Uint256.from_hex("0x")
        with pytest.raises(ValueError):
            Uint256.from_hex("0xzz")

    def test_constants(self):
        assert Uint256.ZERO.to_int() == 0
        assert Uint256.MAX.to_bytes() == b"\xff" * 32
        assert Uint512.MAX.to_int() == 2**512 - 1
        assert Uint256.LIMBS == 4
        assert Uint512.LIMBS == 8


class TestEncoding:
    """Tests for serialization back to bytes."""

    def test_to_bytes_is_big_endian(self):
        value = Uint256.from_int(0x0102)
        assert value.to_bytes()[-2:] == b"\x01\x02"
        assert value.to_bytes_le()[:2] == b"\x02\x01"

    def test_to_hex_is_zero_padded(self):
        assert Uint256.from_int(1).to_hex() == "0x" + "00" * 31 + "01"

    def test_repr_and_str(self):
        value = Uint256.from_int(7)
        assert str(value) == "7"
        assert repr(value).startswith("Uint256(0x")


class TestComparison:
    """Tests for cmp and the rich comparison operators."""

    def test_cmp_orders(self):
        a, b = Uint256.from_int(1), Uint256.from_int(2)
        assert a.cmp(b) == Ordering.LESS
        assert b.cmp(a) == Ordering.GREATER
        assert a.cmp(a) == Ordering.EQUAL

    def test_equal_iff_bytes_equal(self, rng):
        for _ in range(50):
            a, b = random_uint256(rng, 70), random_uint256(rng, 70)
            assert (a.cmp(b) == Ordering.EQUAL) == (a.to_bytes() == b.to_bytes())

    def test_cmp_matches_int_order(self, rng):
        for _ in range(50):
            a, b = random_uint256(rng), random_uint256(rng)
            expected = (a.to_int() > b.to_int()) - (a.to_int() < b.to_int())
            assert int(a.cmp(b)) == expected
            assert int(b.cmp(a)) == -expected

    def test_operators(self):
        a, b = Uint256.from_int(3), Uint256.from_int(5)
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert a != b
        assert a == 3
        assert a < 4

    def test_mixed_widths_rejected(self):
        with pytest.raises(TypeError):
            Uint256.from_int(1) + Uint512.from_int(1)
        with pytest.raises(TypeError):
            Uint256.from_int(1) < Uint512.from_int(1)

    def test_hashable(self):
        assert len({Uint256.from_int(1), Uint256.from_int(1), Uint256.from_int(2)}) == 2


class TestAddSub:
    """Tests for checked addition and subtraction."""

    def test_add(self):
        assert (Uint256.from_int(10) + Uint256.from_int(5)).to_int() == 15
        assert (Uint256.from_int(10) + 5).to_int() == 15
        assert (5 + Uint256.from_int(10)).to_int() == 15

    def test_add_overflow_raises(self):
        with pytest.raises(Overflow):
            Uint256.MAX + 1

    def test_sub_underflow_raises(self):
        with pytest.raises(Overflow):
            Uint256.from_int(5) - Uint256.from_int(10)
        with pytest.raises(Overflow):
            5 - Uint256.from_int(10)

    def test_sub_undoes_add(self, rng):
        """(a + b) - b == a whenever the sum fits."""
        for _ in range(50):
            a, b = random_uint256(rng, 255), random_uint256(rng, 255)
            assert (a + b) - b == a


class TestMul:
    """Tests for non-widening multiplication."""

    def test_mul_matches_int(self, rng):
        for _ in range(50):
            a, b = random_uint256(rng, 128), random_uint256(rng, 128)
            assert (a * b).to_int() == a.to_int() * b.to_int()

    def test_mul_at_limit(self):
        """(2^128 - 1)^2 still fits in 256 bits."""
        x = Uint256.from_int(2**128 - 1)
        assert (x * x).to_int() == (2**128 - 1) ** 2

    def test_mul_overflow_raises(self):
        with pytest.raises(Overflow):
            Uint256.from_int(2**128) * Uint256.from_int(2**128)
        with pytest.raises(Overflow):
            Uint256.MAX * 2

    def test_mul_by_zero(self):
        assert (Uint256.MAX * 0).is_zero()


class TestDiv:
    """Tests for division through the value type."""

    def test_floordiv_and_mod(self):
        q, r = divmod(Uint256.from_int(100), Uint256.from_int(7))
        assert (q.to_int(), r.to_int()) == (14, 2)
        assert (Uint256.from_int(100) // 7).to_int() == 14
        assert (Uint256.from_int(100) % 7).to_int() == 2

    def test_div_rounding(self):
        assert Uint256.from_int(3).div(Uint256.from_int(2), rounding_up=True) == 2
        assert Uint256.from_int(8).div(Uint256.from_int(3), rounding_up=True) == 3


class TestShiftsAndBits:
    """Tests for shifts, bitwise operators and bit length."""

    def test_shift_round_trip_clears_low_bits(self, rng):
        for n in (0, 1, 9, 64, 130, 255):
            x = random_uint256(rng)
            low_mask = (1 << n) - 1
            assert ((x >> n) << n).to_int() == x.to_int() & ~low_mask

    def test_shift_past_width(self):
        assert (Uint256.MAX << 256).is_zero()
        assert (Uint256.MAX >> 300).is_zero()

    def test_bitwise(self):
        a, b = Uint256.from_int(0b1100), Uint256.from_int(0b1010)
        assert (a & b).to_int() == 0b1000
        assert (a | b).to_int() == 0b1110
        assert (a ^ b).to_int() == 0b0110

    def test_bit_length(self):
        assert Uint512.from_int(1 << 300).bit_length() == 301
        with pytest.raises(ZeroValue):
            Uint256.ZERO.bit_length()


class TestConversions:
    """Tests for narrowing and widening."""

    def test_widen_zero_extends(self):
        value = Uint256.MAX
        wide = Uint512.from_uint256(value)
        assert wide.to_int() == UINT256_MAX
        assert wide.limbs[4:] == (0, 0, 0, 0)

    def test_narrow_in_range(self):
        assert Uint512.from_int(UINT256_MAX).to_uint256() == Uint256.MAX

    def test_narrow_overflow_raises(self):
        with pytest.raises(Overflow):
            Uint512.from_int(UINT256_MAX + 1).to_uint256()

    def test_as_u64_and_u128(self):
        assert Uint256.from_int(2**64 - 1).as_u64() == 2**64 - 1
        assert Uint256.from_int(2**128 - 1).as_u128() == 2**128 - 1
        with pytest.raises(Overflow):
            Uint256.from_int(2**64).as_u64()
        with pytest.raises(Overflow):
            Uint256.from_int(2**128).as_u128()

    def test_int_protocols(self):
        value = Uint256.from_int(3)
        assert int(value) == 3
        assert [10, 20, 30, 40][value] == 40
        assert bool(value)
        assert not Uint256.ZERO
