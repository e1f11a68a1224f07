"""Unit tests for the 128-bit integer pair."""

import numpy as np
import pytest

from arithmos import (
    CapabilityError,
    Int128,
    RepresentationOverflowError,
    Sign,
    Signed,
    UInt128,
    Unsigned,
    absolute,
    arithmetic_context,
    concrete_types,
    gcd,
    implements,
    is_divisible_by,
    is_factor_of,
    is_unit,
    lcm,
    of_sign,
    one,
    sign,
    sign_number,
    zero,
)

INT128_MIN = -(2 ** 127)
INT128_MAX = 2 ** 127 - 1


class TestConstruction:
    """Values wrap into range; extended width can be switched off."""

    def test_wraps(self):
        assert Int128(INT128_MAX) + 1 == INT128_MIN
        assert Int128(2 ** 128 + 5) == 5
        assert UInt128(-1) == 2 ** 128 - 1
        assert UInt128(0) - UInt128(1) == UInt128(2 ** 128 - 1)

    def test_accepts_numpy_integers(self):
        assert Int128(np.int64(-3)) == -3
        assert UInt128(Int128(-1)) == 2 ** 128 - 1

    def test_rejects_floats(self):
        with pytest.raises(TypeError):
            Int128(1.5)

    def test_disabled(self):
        with arithmetic_context(extended_width=False):
            with pytest.raises(CapabilityError):
                Int128(1)
            assert Int128 not in concrete_types()
        assert Int128(1) == 1
        assert Int128 in concrete_types()
        assert UInt128 in concrete_types()


class TestArithmetic:
    """Operators stay in the type."""

    def test_operators(self):
        a, b = Int128(-7), Int128(2)
        assert a + b == -5
        assert a - b == -9
        assert a * b == -14
        assert a // b == -4
        assert a % b == 1
        assert a / b == -4
        assert isinstance(a * b, Int128)

    def test_mixed_with_int(self):
        assert 3 + Int128(4) == 7
        assert 10 - UInt128(4) == 6
        assert isinstance(2 * UInt128(4), UInt128)

    def test_mixed_widths_are_rejected(self):
        with pytest.raises(TypeError):
            Int128(1) + UInt128(1)

    def test_division_by_zero(self):
        with pytest.raises(ZeroDivisionError):
            Int128(1) // Int128(0)
        with pytest.raises(ZeroDivisionError):
            UInt128(1) % UInt128(0)

    def test_ordering_and_hashing(self):
        assert Int128(-1) < Int128(0) <= Int128(0) < 1
        assert sorted([Int128(3), Int128(-2)]) == [-2, 3]
        assert hash(Int128(5)) == hash(5)
        assert len({Int128(5), Int128(5)}) == 1

    def test_conversions(self):
        assert int(Int128(-9)) == -9
        assert [10, 20, 30][Int128(1)] == 20
        assert not UInt128(0)
        assert repr(Int128(-2)) == "Int128(-2)"
        assert str(UInt128(7)) == "7"


class TestCapabilities:
    """The pair implements the traits through its own methods."""

    def test_identities(self):
        assert zero(Int128) == 0
        assert one(UInt128) == 1
        assert Int128.zero().is_zero()
        assert UInt128.one().is_one()

    def test_signed(self):
        assert implements(Int128, Signed)
        assert not implements(UInt128, Signed)
        assert implements(UInt128, Unsigned)
        assert isinstance(Int128(1), Signed)

    def test_sign(self):
        assert sign(Int128(-3)) is Sign.NEGATIVE
        assert Int128(0).sign() is Sign.ZERO
        assert Int128(8).is_positive()
        assert Int128(-8).is_negative()
        assert sign_number(Int128(-8)) == -1
        assert of_sign(Int128, Sign.NEGATIVE) == -1
        with pytest.raises(CapabilityError):
            sign(UInt128(3))

    def test_abs(self):
        assert abs(Int128(-5)) == 5
        assert absolute(Int128(5)) == 5
        assert abs(UInt128(5)) == 5
        with pytest.raises(RepresentationOverflowError):
            abs(Int128(INT128_MIN))

    def test_divisibility(self):
        assert is_factor_of(Int128(3), Int128(-12))
        assert Int128(12).is_divisible_by(Int128(4))
        assert is_divisible_by(UInt128(12), UInt128(4))
        assert is_unit(Int128(-1))
        assert not UInt128(2).is_unit()
        assert Int128(0).is_factor_of(Int128(0))

    def test_divisibility_rejects_mixed_types(self):
        with pytest.raises(CapabilityError):
            Int128(12).is_divisible_by(3)
        with pytest.raises(CapabilityError):
            UInt128(12).is_divisible_by(Int128(3))
        with pytest.raises(CapabilityError):
            is_divisible_by(Int128(12), 3)

    def test_gcd_lcm(self):
        assert gcd(UInt128(48), UInt128(18)) == 6
        assert gcd(Int128(-48), Int128(18)) == 6
        assert lcm(UInt128(4), UInt128(6)) == 12
        assert lcm(Int128(-4), Int128(6)) == 12
        assert lcm(Int128(0), Int128(6)) == 0
        big = UInt128(2 ** 127)
        assert gcd(big, UInt128(2 ** 100 * 3)) == 2 ** 100

    def test_gcd_minimum(self):
        assert gcd(Int128(INT128_MIN), Int128(6)) == 2
        with pytest.raises(RepresentationOverflowError):
            gcd(Int128(INT128_MIN), Int128(0))

    def test_gcd_rejects_mixed_types(self):
        with pytest.raises(CapabilityError):
            gcd(Int128(4), 6)
