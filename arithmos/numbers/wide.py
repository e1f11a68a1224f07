"""
Extended-width integers: Int128 and UInt128.

numpy has no 128-bit integer scalars, so this pair is implemented in pure
Python on top of int. Values wrap modulo 2**128 (two's complement for
Int128), the same overflow policy numpy applies to its fixed-width types.
Division and remainder floor like Python and numpy integers; dividing by
zero raises ZeroDivisionError.

Both classes implement the capability protocols through their own methods
and are only constructible while ArithmeticConfig has extended width
enabled.
"""

import operator
from functools import total_ordering

import numpy as np

from ..core.config import ArithmeticConfig
from ..core.errors import CapabilityError
from ..funcs.gcd import lcm_from_gcd
from ..traits.integer import IntegerMixin, fixed_width_gcd
from ..traits.signed import SignedMixin, Unsigned
from .primitives import IntegerWidth, NumericKind
from .sign import Sign


def _binary(op):
    def forward(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(op(self._value, value))

    def reverse(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return type(self)(op(value, self._value))

    return forward, reverse


@total_ordering
class _FixedWidthInteger(IntegerMixin):
    """Shared machinery for the 128-bit integers."""

    width: IntegerWidth
    numeric_kind: NumericKind

    def __init__(self, value=0):
        if not ArithmeticConfig.has_extended_width():
            raise CapabilityError(
                type(self), "extended-width arithmetic", "disabled in ArithmeticConfig"
            )
        if isinstance(value, _FixedWidthInteger):
            value = value._value
        self._value = self._wrap(operator.index(value))

    @classmethod
    def _wrap(cls, value: int) -> int:
        bits = cls.width.bits
        value &= (1 << bits) - 1
        if cls.width.min < 0 and value > cls.width.max:
            value -= 1 << bits
        return value

    def _coerce(self, other):
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, (int, np.integer)) and not isinstance(other, bool):
            return int(other)
        return NotImplemented

    def _same(self, other):
        if not isinstance(other, type(self)):
            raise CapabilityError(
                type(self), "Euclidean",
                f"operands must share a type, got {type(other).__name__}",
            )
        return other

    # Identities

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    def is_zero(self) -> bool:
        return self._value == 0

    def is_one(self) -> bool:
        return self._value == 1

    # Arithmetic

    __add__, __radd__ = _binary(operator.add)
    __sub__, __rsub__ = _binary(operator.sub)
    __mul__, __rmul__ = _binary(operator.mul)
    __floordiv__, __rfloordiv__ = _binary(operator.floordiv)
    __mod__, __rmod__ = _binary(operator.mod)
    # Division stays in the type
    __truediv__, __rtruediv__ = __floordiv__, __rfloordiv__

    def __pos__(self):
        return self

    def __eq__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value == value

    def __lt__(self, other):
        value = self._coerce(other)
        if value is NotImplemented:
            return NotImplemented
        return self._value < value

    def __hash__(self):
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    # Integer / Euclidean

    def is_factor_of(self, other) -> bool:
        other = self._same(other)
        if self._value == 0:
            return other._value == 0
        return other._value % self._value == 0

    def gcd(self, other):
        other = self._same(other)
        return fixed_width_gcd(self._value, other._value, type(self))

    def lcm(self, other):
        other = self._same(other)
        if self.is_zero() or other.is_zero():
            return type(self).zero()
        return lcm_from_gcd(abs(self), abs(other), self.gcd(other))


class Int128(SignedMixin, _FixedWidthInteger):
    """Signed 128-bit integer, two's complement."""

    width = IntegerWidth(128, -(1 << 127), (1 << 127) - 1)
    numeric_kind = NumericKind.SIGNED_INT

    def __neg__(self):
        return Int128(-self._value)

    def sign(self) -> Sign:
        return Sign.from_int(self._value)


class UInt128(_FixedWidthInteger, Unsigned):
    """Unsigned 128-bit integer."""

    width = IntegerWidth(128, 0, (1 << 128) - 1)
    numeric_kind = NumericKind.UNSIGNED_INT

    def __abs__(self):
        return self
