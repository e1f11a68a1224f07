"""
Sign of a value, independent of its magnitude.

`Sign` is a closed three-valued enumeration. Under multiplication it forms
a commutative monoid with identity POSITIVE and absorbing element ZERO;
{NEGATIVE, POSITIVE} is a group isomorphic to {-1, +1}.
"""

from enum import Enum
from functools import total_ordering


@total_ordering
class Sign(Enum):
    """Sign classification: NEGATIVE < ZERO < POSITIVE."""
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def zero(cls) -> "Sign":
        """Additive-style identity; the sign of zero."""
        return cls.ZERO

    def is_zero(self) -> bool:
        return self is Sign.ZERO

    @classmethod
    def one(cls) -> "Sign":
        """Identity of sign multiplication."""
        return cls.POSITIVE

    def is_one(self) -> bool:
        return self is Sign.POSITIVE

    @classmethod
    def from_int(cls, value: int) -> "Sign":
        """Classify an integer by comparing it against zero."""
        if value < 0:
            return cls.NEGATIVE
        if value > 0:
            return cls.POSITIVE
        return cls.ZERO

    def abs(self) -> "Sign":
        """
        Absolute sign: ZERO stays ZERO, anything else becomes POSITIVE.

        This answers "is it zero or not"; it is not a numeric magnitude.
        """
        if self is Sign.ZERO:
            return Sign.ZERO
        return Sign.POSITIVE

    def __abs__(self) -> "Sign":
        return self.abs()

    def __mul__(self, other):
        if not isinstance(other, Sign):
            return NotImplemented
        if self is Sign.ZERO or other is Sign.ZERO:
            return Sign.ZERO
        if self is other:
            return Sign.POSITIVE
        return Sign.NEGATIVE

    def __neg__(self) -> "Sign":
        if self is Sign.NEGATIVE:
            return Sign.POSITIVE
        if self is Sign.POSITIVE:
            return Sign.NEGATIVE
        return Sign.ZERO

    def __lt__(self, other):
        if not isinstance(other, Sign):
            return NotImplemented
        return self.value < other.value

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"Sign.{self.name}"
