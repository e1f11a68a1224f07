"""
Signed and Unsigned number traits.

A Signed type supplies one genuinely type-specific operation, `sign()`.
Everything else (`of_sign`, `abs`, `sign_number`, `is_positive`,
`is_negative`) is derived from it once, in `SignedMixin` for types that
implement the protocol and in the free functions below for primitives.

Float classification policy
---------------------------
A float that compares equal to 0.0 is ZERO, whatever its sign bit, so
-0.0 classifies as ZERO. Any other float, NaN included, takes its sign from
the sign bit: -0.5 and -NaN are NEGATIVE, +NaN is POSITIVE.
"""

import logging
import math
from abc import ABC
from functools import singledispatch
from typing import Protocol, runtime_checkable

import numpy as np

from ..core.errors import CapabilityError, RepresentationOverflowError
from ..numbers.primitives import kind_of, literal, width_of
from ..numbers.sign import Sign
from .algebra import Number, has_operators, implements
from .identity import one, zero

logger = logging.getLogger(__name__)

FLOAT_SIGN_POLICY = "negative-zero-is-zero"


@runtime_checkable
class Signed(Number, Protocol):
    """Number with meaningful negation and a sign classification."""

    def __neg__(self): ...

    def sign(self) -> Sign: ...


class Unsigned(ABC):
    """
    Marker for Numbers that never hold negative values.

    Generic algorithms can skip negation handling for these types. numpy's
    unsigned integers are registered as virtual subclasses.
    """


Unsigned.register(np.unsignedinteger)


def _negate_checked(x):
    """Negate `x`, refusing the fixed-width minimum whose negation wraps."""
    width = width_of(type(x))
    if width is not None and int(x) == width.min:
        logger.debug("refusing to negate the minimum of %s", type(x).__name__)
        raise RepresentationOverflowError(
            f"-({x}) is not representable in {type(x).__name__}"
        )
    return -x


class SignedMixin:
    """Operations derived from `sign()`, for classes implementing Signed."""

    @classmethod
    def of_sign(cls, s: Sign):
        """Canonical representative of a sign: one(), zero() or -one()."""
        if s is Sign.POSITIVE:
            return cls.one()
        if s is Sign.ZERO:
            return cls.zero()
        return -cls.one()

    def abs(self):
        if self.sign() is Sign.NEGATIVE:
            return _negate_checked(self)
        return self

    def __abs__(self):
        return self.abs()

    def sign_number(self):
        """Signum of the value in its own type."""
        return type(self).of_sign(self.sign())

    def is_positive(self) -> bool:
        return self.sign() is Sign.POSITIVE

    def is_negative(self) -> bool:
        return self.sign() is Sign.NEGATIVE


@singledispatch
def sign(x) -> Sign:
    """
    Classify the sign of a value.

    Integers compare against zero. Floats follow the module's float
    classification policy. Types implementing Signed use their own sign().

    Raises:
        CapabilityError: If the value's type is not Signed
    """
    method = getattr(x, "sign", None)
    if callable(method):
        return method()
    raise CapabilityError(type(x), "Signed")


@sign.register(int)
@sign.register(np.signedinteger)
def _sign_integer(x) -> Sign:
    if x < 0:
        return Sign.NEGATIVE
    if x > 0:
        return Sign.POSITIVE
    return Sign.ZERO


@sign.register(float)
def _sign_float(x: float) -> Sign:
    if x == 0.0:
        return Sign.ZERO
    return Sign.NEGATIVE if math.copysign(1.0, x) < 0 else Sign.POSITIVE


@sign.register(np.floating)
def _sign_numpy_float(x) -> Sign:
    if x == 0:
        return Sign.ZERO
    return Sign.NEGATIVE if np.signbit(x) else Sign.POSITIVE


@sign.register(np.unsignedinteger)
def _sign_unsigned(x) -> Sign:
    raise CapabilityError(type(x), "Signed", "unsigned types have no sign")


def is_signed_type(tp: type) -> bool:
    kind = kind_of(tp)
    if kind is not None and getattr(tp, "numeric_kind", None) is None:
        return kind.is_signed
    return (
        implements(tp, Number)
        and has_operators(tp, ("__neg__",))
        and callable(getattr(tp, "sign", None))
    )


def is_unsigned_type(tp: type) -> bool:
    return isinstance(tp, type) and issubclass(tp, Unsigned) and implements(tp, Number)


def of_sign(tp: type, s: Sign):
    """
    Canonical representative of `s` in type `tp`: 1, 0 or -1.

    Raises:
        CapabilityError: If tp is not Signed
    """
    method = getattr(tp, "of_sign", None)
    if callable(method):
        return method(s)
    if not is_signed_type(tp):
        raise CapabilityError(tp, "Signed")
    if s is Sign.POSITIVE:
        return one(tp)
    if s is Sign.ZERO:
        return zero(tp)
    return literal(tp, -1)


def absolute(x):
    """
    Absolute value: `x` itself unless its sign is NEGATIVE, else `-x`.

    Raises:
        CapabilityError: If the value's type is not Signed
        RepresentationOverflowError: For the minimum of a fixed-width
            signed type, whose negation does not fit
    """
    if isinstance(x, SignedMixin):
        return x.abs()
    if sign(x) is Sign.NEGATIVE:
        return _negate_checked(x)
    return x


def sign_number(x):
    """Signum: of_sign(type(x), sign(x))."""
    method = getattr(x, "sign_number", None)
    if callable(method):
        return method()
    return of_sign(type(x), sign(x))


def is_positive(x) -> bool:
    return sign(x) is Sign.POSITIVE


def is_negative(x) -> bool:
    return sign(x) is Sign.NEGATIVE
