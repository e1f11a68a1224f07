"""
Integer and Euclidean traits.

`Integer` has one primitive, `is_factor_of`; `is_divisible_by` and
`is_unit` are derived from it. `Euclidean` adds gcd and lcm.

Fixed-width integers compute gcd on their magnitudes widened to Python
ints, then cast back. The only results that do not fit are gcd(MIN, 0) and
gcd(MIN, MIN) of a signed type, which raise RepresentationOverflowError
instead of wrapping.
"""

import logging
from typing import Protocol, runtime_checkable

from ..core.config import ArithmeticConfig, GcdStrategy
from ..core.errors import CapabilityError, RepresentationOverflowError
from ..funcs.gcd import binary_gcd, euclid_gcd, lcm_from_gcd
from ..numbers.primitives import NumericKind, kind_of, width_of
from .algebra import Number, implements
from .identity import is_zero, one, zero
from .signed import absolute

logger = logging.getLogger(__name__)


@runtime_checkable
class Integer(Number, Protocol):
    """Number with divisibility: we can look for common factors."""

    def is_factor_of(self, other) -> bool: ...


@runtime_checkable
class Euclidean(Integer, Protocol):
    """Integer admitting gcd and lcm."""

    def gcd(self, other): ...

    def lcm(self, other): ...


class IntegerMixin:
    """Operations derived from `is_factor_of`."""

    def is_divisible_by(self, other) -> bool:
        return is_factor_of(other, self)

    def is_unit(self) -> bool:
        return self.is_factor_of(type(self).one())


def _integer_kind(tp: type):
    kind = kind_of(tp)
    if kind is None or not kind.is_integer:
        return None
    return kind


def is_integer_type(tp: type) -> bool:
    if _integer_kind(tp) is not None:
        return True
    return implements(tp, Number) and callable(getattr(tp, "is_factor_of", None))


def is_euclidean_type(tp: type) -> bool:
    if _integer_kind(tp) is not None:
        return True
    return (
        is_integer_type(tp)
        and callable(getattr(tp, "gcd", None))
        and callable(getattr(tp, "lcm", None))
    )


def _common_type(a, b, capability: str) -> type:
    tp = type(a)
    if type(b) is not tp:
        raise CapabilityError(
            tp, capability, f"operands must share a type, got {tp.__name__} and {type(b).__name__}"
        )
    return tp


def is_factor_of(a, b) -> bool:
    """
    Whether `a` divides `b` with zero remainder.

    Zero divides only zero.

    Raises:
        CapabilityError: If the operands are not integers of one type
    """
    method = getattr(a, "is_factor_of", None)
    if callable(method):
        return bool(method(b))
    tp = _common_type(a, b, "Integer")
    kind = kind_of(tp)
    if kind is None:
        if not callable(getattr(tp, "__mod__", None)):
            raise CapabilityError(tp, "Integer")
    elif not kind.is_integer:
        raise CapabilityError(tp, "Integer")
    if is_zero(a):
        return is_zero(b)
    return is_zero(b % a)


def is_divisible_by(a, b) -> bool:
    """Whether `a` is a multiple of `b`."""
    return is_factor_of(b, a)


def is_unit(a) -> bool:
    """Whether `a` divides the multiplicative identity."""
    method = getattr(a, "is_unit", None)
    if callable(method):
        return bool(method())
    return is_factor_of(a, one(type(a)))


def fixed_width_gcd(a: int, b: int, tp: type):
    """
    Gcd of two integer values of a bounded type, returned as `tp`.

    Args:
        a: First operand as a Python int
        b: Second operand as a Python int
        tp: Fixed-width type of the operands

    Raises:
        RepresentationOverflowError: If the gcd exceeds tp's maximum
    """
    x = -a if a < 0 else a
    y = -b if b < 0 else b
    if ArithmeticConfig.get_gcd_strategy() is GcdStrategy.BINARY:
        g = binary_gcd(x, y)
    else:
        g = euclid_gcd(x, y)

    width = width_of(tp)
    if width is not None and g > width.max:
        logger.debug("gcd(%d, %d) = %d exceeds %s range", a, b, g, tp.__name__)
        raise RepresentationOverflowError(
            f"gcd({a}, {b}) = {g} is not representable in {tp.__name__}"
        )
    return tp(g)


def gcd(a, b):
    """
    Greatest common divisor, non-negative for signed integers.

    gcd(a, 0) == |a| and gcd(0, 0) == 0. numpy integers use binary gcd
    (or Euclid, per ArithmeticConfig); Python ints use the Euclidean
    algorithm. Other types use their own gcd() or, failing that, the
    reference Euclidean algorithm on their remainder.

    Raises:
        CapabilityError: If the operands are not Euclidean or differ in type
        RepresentationOverflowError: If the gcd does not fit a fixed width
    """
    method = getattr(a, "gcd", None)
    if callable(method):
        return method(b)
    tp = _common_type(a, b, "Euclidean")
    kind = kind_of(tp)
    if kind is NumericKind.FLOAT:
        raise CapabilityError(tp, "Euclidean", "floating-point types have no gcd")
    if kind is None:
        if not callable(getattr(tp, "__mod__", None)):
            raise CapabilityError(tp, "Euclidean")
        return euclid_gcd(a, b)
    if width_of(tp) is None:
        return euclid_gcd(abs(a), abs(b))
    return fixed_width_gcd(int(a), int(b), tp)


def lcm(a, b):
    """
    Least common multiple: |a| / gcd(a, b) * |b|.

    lcm(a, 0) == lcm(0, b) == 0. Overflow of the product follows the
    operand type's own policy (numpy wraps with a RuntimeWarning).

    Raises:
        CapabilityError: If the operands are not Euclidean or differ in type
        RepresentationOverflowError: If a magnitude does not fit the type
    """
    method = getattr(a, "lcm", None)
    if callable(method):
        return method(b)
    tp = _common_type(a, b, "Euclidean")
    if is_zero(a) or is_zero(b):
        return zero(tp)
    g = gcd(a, b)
    if kind_of(tp) is NumericKind.SIGNED_INT:
        a, b = absolute(a), absolute(b)
    return lcm_from_gcd(a, b, g)
