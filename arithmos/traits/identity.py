"""
Identity traits: additive (Zero) and multiplicative (One) identities.

Any implementor must satisfy x + zero() == x and x * one() == x. Types
implementing the protocols are served by their own methods; primitive
numeric types get the literals 0 and 1 of their own type.
"""

from typing import Protocol, TypeVar, runtime_checkable

from ..numbers.primitives import literal

T = TypeVar("T")


@runtime_checkable
class Zero(Protocol):
    """Additive identity: x + 0 == 0 + x == x."""

    @classmethod
    def zero(cls): ...

    def is_zero(self) -> bool: ...


@runtime_checkable
class One(Protocol):
    """Multiplicative identity: x * 1 == 1 * x == x."""

    @classmethod
    def one(cls): ...

    def is_one(self) -> bool: ...


def zero(tp: type):
    """Additive identity of `tp`."""
    factory = getattr(tp, "zero", None)
    if callable(factory):
        return factory()
    return literal(tp, 0)


def one(tp: type):
    """Multiplicative identity of `tp`."""
    factory = getattr(tp, "one", None)
    if callable(factory):
        return factory()
    return literal(tp, 1)


def is_zero(x) -> bool:
    """Whether `x` equals the additive identity of its type."""
    method = getattr(x, "is_zero", None)
    if callable(method):
        return bool(method())
    return bool(x == zero(type(x)))


def is_one(x) -> bool:
    """Whether `x` equals the multiplicative identity of its type."""
    method = getattr(x, "is_one", None)
    if callable(method):
        return bool(method())
    return bool(x == one(type(x)))
