"""
Algebraic hierarchy: Group -> Ring -> Number.

These traits add no methods of their own. They compose the identities with
the operators generic code needs, so an algorithm can ask for the minimum
capability it uses (`pow` only needs a Ring and therefore works for
matrices and polynomials as well as scalars).

Composition is structural. Nothing declares itself a Ring: a type is one
when it has the operators and identities, which `implements` checks.
"""

from typing import Protocol, runtime_checkable

from ..numbers.primitives import kind_of
from .identity import One, Zero


@runtime_checkable
class Group(Zero, Protocol):
    """Equality, an additive identity, addition and subtraction."""

    def __eq__(self, other) -> bool: ...

    def __add__(self, other): ...

    def __sub__(self, other): ...


@runtime_checkable
class Ring(Group, One, Protocol):
    """
    Group closed under an associative multiplication with identity.

    Multiplication is not assumed to be commutative or invertible.
    """

    def __mul__(self, other): ...


@runtime_checkable
class Number(Ring, Protocol):
    """
    Ring with division and remainder.

    Division follows the concrete type's own domain: float division by zero
    gives inf/nan under numpy, integer division by zero is the integer
    type's own error.
    """

    def __truediv__(self, other): ...

    def __mod__(self, other): ...


# Operators each trait needs on top of its parents
_OPERATORS = {
    Zero: (),
    One: (),
    Group: ("__eq__", "__add__", "__sub__"),
    Ring: ("__eq__", "__add__", "__sub__", "__mul__"),
    Number: ("__eq__", "__add__", "__sub__", "__mul__", "__truediv__", "__mod__"),
}

_IDENTITIES = {
    Zero: ("zero",),
    One: ("one",),
    Group: ("zero",),
    Ring: ("zero", "one"),
    Number: ("zero", "one"),
}


def has_identity(tp: type, name: str) -> bool:
    """Whether `tp` has the identity `name` ('zero' or 'one')."""
    if kind_of(tp) is not None:
        return True
    return callable(getattr(tp, name, None)) and callable(getattr(tp, f"is_{name}", None))


def has_operators(tp: type, names) -> bool:
    return all(callable(getattr(tp, name, None)) for name in names)


def implements(tp: type, trait) -> bool:
    """
    Check structurally whether `tp` satisfies an algebraic trait.

    Primitive numeric types count as having identities through the
    primitive registry. Signed, Unsigned, Integer and Euclidean are
    accepted too and delegate to their own modules.

    Args:
        tp: Type to check
        trait: One of the trait protocols

    Returns:
        True if every operator and identity the trait requires is present
    """
    if trait in _OPERATORS:
        return has_operators(tp, _OPERATORS[trait]) and all(
            has_identity(tp, name) for name in _IDENTITIES[trait]
        )

    from . import integer, signed

    checks = {
        signed.Signed: signed.is_signed_type,
        signed.Unsigned: signed.is_unsigned_type,
        integer.Integer: integer.is_integer_type,
        integer.Euclidean: integer.is_euclidean_type,
    }
    if trait not in checks:
        raise ValueError(f"Unknown trait: {trait!r}")
    return checks[trait](tp)


def divide(a, b):
    """
    Number division in the operands' own domain.

    Integer categories divide with `//`, which is exact where lcm uses it
    to divide an operand by the gcd. Floats and other types use `/`.
    """
    kind = kind_of(type(a))
    if kind is not None and kind.is_integer:
        return a // b
    return a / b
