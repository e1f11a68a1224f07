"""Concrete number types: the Sign enumeration and the primitive registry.

The extended-width integers live in `arithmos.numbers.wide` and are imported
explicitly, since they are built on top of `arithmos.traits`.
"""

from .sign import Sign
from .primitives import (
    BUILTIN_TYPES,
    FLOAT_TYPES,
    SIGNED_INTEGER_TYPES,
    UNSIGNED_INTEGER_TYPES,
    IntegerWidth,
    NumericKind,
    concrete_types,
    is_primitive,
    kind_of,
    literal,
    width_of,
)

__all__ = [
    "Sign",
    "NumericKind",
    "IntegerWidth",
    "SIGNED_INTEGER_TYPES",
    "UNSIGNED_INTEGER_TYPES",
    "FLOAT_TYPES",
    "BUILTIN_TYPES",
    "kind_of",
    "is_primitive",
    "width_of",
    "literal",
    "concrete_types",
]
