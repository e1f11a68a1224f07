"""
Registry of concrete numeric types.

Primitive types cannot grow new methods, so capabilities are keyed on the
primitive category a type belongs to rather than declared per type. Every
numpy signed integer is a SIGNED_INT, every numpy float a FLOAT, and so on;
the generic operations in `arithmos.traits` dispatch on these categories.
"""

from enum import Enum
from typing import List, NamedTuple, Optional

import numpy as np

from ..core.errors import CapabilityError


class NumericKind(Enum):
    """Primitive capability category of a concrete type."""
    SIGNED_INT = "signed_int"
    UNSIGNED_INT = "unsigned_int"
    FLOAT = "float"

    @property
    def is_integer(self) -> bool:
        return self is not NumericKind.FLOAT

    @property
    def is_signed(self) -> bool:
        return self is not NumericKind.UNSIGNED_INT


class IntegerWidth(NamedTuple):
    """Bit width and representable range of a fixed-width integer type."""
    bits: int
    min: int
    max: int

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


# Fixed-width machine types. intp/uintp alias one of the explicit widths
# on every platform numpy supports, so duplicates are dropped.
SIGNED_INTEGER_TYPES = tuple(dict.fromkeys(
    (np.int8, np.int16, np.int32, np.int64, np.intp)
))
UNSIGNED_INTEGER_TYPES = tuple(dict.fromkeys(
    (np.uint8, np.uint16, np.uint32, np.uint64, np.uintp)
))
FLOAT_TYPES = (np.float32, np.float64)
BUILTIN_TYPES = (int, float)


def kind_of(tp: type) -> Optional[NumericKind]:
    """
    Classify a type into its primitive capability category.

    Types implementing the capability protocols themselves may declare a
    `numeric_kind` class attribute. Booleans are not numbers here.

    Returns:
        The category, or None when the type is not a known numeric type
    """
    declared = getattr(tp, "numeric_kind", None)
    if isinstance(declared, NumericKind):
        return declared
    if not isinstance(tp, type) or issubclass(tp, (bool, np.bool_)):
        return None
    if issubclass(tp, (np.signedinteger, int)):
        return NumericKind.SIGNED_INT
    if issubclass(tp, np.unsignedinteger):
        return NumericKind.UNSIGNED_INT
    if issubclass(tp, (np.floating, float)):
        return NumericKind.FLOAT
    return None


def is_primitive(tp: type) -> bool:
    """True for numpy scalar types and the int/float builtins."""
    return kind_of(tp) is not None and getattr(tp, "numeric_kind", None) is None


def width_of(tp: type) -> Optional[IntegerWidth]:
    """
    Get the representable range of a fixed-width integer type.

    Returns:
        IntegerWidth for bounded integer types, None for floats and for the
        unbounded Python int
    """
    declared = getattr(tp, "width", None)
    if isinstance(declared, IntegerWidth):
        return declared
    if isinstance(tp, type) and issubclass(tp, np.integer):
        info = np.iinfo(tp)
        return IntegerWidth(info.bits, int(info.min), int(info.max))
    return None


def literal(tp: type, value: int):
    """
    Build the value `value` (0, 1 or -1) in a primitive type.

    Raises:
        CapabilityError: If tp is not a registered primitive
    """
    if not is_primitive(tp):
        raise CapabilityError(tp, "a primitive numeric type")
    return tp(value)


def concrete_types() -> List[type]:
    """
    List every concrete type the generic operations are instantiated for.

    The 128-bit pair is included only while extended width is enabled.
    """
    from ..core.config import ArithmeticConfig

    types = [*SIGNED_INTEGER_TYPES, *UNSIGNED_INTEGER_TYPES, *FLOAT_TYPES, *BUILTIN_TYPES]
    if ArithmeticConfig.has_extended_width():
        from .wide import Int128, UInt128
        types.extend([Int128, UInt128])
    return types
