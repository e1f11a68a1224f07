"""Capability traits and the generic operations written against them."""

from .identity import One, Zero, is_one, is_zero, one, zero
from .algebra import Group, Number, Ring, divide, implements
from .signed import (
    FLOAT_SIGN_POLICY,
    Signed,
    SignedMixin,
    Unsigned,
    absolute,
    is_negative,
    is_positive,
    is_signed_type,
    is_unsigned_type,
    of_sign,
    sign,
    sign_number,
)
from .integer import (
    Euclidean,
    Integer,
    IntegerMixin,
    fixed_width_gcd,
    gcd,
    is_divisible_by,
    is_euclidean_type,
    is_factor_of,
    is_integer_type,
    is_unit,
    lcm,
)

__all__ = [
    # Identity
    "Zero",
    "One",
    "zero",
    "one",
    "is_zero",
    "is_one",

    # Algebraic hierarchy
    "Group",
    "Ring",
    "Number",
    "implements",
    "divide",

    # Signed / Unsigned
    "FLOAT_SIGN_POLICY",
    "Signed",
    "SignedMixin",
    "Unsigned",
    "sign",
    "of_sign",
    "absolute",
    "sign_number",
    "is_positive",
    "is_negative",
    "is_signed_type",
    "is_unsigned_type",

    # Integer / Euclidean
    "Integer",
    "Euclidean",
    "IntegerMixin",
    "is_factor_of",
    "is_divisible_by",
    "is_unit",
    "gcd",
    "lcm",
    "fixed_width_gcd",
    "is_integer_type",
    "is_euclidean_type",
]
