# MIT License
# See LICENSE file in the project root for full license text.
"""
arithmos: generic arithmetic over capability traits.

This library provides a hierarchy of algebraic capabilities (Zero, One,
Group, Ring, Number, Signed, Unsigned, Integer, Euclidean), a Sign type and
generic algorithms (binary gcd/lcm, exponentiation by squaring, sign
classification) that work for numpy's fixed-width scalars, Python numbers,
the 128-bit integer pair and any user type implementing the protocols.
"""

import logging

__version__ = "0.1.0"
__author__ = "arithmos developers"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Traits must load before funcs; the trait modules import the gcd algorithms.
from .core import (
    ArithmeticConfig,
    ArithmosError,
    CapabilityError,
    GcdStrategy,
    RecursionMode,
    RepresentationOverflowError,
    arithmetic_context,
)
from .numbers import NumericKind, Sign, concrete_types, kind_of, width_of
from .traits import (
    FLOAT_SIGN_POLICY,
    Euclidean,
    Group,
    Integer,
    IntegerMixin,
    Number,
    One,
    Ring,
    Signed,
    SignedMixin,
    Unsigned,
    Zero,
    absolute,
    divide,
    gcd,
    implements,
    is_divisible_by,
    is_factor_of,
    is_negative,
    is_one,
    is_positive,
    is_unit,
    is_zero,
    lcm,
    of_sign,
    one,
    sign,
    sign_number,
    zero,
)
from .funcs import binary_gcd, euclid_gcd, pow
from .numbers.wide import Int128, UInt128

__all__ = [
    # Version info
    "__version__",
    "__author__",

    # Configuration and errors
    "ArithmeticConfig",
    "GcdStrategy",
    "RecursionMode",
    "arithmetic_context",
    "ArithmosError",
    "CapabilityError",
    "RepresentationOverflowError",

    # Numbers
    "Sign",
    "NumericKind",
    "Int128",
    "UInt128",
    "concrete_types",
    "kind_of",
    "width_of",

    # Traits
    "Zero",
    "One",
    "Group",
    "Ring",
    "Number",
    "Signed",
    "SignedMixin",
    "Unsigned",
    "Integer",
    "IntegerMixin",
    "Euclidean",
    "implements",
    "FLOAT_SIGN_POLICY",

    # Operations
    "zero",
    "one",
    "is_zero",
    "is_one",
    "divide",
    "sign",
    "of_sign",
    "absolute",
    "sign_number",
    "is_positive",
    "is_negative",
    "is_factor_of",
    "is_divisible_by",
    "is_unit",
    "gcd",
    "lcm",
    "binary_gcd",
    "euclid_gcd",
    "pow",
]
