"""Generic algorithms written once against the capability traits."""

from .gcd import binary_gcd, euclid_gcd, lcm_from_gcd, trailing_zeros
from .power import pow

__all__ = [
    "binary_gcd",
    "euclid_gcd",
    "lcm_from_gcd",
    "trailing_zeros",
    "pow",
]
