"""
Greatest common divisor algorithms.

Two strategies are provided:

* `euclid_gcd`, the reference Euclidean algorithm. It only needs equality,
  a remainder and a zero, so it works for any Euclidean-domain type,
  including ones without cheap bit operations.
* `binary_gcd`, Stein's algorithm, which replaces division by shifts and
  trailing-zero counts. Fixed-width integers use it on their magnitudes.
"""

from ..core.config import ArithmeticConfig
from ..traits.algebra import divide
from ..traits.identity import is_zero, zero


def trailing_zeros(n: int) -> int:
    """
    Number of trailing zero bits of a positive integer.

    Raises:
        ValueError: If n is not positive
    """
    if n <= 0:
        raise ValueError(f"trailing_zeros requires a positive integer, got {n}")
    return (n & -n).bit_length() - 1


def binary_gcd(a: int, b: int) -> int:
    """
    Stein's binary gcd of two non-negative integers.

    Both operands are stripped of their factors of two; the common power
    k = min(i, j) is restored at the end. While the odd working values
    differ, the smaller is subtracted from the larger and the (always even)
    difference is shifted back to odd.

    Args:
        a: Non-negative integer
        b: Non-negative integer

    Returns:
        gcd(a, b); gcd(a, 0) == a and gcd(0, 0) == 0

    Raises:
        ValueError: If either operand is negative
    """
    if a < 0 or b < 0:
        raise ValueError(f"binary_gcd requires non-negative operands, got {a}, {b}")
    if a == 0:
        return b
    if b == 0:
        return a

    i = trailing_zeros(a)
    a >>= i
    j = trailing_zeros(b)
    b >>= j
    k = min(i, j)

    while a != b:
        if a < b:
            a, b = b, a
        a -= b
        a >>= trailing_zeros(a)

    return a << k


def _euclid_recursive(a, b):
    if is_zero(b):
        return a
    return _euclid_recursive(b, a % b)


def _euclid_iterative(a, b):
    while not is_zero(b):
        a, b = b, a % b
    return a


def euclid_gcd(a, b):
    """
    Reference Euclidean gcd: a if b == 0, else gcd(b, a % b).

    Generic over any type with equality, remainder and a zero. Runs
    recursively or as a loop depending on ArithmeticConfig. The sign of the
    result is whatever the type's remainder produces; callers wanting a
    non-negative gcd pass magnitudes.
    """
    if ArithmeticConfig.is_iterative():
        return _euclid_iterative(a, b)
    return _euclid_recursive(a, b)


def lcm_from_gcd(a, b, g):
    """
    Least common multiple from a known gcd: a / g * b.

    The division goes through `divide`, so integer categories floor and
    other Number types use their own `/`.

    Dividing before multiplying keeps the intermediate within range whenever
    the result is. Overflow of the final product follows the operand type.
    """
    if is_zero(a) or is_zero(b):
        return zero(type(a))
    return divide(a, g) * b
