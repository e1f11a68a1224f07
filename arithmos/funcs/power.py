"""Exponentiation by squaring over any Ring."""

import operator

from ..core.config import ArithmeticConfig
from ..traits.identity import one


def _pow_recursive(x, e: int):
    if e == 0:
        return one(type(x))
    if e & 1:
        p = _pow_recursive(x, (e - 1) // 2)
        return x * p * p
    p = _pow_recursive(x, e // 2)
    return p * p


def _pow_iterative(x, e: int):
    # Walks the exponent from its most significant bit; each step performs
    # the same products, in the same order, as the recursive form.
    result = one(type(x))
    for bit in bin(e)[2:]:
        if bit == "1":
            result = x * result * result
        else:
            result = result * result
    return result


def pow(x, e):
    """
    Raise `x` to the non-negative integer power `e`.

    Generic over any Ring: only multiplication and one() are used, so it
    works for matrices and polynomials as well as scalars. Multiplication
    is not assumed commutative; odd steps compute x * p * p with x on the
    left. pow(x, 0) is one() even when x is zero.

    Args:
        x: Ring element
        e: Non-negative integer exponent

    Returns:
        x ** e in x's own type, using O(log e) multiplications

    Raises:
        TypeError: If e is not an integer
        ValueError: If e is negative
    """
    e = operator.index(e)
    if e < 0:
        raise ValueError(f"pow requires a non-negative exponent, got {e}")
    if ArithmeticConfig.is_iterative():
        return _pow_iterative(x, e)
    return _pow_recursive(x, e)
