"""Basic usage example of the arithmos library.

This example demonstrates the capability traits, sign classification and
the generic gcd/lcm and pow algorithms on numpy, builtin and 128-bit types.
"""

import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import numpy as np

import arithmos as ar


def demonstrate_signs():
    """Show the Sign type and sign classification."""
    print("=== Signs ===\n")

    print(f"NEGATIVE * POSITIVE = {ar.Sign.NEGATIVE * ar.Sign.POSITIVE}")
    print(f"NEGATIVE * NEGATIVE = {ar.Sign.NEGATIVE * ar.Sign.NEGATIVE}")
    print(f"-ZERO = {-ar.Sign.ZERO}")

    for value in (np.int16(15), -0.5, -0.0, float("nan"), np.float32(-2.5)):
        print(f"sign({value!r}) = {ar.sign(value)}, signum = {ar.sign_number(value)!r}")

    print(f"\nfloat policy: {ar.FLOAT_SIGN_POLICY}")


def demonstrate_gcd():
    """Show gcd and lcm over fixed-width and unbounded integers."""
    print("\n=== GCD / LCM ===\n")

    print(f"gcd(48u32, 18u32) = {ar.gcd(np.uint32(48), np.uint32(18))}")
    print(f"lcm(4u32, 6u32) = {ar.lcm(np.uint32(4), np.uint32(6))}")
    print(f"gcd(-48i64, 18i64) = {ar.gcd(np.int64(-48), np.int64(18))}")
    print(f"gcd(2**90, 6**40) = {ar.gcd(2 ** 90, 6 ** 40)}")
    print(f"gcd(Int128(-2**127), Int128(96)) = {ar.gcd(ar.Int128(-2 ** 127), ar.Int128(96))}")

    try:
        ar.gcd(np.int8(-128), np.int8(0))
    except ar.RepresentationOverflowError as exc:
        print(f"gcd(-128i8, 0i8) -> {exc}")


def demonstrate_pow():
    """Show exponentiation by squaring over several rings."""
    print("\n=== pow ===\n")

    print(f"pow(2i32, 10) = {ar.pow(np.int32(2), 10)!r}")
    print(f"pow(0, 0) = {ar.pow(0, 0)}")
    print(f"pow(Sign.NEGATIVE, 3) = {ar.pow(ar.Sign.NEGATIVE, 3)}")

    with ar.arithmetic_context(recursion="iterative"):
        print(f"pow(3, 200) (iterative) = {ar.pow(3, 200)}")


def demonstrate_traits():
    """Show structural trait checks."""
    print("\n=== Traits ===\n")

    for tp in (np.int8, np.uint32, np.float64, int, ar.Int128, ar.UInt128):
        caps = [
            trait.__name__
            for trait in (ar.Ring, ar.Number, ar.Signed, ar.Unsigned, ar.Euclidean)
            if ar.implements(tp, trait)
        ]
        print(f"{tp.__name__:>8}: {', '.join(caps)}")


if __name__ == "__main__":
    print("arithmos: Generic Arithmetic Demo")
    print("==================================\n")

    demonstrate_signs()
    demonstrate_gcd()
    demonstrate_pow()
    demonstrate_traits()
