"""Unit tests for ArithmeticConfig and arithmetic_context."""

import pytest

from arithmos import ArithmeticConfig, GcdStrategy, RecursionMode, arithmetic_context


class TestArithmeticConfig:
    """Class-level configuration with enum or string setters."""

    def test_defaults(self):
        assert ArithmeticConfig.get_recursion_mode() is RecursionMode.RECURSIVE
        assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.BINARY
        assert ArithmeticConfig.has_extended_width()
        assert not ArithmeticConfig.is_iterative()

    def test_set_recursion_mode(self):
        ArithmeticConfig.set_recursion_mode(RecursionMode.ITERATIVE)
        assert ArithmeticConfig.is_iterative()
        ArithmeticConfig.set_recursion_mode("Recursive")
        assert ArithmeticConfig.get_recursion_mode() is RecursionMode.RECURSIVE
        with pytest.raises(ValueError):
            ArithmeticConfig.set_recursion_mode("tail-call")

    def test_set_gcd_strategy(self):
        ArithmeticConfig.set_gcd_strategy("euclidean")
        assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.EUCLIDEAN
        with pytest.raises(ValueError):
            ArithmeticConfig.set_gcd_strategy(3)

    def test_extended_width(self):
        ArithmeticConfig.set_extended_width(False)
        assert not ArithmeticConfig.has_extended_width()


class TestArithmeticContext:
    """Temporary configuration changes."""

    def test_restores_previous_state(self):
        with arithmetic_context(recursion="iterative", gcd_strategy="euclidean", extended_width=False):
            assert ArithmeticConfig.is_iterative()
            assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.EUCLIDEAN
            assert not ArithmeticConfig.has_extended_width()
        assert ArithmeticConfig.get_recursion_mode() is RecursionMode.RECURSIVE
        assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.BINARY
        assert ArithmeticConfig.has_extended_width()

    def test_restores_after_exception(self):
        with pytest.raises(RuntimeError):
            with arithmetic_context(recursion="iterative"):
                raise RuntimeError("boom")
        assert not ArithmeticConfig.is_iterative()

    def test_invalid_value_leaves_state_untouched(self):
        with pytest.raises(ValueError):
            with arithmetic_context(recursion="iterative", gcd_strategy="lehmer"):
                pass
        assert not ArithmeticConfig.is_iterative()
        assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.BINARY

    def test_unset_fields_are_kept(self):
        ArithmeticConfig.set_gcd_strategy("euclidean")
        with arithmetic_context(recursion="iterative"):
            assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.EUCLIDEAN
        assert ArithmeticConfig.get_gcd_strategy() is GcdStrategy.EUCLIDEAN
