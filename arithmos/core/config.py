"""
Global arithmetic configuration for arithmos.

This module manages the process-wide knobs of the generic algorithms:
whether the logarithmic-depth algorithms run recursively or as loops,
which gcd strategy fixed-width integers use, and whether the 128-bit
integer pair is available.
"""

import logging
import os
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)


class RecursionMode(Enum):
    """How `pow` and the reference Euclidean algorithm are evaluated."""
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


class GcdStrategy(Enum):
    """Gcd algorithm used for fixed-width machine integers."""
    BINARY = "binary"
    EUCLIDEAN = "euclidean"


def _parse_mode(enum_cls, value):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            pass
    raise ValueError(f"Unsupported {enum_cls.__name__}: {value!r}")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off", ""}


class ArithmeticConfig:
    """
    Global arithmetic configuration.

    By default the generic algorithms use their recursive formulation,
    fixed-width integers use binary gcd, and the extended-width integer
    pair is enabled.
    """

    _recursion_mode: RecursionMode = _parse_mode(
        RecursionMode, os.environ.get("ARITHMOS_RECURSION", "recursive")
    )
    _gcd_strategy: GcdStrategy = _parse_mode(
        GcdStrategy, os.environ.get("ARITHMOS_GCD_STRATEGY", "binary")
    )
    _extended_width: bool = _env_flag("ARITHMOS_EXTENDED_WIDTH", True)

    @classmethod
    def set_recursion_mode(cls, mode: Union[RecursionMode, str]) -> None:
        """
        Set how the logarithmic-depth algorithms are evaluated.

        Args:
            mode: RecursionMode enum or string ('recursive', 'iterative')

        Raises:
            ValueError: If mode is not supported
        """
        cls._recursion_mode = _parse_mode(RecursionMode, mode)
        logger.debug("recursion mode set to %s", cls._recursion_mode.value)

    @classmethod
    def get_recursion_mode(cls) -> RecursionMode:
        """Get the current recursion mode."""
        return cls._recursion_mode

    @classmethod
    def is_iterative(cls) -> bool:
        return cls._recursion_mode is RecursionMode.ITERATIVE

    @classmethod
    def set_gcd_strategy(cls, strategy: Union[GcdStrategy, str]) -> None:
        """
        Set the gcd algorithm for fixed-width integers.

        Args:
            strategy: GcdStrategy enum or string ('binary', 'euclidean')

        Raises:
            ValueError: If strategy is not supported
        """
        cls._gcd_strategy = _parse_mode(GcdStrategy, strategy)
        logger.debug("gcd strategy set to %s", cls._gcd_strategy.value)

    @classmethod
    def get_gcd_strategy(cls) -> GcdStrategy:
        """Get the current fixed-width gcd strategy."""
        return cls._gcd_strategy

    @classmethod
    def set_extended_width(cls, enabled: bool) -> None:
        """Enable or disable the 128-bit integer pair."""
        cls._extended_width = bool(enabled)
        logger.debug("extended width %s", "enabled" if enabled else "disabled")

    @classmethod
    def has_extended_width(cls) -> bool:
        """Check whether Int128/UInt128 are available."""
        return cls._extended_width


class arithmetic_context:
    """
    Context manager for temporary configuration changes.

    Example:
        with arithmetic_context(recursion='iterative'):
            # pow and euclid_gcd run as loops
            y = pow(x, 1000)
        # Back to previous configuration
    """

    def __init__(
        self,
        recursion: Optional[Union[RecursionMode, str]] = None,
        gcd_strategy: Optional[Union[GcdStrategy, str]] = None,
        extended_width: Optional[bool] = None,
    ):
        self.recursion = recursion
        self.gcd_strategy = gcd_strategy
        self.extended_width = extended_width
        self._saved = None

    def __enter__(self):
        self._saved = (
            ArithmeticConfig.get_recursion_mode(),
            ArithmeticConfig.get_gcd_strategy(),
            ArithmeticConfig.has_extended_width(),
        )
        try:
            if self.recursion is not None:
                ArithmeticConfig.set_recursion_mode(self.recursion)
            if self.gcd_strategy is not None:
                ArithmeticConfig.set_gcd_strategy(self.gcd_strategy)
            if self.extended_width is not None:
                ArithmeticConfig.set_extended_width(self.extended_width)
        except ValueError:
            self._restore()
            raise
        return self

    def __exit__(self, _exc_type, _exc_val, _exc_tb):
        self._restore()

    def _restore(self):
        recursion, strategy, extended = self._saved
        ArithmeticConfig.set_recursion_mode(recursion)
        ArithmeticConfig.set_gcd_strategy(strategy)
        ArithmeticConfig.set_extended_width(extended)
