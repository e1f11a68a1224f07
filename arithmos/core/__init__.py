"""Core configuration and error types."""

from .config import (
    ArithmeticConfig,
    GcdStrategy,
    RecursionMode,
    arithmetic_context,
)
from .errors import (
    ArithmosError,
    CapabilityError,
    RepresentationOverflowError,
)

__all__ = [
    # Configuration
    "ArithmeticConfig",
    "GcdStrategy",
    "RecursionMode",
    "arithmetic_context",

    # Errors
    "ArithmosError",
    "CapabilityError",
    "RepresentationOverflowError",
]
