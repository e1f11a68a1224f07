"""Global test configuration and lightweight fixtures.

Seeds RNGs for deterministic behavior, restores ArithmeticConfig after
every test, and auto-marks tests under tests/property.
"""

import os
import random
from pathlib import Path

import pytest

from arithmos import ArithmeticConfig


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("ARITHMOS_TEST_SEED", "12345"))
    random.seed(seed)
    import numpy as np
    np.random.seed(seed)


@pytest.fixture(autouse=True)
def restore_arithmetic_config():
    """Undo configuration changes a test makes."""
    saved = (
        ArithmeticConfig.get_recursion_mode(),
        ArithmeticConfig.get_gcd_strategy(),
        ArithmeticConfig.has_extended_width(),
    )
    yield
    recursion, strategy, extended = saved
    ArithmeticConfig.set_recursion_mode(recursion)
    ArithmeticConfig.set_gcd_strategy(strategy)
    ArithmeticConfig.set_extended_width(extended)


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
