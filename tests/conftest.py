"""Root conftest — shared test configuration.

Invariants:
    - Every test starts from default settings (no DRILLS_* env, fresh get_settings cache)
    - Console log handlers installed by main() are removed after each test
"""

import logging

import pytest

from drills.config import get_settings
from drills.infrastructure.observability import ConsoleHandler


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for var in (
        "DRILLS_LOG_LEVEL", "DRILLS_LOG_FORMAT", "DRILLS_MAX_PROMPT_ATTEMPTS",
        "DRILLS_FIBONACCI_STRATEGY", "DRILLS_RECURSIVE_FIBONACCI_LIMIT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    for handler in [h for h in logging.root.handlers if isinstance(h, ConsoleHandler)]:
        logging.root.removeHandler(handler)
