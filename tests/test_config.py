"""Settings — environment overrides and validation."""

import pytest
from pydantic import ValidationError

from drills.config import Settings, get_settings
from drills.core.domain_types import FibonacciStrategy


def test_defaults():
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert settings.log_format == "text"
    assert settings.max_prompt_attempts == 3
    assert settings.fibonacci_strategy == FibonacciStrategy.ITERATIVE
    assert settings.recursive_fibonacci_limit == 35


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("DRILLS_FIBONACCI_STRATEGY", "memoized")
    monkeypatch.setenv("DRILLS_LOG_LEVEL", "debug")
    settings = Settings()
    assert settings.fibonacci_strategy == FibonacciStrategy.MEMOIZED
    assert settings.log_level == "DEBUG"


def test_attempts_must_be_positive(monkeypatch):
    monkeypatch.setenv("DRILLS_MAX_PROMPT_ATTEMPTS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
