"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the CLI works with no environment at all
    - Environment variables use the DRILLS_ prefix (DRILLS_LOG_LEVEL, ...)
    - get_settings() is cached (lru_cache) — single instance per process
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from drills.core.domain_types import FibonacciStrategy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DRILLS_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Observability
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "text"

    # Prompting
    max_prompt_attempts: int = Field(3, ge=1)

    # Fibonacci
    fibonacci_strategy: FibonacciStrategy = FibonacciStrategy.ITERATIVE
    # Naive recursion makes ~fib(n) calls; n=35 is already ~30M
    recursive_fibonacci_limit: int = Field(35, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings() -> Settings:
    return Settings()
