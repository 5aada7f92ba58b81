"""Error Hierarchy — typed, categorized exceptions for every drill failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error maps to a process exit code (2 for bad input, 1 otherwise)
    - to_response() produces the JSON envelope printed by the CLI in --json mode
    - RecursionError is NOT part of this hierarchy and is never caught

Design Decisions:
    - Single hierarchy with DrillError base: the CLI catches one type
    - ErrorContext as dataclass: drill/argument details travel with the error, not the log call
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INPUT = "input"


@dataclass
class ErrorContext:
    """Where the error happened and with which value."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    drill: str | None = None
    argument: str | None = None
    value: Any = None
    attempt: int | None = None


class DrillError(Exception):
    """Base exception for all drill errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        exit_code: int = 1,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.exit_code = exit_code

    def to_response(self) -> dict:
        """Convert to the JSON error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "drill": self.context.drill,
                    "argument": self.context.argument,
                    "value": _jsonable(self.context.value),
                    "attempt": self.context.attempt,
                },
            }
        }


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return repr(value)


# ─── Input Errors (exit code 2) ─────────────────────────────────

class InvalidArgument(DrillError):
    """A drill precondition was violated."""
    def __init__(
        self, message: str, field: str, value: Any = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.argument = field
        ctx.value = value
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 2,
        )
        self.field = field
        self.value = value


class UnknownDrillError(DrillError):
    """Requested drill is not registered."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Unknown drill '{name}'",
            "UNKNOWN_DRILL", ErrorCategory.NOT_FOUND,
            ErrorSeverity.ERROR, context, 2,
        )
        self.name = name


# ─── Shell Errors (exit code 1) ─────────────────────────────────

class RetriesExhaustedError(DrillError):
    """Interactive prompt gave up after the configured number of attempts."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.attempt = attempts
        super().__init__(
            f"No valid input after {attempts} attempt(s)",
            "RETRIES_EXHAUSTED", ErrorCategory.INPUT,
            ErrorSeverity.CRITICAL, ctx, 1,
        )
        self.attempts = attempts
