"""Domain Types — enums naming the drills and the Fibonacci strategies.

Invariants:
    - All valid drill names and strategies encoded as Enums — no raw string matching
    - str Enums: values double as CLI choices and JSON output
"""

from enum import Enum


class DrillName(str, Enum):
    """The four drills exposed by the CLI."""
    FIBONACCI = "fibonacci"
    COUNTDOWN = "countdown"
    TRIANGULAR = "triangular"
    GCD = "gcd"


class FibonacciStrategy(str, Enum):
    """Evaluation strategies. All satisfy the same input/output contract."""
    ITERATIVE = "iterative"
    MEMOIZED = "memoized"
    RECURSIVE = "recursive"
