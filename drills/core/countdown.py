"""Countdown — descending notifications ending in liftoff.

Invariants:
    - countdown_lines is PURE: returns the lines, emits nothing
    - countdown(start) emits "{k}..." for k = start..1, then "Liftoff!"
    - start == 0 emits only "Liftoff!"; start < 0 raises InvalidArgument before any emit
"""

from collections.abc import Callable

from drills.core.enforce_bounds import require_at_least


MARKER: str = "..."
LIFTOFF: str = "Liftoff!"


def countdown_lines(start: int) -> list[str]:
    """Lines countdown(start) would emit, in order."""
    start = require_at_least("start", start, 0)
    return [f"{k}{MARKER}" for k in range(start, 0, -1)] + [LIFTOFF]


def countdown(start: int, emit: Callable[[str], object] = print) -> None:
    """Emit each countdown line through `emit` (print by default)."""
    for line in countdown_lines(start):
        emit(line)
