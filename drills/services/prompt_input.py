"""Prompt Input — read integers from the console, retry on invalid input.

Invariants:
    - parse_integer never returns a non-int: bad text raises InvalidArgument
    - Prompts go to stderr: stdout stays reserved for drill output
    - End of input raises InvalidArgument (not EOFError) so callers handle one type
    - run_with_retry retries ONLY InvalidArgument accepted by should_retry; anything else propagates at once
    - After `attempts` failures, RetriesExhaustedError is raised from the last InvalidArgument

Design Decisions:
    - Retrying is caller policy: core drills raise, this module decides whether to ask again
"""

import logging
import sys
from collections.abc import Callable
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from drills.core.errors import ErrorContext, InvalidArgument, RetriesExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_INT = TypeAdapter(int)


def parse_integer(field: str, text: str) -> int:
    """Parse console text as an int, raising InvalidArgument on failure."""
    try:
        return _INT.validate_python(text.strip())
    except ValidationError:
        raise InvalidArgument(
            f"{field} must be an integer, got {text.strip()!r}", field, text,
        ) from None


def read_console(prompt: str) -> str:
    """Like input(), but the prompt goes to stderr."""
    print(prompt, end="", file=sys.stderr, flush=True)
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


def prompt_integer(field: str, read: Callable[[str], str] = read_console) -> int:
    try:
        text = read(f"{field}: ")
    except EOFError:
        raise InvalidArgument(f"no input for {field}", field) from None
    return parse_integer(field, text)


def run_with_retry(
    action: Callable[[], T],
    attempts: int,
    drill: str | None = None,
    on_retry: Callable[[InvalidArgument], object] | None = None,
    should_retry: Callable[[InvalidArgument], bool] | None = None,
) -> T:
    """Call action until it stops raising InvalidArgument or attempts run out.

    on_retry is called with each rejected error before the next attempt,
    letting the console explain what went wrong. Errors rejected by
    should_retry are re-raised unchanged.
    """
    last: InvalidArgument | None = None
    for attempt in range(1, attempts + 1):
        try:
            return action()
        except InvalidArgument as exc:
            if should_retry is not None and not should_retry(exc):
                raise
            exc.context.attempt = attempt
            last = exc
            logger.warning(
                f"Attempt {attempt}/{attempts} rejected: {exc.message}",
                extra={"drill": drill, "error_code": exc.code, "attempt": attempt},
            )
            if attempt < attempts and on_retry is not None:
                on_retry(exc)
    raise RetriesExhaustedError(attempts, ErrorContext(drill=drill)) from last
