"""Drill Dispatch — explicit routing from drill name to core function.

Invariants:
    - Every drill->handler mapping is visible in one dict — no getattr magic
    - Unknown drill names raise UnknownDrillError
    - Wrong argument counts raise InvalidArgument before the core function runs
    - InvalidArgument from core is tagged with the drill name, logged, and re-raised
    - check_given validates a leading subset of arguments without running the drill
    - Countdown lines are collected, not printed: the CLI decides how to render them
"""

import logging
from collections.abc import Sequence

from drills.config import Settings
from drills.core.countdown import countdown
from drills.core.domain_types import DrillName, FibonacciStrategy
from drills.core.enforce_bounds import require_at_least, require_int
from drills.core.errors import ErrorContext, InvalidArgument, UnknownDrillError
from drills.core.fibonacci import fibonacci
from drills.core.gcd import gcd
from drills.core.triangular import triangular_number
from drills.schemas.drill import DrillResult

logger = logging.getLogger(__name__)

# Argument names per drill, in positional order
PARAMETERS: dict[DrillName, tuple[str, ...]] = {
    DrillName.FIBONACCI: ("n",),
    DrillName.COUNTDOWN: ("start",),
    DrillName.TRIANGULAR: ("n",),
    DrillName.GCD: ("m", "n"),
}

# Lower bound each argument must meet on its own; None means checked only by the drill
MINIMUMS: dict[DrillName, tuple[int | None, ...]] = {
    DrillName.FIBONACCI: (0,),
    DrillName.COUNTDOWN: (0,),
    DrillName.TRIANGULAR: (1,),
    DrillName.GCD: (0, None),
}


def resolve_drill(name: str | DrillName) -> DrillName:
    try:
        return DrillName(name)
    except ValueError:
        raise UnknownDrillError(str(name)) from None


class DrillDispatch:
    """Routes drill name -> handler. Explicit registration, no auto-discovery."""

    def __init__(
        self, settings: Settings, strategy: FibonacciStrategy | None = None,
    ):
        self._settings = settings
        self._strategy = strategy or settings.fibonacci_strategy
        self._handlers = {
            DrillName.FIBONACCI: self._fibonacci,
            DrillName.COUNTDOWN: self._countdown,
            DrillName.TRIANGULAR: self._triangular,
            DrillName.GCD: self._gcd,
        }

    def run(self, name: str | DrillName, arguments: Sequence[int]) -> DrillResult:
        drill = resolve_drill(name)
        arguments = list(arguments)
        expected = PARAMETERS[drill]
        if len(arguments) != len(expected):
            raise InvalidArgument(
                f"{drill.value} takes {len(expected)} argument(s) "
                f"({', '.join(expected)}), got {len(arguments)}",
                "arguments", arguments, ErrorContext(drill=drill.value),
            )
        logger.debug(
            f"Running {drill.value}{tuple(arguments)}",
            extra={"drill": drill.value},
        )
        try:
            return self._handlers[drill](*arguments)
        except InvalidArgument as exc:
            exc.context.drill = drill.value
            logger.warning(
                f"{drill.value} rejected input: {exc.message}",
                extra={"drill": drill.value, "error_code": exc.code},
            )
            raise

    def check_given(self, name: str | DrillName, arguments: Sequence[int]) -> None:
        """Validate the first len(arguments) values on their own, before the rest exist."""
        drill = resolve_drill(name)
        expected = PARAMETERS[drill]
        context = ErrorContext(drill=drill.value)
        if len(arguments) > len(expected):
            raise InvalidArgument(
                f"{drill.value} takes {len(expected)} argument(s) "
                f"({', '.join(expected)}), got {len(arguments)}",
                "arguments", list(arguments), context,
            )
        for field, minimum, value in zip(expected, MINIMUMS[drill], arguments):
            try:
                if minimum is None:
                    require_int(field, value)
                else:
                    require_at_least(field, value, minimum)
                if drill == DrillName.FIBONACCI:
                    self._check_recursive_limit(value)
            except InvalidArgument as exc:
                exc.context.drill = drill.value
                logger.warning(
                    f"{drill.value} rejected given input: {exc.message}",
                    extra={"drill": drill.value, "error_code": exc.code},
                )
                raise

    def _check_recursive_limit(self, n: int) -> None:
        limit = self._settings.recursive_fibonacci_limit
        if (
            self._strategy == FibonacciStrategy.RECURSIVE
            and isinstance(n, int) and n > limit
        ):
            raise InvalidArgument(
                f"n must be <= {limit} for the recursive strategy, got {n}",
                "n", n,
            )

    def _fibonacci(self, n: int) -> DrillResult:
        self._check_recursive_limit(n)
        value = fibonacci(n, self._strategy)
        return DrillResult(drill=DrillName.FIBONACCI, arguments=[n], result=value)

    def _countdown(self, start: int) -> DrillResult:
        lines: list[str] = []
        countdown(start, emit=lines.append)
        return DrillResult(drill=DrillName.COUNTDOWN, arguments=[start], lines=lines)

    def _triangular(self, n: int) -> DrillResult:
        return DrillResult(
            drill=DrillName.TRIANGULAR, arguments=[n], result=triangular_number(n),
        )

    def _gcd(self, m: int, n: int) -> DrillResult:
        return DrillResult(drill=DrillName.GCD, arguments=[m, n], result=gcd(m, n))
