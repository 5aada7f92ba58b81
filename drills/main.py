"""Drills CLI — console entry point for the four recursion drills.

Invariants:
    - stdout carries drill output only (result, countdown lines, or JSON)
    - Errors go to stderr in text mode, to stdout as a JSON envelope in --json mode
    - Exit code: 0 success, 2 invalid input, 1 retries exhausted
    - Missing values are prompted for on stderr; --retry re-prompts on invalid input
    - Values given on the command line are validated once and never retried
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable

from drills.config import get_settings
from drills.core.domain_types import DrillName, FibonacciStrategy
from drills.core.errors import DrillError, InvalidArgument
from drills.infrastructure.observability import setup_logging
from drills.schemas.drill import DrillResult
from drills.services.drill_dispatch import PARAMETERS, DrillDispatch
from drills.services.prompt_input import (
    parse_integer, prompt_integer, read_console, run_with_retry,
)

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="drills",
        description="Run a recursion drill: fibonacci, countdown, triangular or gcd.",
    )
    parser.add_argument(
        "drill",
        choices=[d.value for d in DrillName],
        help="Drill to run",
    )
    parser.add_argument(
        "values",
        nargs="*",
        help="Integer arguments; missing ones are read from standard input",
    )
    parser.add_argument(
        "--retry",
        action="store_true",
        help="Re-prompt on invalid input (up to DRILLS_MAX_PROMPT_ATTEMPTS times)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result or error as JSON",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in FibonacciStrategy],
        default=None,
        help="Fibonacci evaluation strategy (default from DRILLS_FIBONACCI_STRATEGY)",
    )
    return parser.parse_args(argv)


def parse_given(drill: DrillName, given: list[str]) -> list[int]:
    """Parse the values given on the command line."""
    names = PARAMETERS[drill]
    return [
        parse_integer(names[i] if i < len(names) else "arguments", text)
        for i, text in enumerate(given)
    ]


def prompt_missing(
    drill: DrillName, given_count: int, read: Callable[[str], str],
) -> list[int]:
    """Prompt for the values not given on the command line."""
    return [prompt_integer(name, read) for name in PARAMETERS[drill][given_count:]]


def blames_given(exc: InvalidArgument, drill: DrillName, given: list[int]) -> bool:
    """True when the rejected value is one fixed on the command line."""
    if exc.field == "arguments":
        return True
    return any(
        exc.field == name and exc.value == value
        for name, value in zip(PARAMETERS[drill], given)
    )


def _write_result(result: DrillResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result.to_payload()))
        return
    for line in result.render():
        print(line)


def _write_error(exc: DrillError, as_json: bool) -> None:
    if as_json:
        print(json.dumps(exc.to_response()))
    else:
        print(f"error: {exc.message}", file=sys.stderr)


def _announce_retry(exc: InvalidArgument) -> None:
    print(f"error: {exc.message}; try again", file=sys.stderr)


def main(
    argv: list[str] | None = None, read: Callable[[str], str] = read_console,
) -> int:
    args = parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    drill = DrillName(args.drill)
    strategy = FibonacciStrategy(args.strategy) if args.strategy else None
    dispatch = DrillDispatch(settings, strategy=strategy)
    interactive = len(args.values) < len(PARAMETERS[drill])

    try:
        # Command-line values are checked once; only prompted values are retried
        given = parse_given(drill, args.values)
        dispatch.check_given(drill, given)

        def attempt() -> DrillResult:
            return dispatch.run(drill, given + prompt_missing(drill, len(given), read))

        if args.retry and interactive:
            result = run_with_retry(
                attempt, settings.max_prompt_attempts, drill.value,
                on_retry=_announce_retry,
                should_retry=lambda exc: not blames_given(exc, drill, given),
            )
        else:
            result = attempt()
    except DrillError as exc:
        logger.info(
            f"{drill.value} failed: {exc.message}",
            extra={"drill": drill.value, "error_code": exc.code},
        )
        _write_error(exc, args.json)
        return exc.exit_code

    _write_result(result, args.json)
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
