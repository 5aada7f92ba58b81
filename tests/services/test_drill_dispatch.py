"""Drill Dispatch — tests for explicit drill routing.

Tests cover:
    - every drill routes to its core function
    - countdown lines are collected, not printed
    - unknown drill names and wrong argument counts
    - InvalidArgument tagged with the drill name
    - recursive Fibonacci guarded by recursive_fibonacci_limit
    - check_given validates command-line values before the rest are known
"""

import pytest

from drills.config import Settings
from drills.core.domain_types import DrillName, FibonacciStrategy
from drills.core.errors import InvalidArgument, UnknownDrillError
from drills.services.drill_dispatch import MINIMUMS, PARAMETERS, DrillDispatch, resolve_drill


@pytest.fixture
def dispatch():
    return DrillDispatch(Settings())


# ─── run ─────────────────────────────────────────────────────────

def test_every_drill_has_parameters():
    assert set(PARAMETERS) == set(DrillName)
    assert set(MINIMUMS) == set(DrillName)
    for drill in DrillName:
        assert len(MINIMUMS[drill]) == len(PARAMETERS[drill])


def test_fibonacci(dispatch):
    result = dispatch.run("fibonacci", [10])
    assert result.drill == DrillName.FIBONACCI
    assert result.result == 55
    assert result.lines is None


def test_triangular(dispatch):
    assert dispatch.run(DrillName.TRIANGULAR, [4]).result == 10


def test_gcd(dispatch):
    result = dispatch.run("gcd", [48, 18])
    assert result.result == 6
    assert result.arguments == [48, 18]


def test_countdown_collects_lines(dispatch, capsys):
    result = dispatch.run("countdown", [3])
    assert result.lines == ["3...", "2...", "1...", "Liftoff!"]
    assert result.result is None
    assert capsys.readouterr().out == ""


def test_unknown_drill(dispatch):
    with pytest.raises(UnknownDrillError):
        dispatch.run("factorial", [3])


def test_resolve_drill_accepts_enum_and_value():
    assert resolve_drill("gcd") is DrillName.GCD
    assert resolve_drill(DrillName.GCD) is DrillName.GCD


def test_wrong_argument_count(dispatch):
    with pytest.raises(InvalidArgument) as exc_info:
        dispatch.run("gcd", [4])
    assert exc_info.value.field == "arguments"
    assert exc_info.value.context.drill == "gcd"


def test_invalid_argument_tagged_with_drill(dispatch):
    with pytest.raises(InvalidArgument) as exc_info:
        dispatch.run("triangular", [0])
    assert exc_info.value.context.drill == "triangular"


def test_invalid_argument_is_logged(dispatch, caplog):
    with caplog.at_level("WARNING"), pytest.raises(InvalidArgument):
        dispatch.run("fibonacci", [-1])
    assert any(
        getattr(r, "error_code", None) == "INVALID_ARGUMENT" for r in caplog.records
    )


def test_strategy_defaults_to_settings():
    dispatch = DrillDispatch(Settings(fibonacci_strategy="memoized"))
    assert dispatch.run("fibonacci", [20]).result == 6765


def test_recursive_strategy_limit():
    dispatch = DrillDispatch(
        Settings(recursive_fibonacci_limit=15),
        strategy=FibonacciStrategy.RECURSIVE,
    )
    assert dispatch.run("fibonacci", [15]).result == 610
    with pytest.raises(InvalidArgument) as exc_info:
        dispatch.run("fibonacci", [16])
    assert "recursive" in exc_info.value.message


# ─── check_given ─────────────────────────────────────────────────

def test_check_given_accepts_valid_prefix(dispatch):
    dispatch.check_given("gcd", [48])
    dispatch.check_given("gcd", [])
    dispatch.check_given("triangular", [1])


def test_check_given_rejects_bad_first_value(dispatch):
    with pytest.raises(InvalidArgument) as exc_info:
        dispatch.check_given("gcd", [-1])
    assert exc_info.value.field == "m"
    assert exc_info.value.context.drill == "gcd"


@pytest.mark.parametrize("drill,value", [
    ("fibonacci", -1), ("countdown", -1), ("triangular", 0),
])
def test_check_given_matches_drill_bounds(dispatch, drill, value):
    with pytest.raises(InvalidArgument):
        dispatch.check_given(drill, [value])


def test_check_given_leaves_gcd_n_to_the_drill(dispatch):
    dispatch.check_given("gcd", [5, -3])
    with pytest.raises(InvalidArgument):
        dispatch.run("gcd", [5, -3])


def test_check_given_too_many(dispatch):
    with pytest.raises(InvalidArgument) as exc_info:
        dispatch.check_given("countdown", [1, 2])
    assert exc_info.value.field == "arguments"


def test_check_given_recursive_limit():
    dispatch = DrillDispatch(
        Settings(recursive_fibonacci_limit=5), strategy=FibonacciStrategy.RECURSIVE,
    )
    with pytest.raises(InvalidArgument):
        dispatch.check_given("fibonacci", [6])
