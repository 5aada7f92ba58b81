"""Greatest Common Divisor — recursive Euclidean algorithm.

Invariants:
    - m < 0 raises InvalidArgument; n is only checked once it becomes the first argument
    - m < n swaps the arguments; n == 0 returns m; otherwise recurse on (n, m % n)
    - Recursion depth is logarithmic in min(m, n)
"""

from collections.abc import Iterable
from functools import reduce

from drills.core.enforce_bounds import require_at_least, require_int
from drills.core.errors import InvalidArgument


def gcd(m: int, n: int) -> int:
    """Greatest common divisor of two non-negative integers."""
    m = require_at_least("m", m, 0)
    n = require_int("n", n)
    if m < n:
        return gcd(n, m)
    if n == 0:
        return m
    return gcd(n, m % n)


def gcd_all(values: Iterable[int]) -> int:
    """Fold gcd over a non-empty collection."""
    values = list(values)
    if not values:
        raise InvalidArgument("values must not be empty", "values", values)
    first = require_at_least("m", values[0], 0)
    return reduce(gcd, values[1:], first)
