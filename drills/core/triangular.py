"""Triangular Numbers — T(1) = 1, T(n) = T(n-1) + n.

Invariants:
    - n < 1 raises InvalidArgument
    - triangular_number(n) == triangular_closed_form(n) == n*(n+1)//2 for all valid n
"""

from functools import reduce
from operator import add

from drills.core.enforce_bounds import require_at_least


def triangular_number(n: int) -> int:
    """Unroll the recurrence T(n) = T(n-1) + n from the base case T(1) = 1."""
    n = require_at_least("n", n, 1)
    return reduce(add, range(2, n + 1), 1)


def triangular_closed_form(n: int) -> int:
    n = require_at_least("n", n, 1)
    return n * (n + 1) // 2
