"""Fibonacci — n-th Fibonacci number under three interchangeable strategies.

Invariants:
    - fibonacci(0) == 0, fibonacci(1) == 1, fibonacci(n) == fibonacci(n-1) + fibonacci(n-2)
    - n is validated before any strategy runs (negative n raises InvalidArgument)
    - Strategy choice never changes the result, only the cost

Design Decisions:
    - RECURSIVE is the textbook definition: exponential call count, kept for comparison
    - MEMOIZED keeps a per-call memo filled bottom-up: constant recursion depth, nothing cached between calls
"""

from drills.core.domain_types import FibonacciStrategy
from drills.core.enforce_bounds import require_at_least


def fibonacci(
    n: int, strategy: FibonacciStrategy = FibonacciStrategy.ITERATIVE,
) -> int:
    """Return the n-th Fibonacci number. Raises InvalidArgument for n < 0."""
    n = require_at_least("n", n, 0)
    if strategy == FibonacciStrategy.RECURSIVE:
        return _fibonacci_recursive(n)
    if strategy == FibonacciStrategy.MEMOIZED:
        return _fibonacci_memoized(n)
    return _fibonacci_iterative(n)


def fibonacci_sequence(count: int) -> list[int]:
    """First `count` Fibonacci numbers, starting at fibonacci(0)."""
    count = require_at_least("count", count, 0)
    sequence: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        sequence.append(current)
        current, following = following, current + following
    return sequence


def _fibonacci_iterative(n: int) -> int:
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _fibonacci_recursive(n: int) -> int:
    if n < 2:
        return n
    return _fibonacci_recursive(n - 1) + _fibonacci_recursive(n - 2)


def _fibonacci_memoized(n: int) -> int:
    memo = [0, 1]

    def fib(k: int) -> int:
        if k == len(memo):
            memo.append(fib(k - 1) + fib(k - 2))
        return memo[k]

    for k in range(2, n + 1):
        fib(k)
    return memo[n]
