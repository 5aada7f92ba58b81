"""Bounds Enforcement — shared precondition checks for the drills.

Invariants:
    - Only real ints pass; bool is rejected even though it subclasses int
    - Raises InvalidArgument carrying the argument name and offending value
"""

from drills.core.errors import InvalidArgument


def require_int(field: str, value: object) -> int:
    """Reject anything that is not a plain int."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            f"{field} must be an integer, got {type(value).__name__}",
            field, value,
        )
    return value


def require_at_least(field: str, value: object, minimum: int) -> int:
    """Reject non-ints and ints below minimum."""
    number = require_int(field, value)
    if number < minimum:
        raise InvalidArgument(
            f"{field} must be >= {minimum}, got {number}", field, number,
        )
    return number
