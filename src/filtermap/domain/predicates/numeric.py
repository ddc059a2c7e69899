"""Integer predicates."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filtermap.domain.exceptions import InvalidDivisorError

if TYPE_CHECKING:
    from filtermap.domain.types import Predicate


def is_even(value: int) -> bool:
    """Check if value is even."""
    return value % 2 == 0


def is_odd(value: int) -> bool:
    """Check if value is odd."""
    return value % 2 != 0


def is_divisible_by(divisor: int) -> Predicate[int]:
    """Create predicate matching multiples of divisor.

    Args:
        divisor: Non-zero divisor.

    Returns:
        Predicate that returns True for values with no remainder.

    Raises:
        InvalidDivisorError: If divisor is zero.
    """
    if divisor == 0:
        raise InvalidDivisorError(divisor)

    def _predicate(value: int) -> bool:
        return value % divisor == 0

    return _predicate
