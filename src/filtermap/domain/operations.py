"""Core operations: filter_items and map_items.

Both are single-pass, stateless and synchronous:
- input is consumed once, never mutated, never retained
- caller callable invoked exactly once per element, in sequence order
- result is a new tuple owned by the caller
- exceptions raised by the caller callable propagate unchanged
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filtermap.domain.exceptions import InvalidCallableError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from filtermap.domain.types import Predicate, Transform


def require_callable(func: object, role: str) -> None:
    """Reject non-callable argument before any element is consumed.

    Args:
        func: Object expected to be callable.
        role: Name used in the error message ("predicate", "transform", ...).

    Raises:
        InvalidCallableError: If func is not callable.
    """
    if not callable(func):
        raise InvalidCallableError(role, type(func))


def filter_items[T](sequence: Iterable[T], predicate: Predicate[T]) -> tuple[T, ...]:
    """Return elements of sequence for which predicate is true.

    Args:
        sequence: Finite ordered iterable (may be empty).
        predicate: Selection function, called once per element.

    Returns:
        Tuple of surviving elements in original order.
        len(result) <= len(sequence).

    Raises:
        InvalidCallableError: If predicate is not callable.
    """
    require_callable(predicate, "predicate")

    result: list[T] = []
    for item in sequence:
        if predicate(item):
            result.append(item)
    return tuple(result)


def map_items[T, U](sequence: Iterable[T], transform: Transform[T, U]) -> tuple[U, ...]:
    """Return transform applied to every element of sequence.

    Args:
        sequence: Finite ordered iterable (may be empty).
        transform: Element function, called once per element.

    Returns:
        Tuple where result[i] == transform(sequence[i]).
        len(result) == len(sequence).

    Raises:
        InvalidCallableError: If transform is not callable.
    """
    require_callable(transform, "transform")

    return tuple(transform(item) for item in sequence)
