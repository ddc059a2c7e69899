"""Composite predicates: AND, OR, NOT composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from filtermap.domain.operations import require_callable

if TYPE_CHECKING:
    from filtermap.domain.types import Predicate


def all_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """Create predicate that requires ALL predicates to pass (AND).

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True only if all predicates return True.
        Empty predicates = always True.

    Raises:
        InvalidCallableError: If any predicate is not callable.
    """
    for predicate in predicates:
        require_callable(predicate, "predicate")

    def _predicate(item: T) -> bool:
        return all(p(item) for p in predicates)

    return _predicate


def any_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    """Create predicate that requires ANY predicate to pass (OR).

    Args:
        *predicates: Predicates to compose.

    Returns:
        Predicate that returns True if any predicate returns True.
        Empty predicates = always False.

    Raises:
        InvalidCallableError: If any predicate is not callable.
    """
    for predicate in predicates:
        require_callable(predicate, "predicate")

    def _predicate(item: T) -> bool:
        return any(p(item) for p in predicates)

    return _predicate


def negate[T](predicate: Predicate[T]) -> Predicate[T]:
    """Create predicate that negates another predicate (NOT).

    Args:
        predicate: Predicate to negate.

    Returns:
        Predicate that returns opposite of input predicate.
    """
    require_callable(predicate, "predicate")

    def _predicate(item: T) -> bool:
        return not predicate(item)

    return _predicate
