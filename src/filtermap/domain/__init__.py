"""filtermap domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, collections.abc
"""

from filtermap.domain.exceptions import (
    EmptyLettersError,
    FilterMapError,
    InvalidCallableError,
    InvalidCountError,
    InvalidDivisorError,
)
from filtermap.domain.operations import filter_items, map_items
from filtermap.domain.types import Predicate, Transform

__all__ = [
    # Exceptions
    "FilterMapError",
    "InvalidCallableError",
    "InvalidCountError",
    "InvalidDivisorError",
    "EmptyLettersError",
    # Type aliases
    "Predicate",
    "Transform",
    # Operations
    "filter_items",
    "map_items",
]
