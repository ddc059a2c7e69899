"""Domain predicates.

Predicates are pure functions: Predicate = Callable[[T], bool]
True = keep element, False = drop element.

Usage:
    from filtermap.domain.predicates import all_of, is_even, negate

    flt = all_of(is_even, negate(is_divisible_by(3)))
    kept = filter_items(numbers, flt)
"""

from filtermap.domain.predicates.composite import all_of, any_of, negate
from filtermap.domain.predicates.numeric import is_divisible_by, is_even, is_odd
from filtermap.domain.predicates.text import contains_at_least, has_at_least_two_t

__all__ = [
    "all_of",
    "any_of",
    "contains_at_least",
    "has_at_least_two_t",
    "is_divisible_by",
    "is_even",
    "is_odd",
    "negate",
]
