"""Domain transforms.

Transforms are pure functions: Transform = Callable[[T], U]
"""

from filtermap.domain.transforms.base import compose, identity
from filtermap.domain.transforms.numeric import double, multiply_by
from filtermap.domain.transforms.text import to_lower, to_upper

__all__ = [
    "compose",
    "double",
    "identity",
    "multiply_by",
    "to_lower",
    "to_upper",
]
