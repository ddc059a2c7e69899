"""Callable type aliases.

Python PEP 695 type alias syntax.
Predicate: takes element, returns True to keep it.
Transform: takes element, returns its replacement.
"""

from collections.abc import Callable

type Predicate[T] = Callable[[T], bool]
type Transform[T, U] = Callable[[T], U]
