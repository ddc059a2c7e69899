"""Reference scenarios.

Each scenario exists twice: through the helper functions and through
Pipeline. Both renditions must agree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filtermap.application.pipeline import Pipeline
from filtermap.domain.operations import filter_items, map_items
from filtermap.domain.predicates import has_at_least_two_t, is_even
from filtermap.domain.transforms import double, to_upper

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_NUMBERS: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
DEFAULT_WORDS: tuple[str, ...] = ("tout", "titi", "ototo", "jean", "tous", "taratata")


def even_numbers_doubled(numbers: Iterable[int] = DEFAULT_NUMBERS) -> tuple[int, ...]:
    """Keep even numbers, then double each one."""
    return map_items(filter_items(numbers, is_even), double)


def t_words_uppercased(words: Iterable[str] = DEFAULT_WORDS) -> tuple[str, ...]:
    """Keep words with at least two letters t (any case), then upper-case them."""
    return map_items(filter_items(words, has_at_least_two_t), to_upper)


def even_numbers_doubled_pipeline(numbers: Iterable[int] = DEFAULT_NUMBERS) -> Pipeline:
    """Pipeline rendition of even_numbers_doubled."""
    return Pipeline.of(numbers).filter(is_even).map(double, name="double")


def t_words_uppercased_pipeline(words: Iterable[str] = DEFAULT_WORDS) -> Pipeline:
    """Pipeline rendition of t_words_uppercased."""
    return (
        Pipeline.of(words)
        .filter(has_at_least_two_t, name="has_at_least_two_t")
        .map(to_upper)
    )
