"""Test factories for creating callables, pipelines and traces.

Centralized factory functions to avoid duplication across test modules.
"""

from collections.abc import Callable

from filtermap.application.pipeline import Pipeline, PipelineTrace, StageKind, StageResult
from filtermap.domain.predicates import is_even
from filtermap.domain.transforms import double


class PredicateFailure(Exception):
    """Raised by failing test callables."""


def failing_on[T](bad: T) -> Callable[[T], bool]:
    """Create predicate that raises PredicateFailure for one value.

    Args:
        bad: Value that triggers the failure.

    Returns:
        Predicate returning True for every other value.
    """

    def _predicate(item: T) -> bool:
        if item == bad:
            raise PredicateFailure(f"cannot evaluate {item!r}")
        return True

    return _predicate


def make_numbers_pipeline(numbers: tuple[int, ...] = (1, 2, 3, 4)) -> Pipeline:
    """Create the even→double pipeline over numbers."""
    return Pipeline.of(numbers).filter(is_even).map(double, name="double")


def make_trace(
    source: tuple[object, ...] = (1, 2, 3, 4),
    *stages: tuple[StageKind, str, tuple[object, ...]],
) -> PipelineTrace:
    """Create PipelineTrace directly from (kind, name, items) triples."""
    return PipelineTrace(
        source=source,
        stages=tuple(StageResult(kind=k, name=n, items=i) for k, n, i in stages),
    )
