"""Fluent pipeline over filter_items / map_items.

Chaining style for the same two operations:

Example:
    Pipeline.of(range(1, 11)).filter(is_even).map(double).collect()
    # (4, 8, 12, 16, 20)

Every stage delegates to the domain operations; the pipeline adds no
semantics of its own beyond ordering the stages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from filtermap.domain.operations import filter_items, map_items, require_callable

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator


class StageKind(Enum):
    """Kind of pipeline stage."""

    FILTER = "filter"
    MAP = "map"


def _callable_name(func: Callable[..., Any]) -> str:
    """Human-readable name of a callable for traces."""
    name = getattr(func, "__name__", None)
    if isinstance(name, str) and name:
        return name
    return type(func).__name__


@dataclass(frozen=True, slots=True)
class Stage:
    """Single pipeline step.

    Attributes:
        kind: FILTER or MAP.
        func: Predicate (FILTER) or transform (MAP).
        name: Display name for traces.
    """

    kind: StageKind
    func: Callable[[Any], Any]
    name: str

    def __post_init__(self) -> None:
        """Validate stage (FAIL-FIRST)."""
        role = "predicate" if self.kind is StageKind.FILTER else "transform"
        require_callable(self.func, role)
        if not self.name:
            raise ValueError("name must not be empty")

    def apply(self, items: tuple[Any, ...]) -> tuple[Any, ...]:
        """Run this stage over items."""
        if self.kind is StageKind.FILTER:
            return filter_items(items, self.func)
        return map_items(items, self.func)


@dataclass(frozen=True, slots=True)
class StageResult:
    """Output of one stage in a traced run."""

    kind: StageKind
    name: str
    items: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class PipelineTrace:
    """Source snapshot plus the output of every stage, in order."""

    source: tuple[Any, ...]
    stages: tuple[StageResult, ...] = ()

    @property
    def result(self) -> tuple[Any, ...]:
        """Final output (source when there are no stages)."""
        if not self.stages:
            return self.source
        return self.stages[-1].items


@dataclass(frozen=True, slots=True)
class Pipeline:
    """Immutable pipeline builder.

    Supports chaining filter/map stages; every call returns a new pipeline.
    The source is snapshotted once, so collect() may be called repeatedly.
    """

    _source: tuple[Any, ...]
    _stages: tuple[Stage, ...] = ()

    @classmethod
    def of(cls, items: Iterable[Any]) -> Pipeline:
        """Create pipeline over a snapshot of items.

        Args:
            items: Finite iterable. Consumed immediately.

        Returns:
            Fresh Pipeline with no stages
        """
        return cls(_source=tuple(items))

    def _with_stage(self, stage: Stage) -> Pipeline:
        return Pipeline(_source=self._source, _stages=(*self._stages, stage))

    def filter(self, predicate: Callable[[Any], bool], name: str | None = None) -> Pipeline:
        """Add filter stage.

        Args:
            predicate: Selection function
            name: Display name (default: predicate __name__)

        Returns:
            New Pipeline with added stage

        Raises:
            InvalidCallableError: If predicate is not callable
        """
        require_callable(predicate, "predicate")
        return self._with_stage(
            Stage(StageKind.FILTER, predicate, name or _callable_name(predicate)),
        )

    def map(self, transform: Callable[[Any], Any], name: str | None = None) -> Pipeline:
        """Add map stage.

        Args:
            transform: Element function
            name: Display name (default: transform __name__)

        Returns:
            New Pipeline with added stage

        Raises:
            InvalidCallableError: If transform is not callable
        """
        require_callable(transform, "transform")
        return self._with_stage(
            Stage(StageKind.MAP, transform, name or _callable_name(transform)),
        )

    @property
    def source(self) -> tuple[Any, ...]:
        """Snapshot of the source items."""
        return self._source

    @property
    def stages(self) -> tuple[Stage, ...]:
        """Stages in execution order."""
        return self._stages

    def collect(self) -> tuple[Any, ...]:
        """Run all stages and return the final items."""
        items = self._source
        for stage in self._stages:
            items = stage.apply(items)
        return items

    def trace(self) -> PipelineTrace:
        """Run all stages, keeping every intermediate output."""
        items = self._source
        results: list[StageResult] = []
        for stage in self._stages:
            items = stage.apply(items)
            results.append(StageResult(kind=stage.kind, name=stage.name, items=items))
        return PipelineTrace(source=self._source, stages=tuple(results))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.collect())

    def __len__(self) -> int:
        return len(self._stages)
