"""Tests for application/pipeline.py."""

from dataclasses import FrozenInstanceError

import pytest

from filtermap.application.pipeline import Pipeline, Stage, StageKind
from filtermap.domain.exceptions import InvalidCallableError
from filtermap.domain.predicates import is_even
from filtermap.domain.transforms import double, to_upper
from tests.factories import PredicateFailure, failing_on, make_numbers_pipeline


class TestPipelineCreate:
    """Tests for Pipeline.of."""

    def test_snapshot_source(self) -> None:
        """Source is copied into a tuple."""
        numbers = [1, 2]
        pipeline = Pipeline.of(numbers)
        numbers.append(3)

        assert pipeline.source == (1, 2)

    def test_no_stages(self) -> None:
        """Fresh pipeline has no stages and collects the source."""
        pipeline = Pipeline.of("abc")

        assert len(pipeline) == 0
        assert pipeline.collect() == ("a", "b", "c")

    def test_generator_source_recollectable(self) -> None:
        """Generator source is consumed once; collect() may repeat."""
        pipeline = Pipeline.of(n for n in range(5)).filter(is_even)

        assert pipeline.collect() == (0, 2, 4)
        assert pipeline.collect() == (0, 2, 4)


class TestPipelineChaining:
    """Tests for filter()/map() chaining."""

    def test_filter_then_map(self) -> None:
        """Stages run in declaration order."""
        assert make_numbers_pipeline((1, 2, 3, 4, 5, 6, 7, 8, 9, 10)).collect() == (4, 8, 12, 16, 20)

    def test_map_then_filter(self) -> None:
        """Reversed order gives a different result."""
        pipeline = Pipeline.of((1, 2, 3)).map(double).filter(lambda n: n > 2)

        assert pipeline.collect() == (4, 6)

    def test_chaining_returns_new_pipeline(self) -> None:
        """Original pipeline is unchanged by chaining."""
        base = Pipeline.of((1, 2, 3, 4))
        filtered = base.filter(is_even)

        assert filtered is not base
        assert len(base) == 0
        assert len(filtered) == 1
        assert base.collect() == (1, 2, 3, 4)

    def test_branching(self) -> None:
        """Two pipelines can share a common prefix."""
        evens = Pipeline.of((1, 2, 3, 4)).filter(is_even)

        assert evens.map(double).collect() == (4, 8)
        assert evens.map(str).collect() == ("2", "4")

    def test_iteration(self) -> None:
        """Iterating a pipeline yields collected items."""
        assert list(Pipeline.of(["a", "b"]).map(to_upper)) == ["A", "B"]

    def test_stage_names(self) -> None:
        """Stage names default to callable __name__."""
        pipeline = Pipeline.of(()).filter(is_even).map(to_upper).map(double, name="double")

        assert [s.name for s in pipeline.stages] == ["is_even", "to_upper", "double"]
        assert [s.kind for s in pipeline.stages] == [StageKind.FILTER, StageKind.MAP, StageKind.MAP]

    def test_non_callable_filter_raises(self) -> None:
        """Non-callable predicate raises when the stage is added."""
        with pytest.raises(InvalidCallableError, match="predicate"):
            Pipeline.of((1,)).filter(1)  # type: ignore[arg-type]

    def test_non_callable_map_raises(self) -> None:
        """Non-callable transform raises when the stage is added."""
        with pytest.raises(InvalidCallableError, match="transform"):
            Pipeline.of((1,)).map(None)  # type: ignore[arg-type]

    def test_error_propagates_on_collect(self) -> None:
        """Predicate exception surfaces from collect() unchanged."""
        pipeline = Pipeline.of((1, 2, 3)).filter(failing_on(2))

        with pytest.raises(PredicateFailure):
            pipeline.collect()

    def test_each_stage_sees_previous_output(self, call_recorder) -> None:
        """Map stage is invoked only on filter survivors, in order."""
        transform = call_recorder(double)

        Pipeline.of((1, 2, 3, 4)).filter(is_even).map(transform).collect()

        assert transform.calls == (2, 4)


class TestPipelineTrace:
    """Tests for Pipeline.trace()."""

    def test_trace_records_every_stage(self) -> None:
        """Trace holds source and each stage output."""
        trace = make_numbers_pipeline((1, 2, 3, 4)).trace()

        assert trace.source == (1, 2, 3, 4)
        assert [(s.kind, s.name, s.items) for s in trace.stages] == [
            (StageKind.FILTER, "is_even", (2, 4)),
            (StageKind.MAP, "double", (4, 8)),
        ]

    def test_trace_result_equals_collect(self) -> None:
        """Trace result is the collected output."""
        pipeline = make_numbers_pipeline((5, 6, 7, 8))

        assert pipeline.trace().result == pipeline.collect()

    def test_trace_without_stages(self) -> None:
        """Trace of empty pipeline has source as result."""
        trace = Pipeline.of((1,)).trace()

        assert trace.stages == ()
        assert trace.result == (1,)


class TestStage:
    """Tests for Stage."""

    def test_apply_filter(self) -> None:
        """FILTER stage filters."""
        assert Stage(StageKind.FILTER, is_even, "is_even").apply((1, 2)) == (2,)

    def test_apply_map(self) -> None:
        """MAP stage maps."""
        assert Stage(StageKind.MAP, double, "double").apply((1, 2)) == (2, 4)

    def test_empty_name_raises(self) -> None:
        """Empty stage name raises ValueError."""
        with pytest.raises(ValueError, match="name"):
            Stage(StageKind.MAP, double, "")

    def test_non_callable_raises(self) -> None:
        """Non-callable stage function raises."""
        with pytest.raises(InvalidCallableError, match="predicate"):
            Stage(StageKind.FILTER, "x", "x")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        """Stage is immutable."""
        stage = Stage(StageKind.MAP, double, "double")

        with pytest.raises(FrozenInstanceError):
            stage.name = "other"  # type: ignore[misc]
