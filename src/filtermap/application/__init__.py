"""filtermap application layer: pipelines, scenarios, reporters."""

from filtermap.application.pipeline import (
    Pipeline,
    PipelineTrace,
    Stage,
    StageKind,
    StageResult,
)

__all__ = [
    "Pipeline",
    "PipelineTrace",
    "Stage",
    "StageKind",
    "StageResult",
]
