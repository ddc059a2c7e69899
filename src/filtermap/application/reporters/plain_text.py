"""Plain text reporter.

Stdlib-only reporter: one line per stage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filtermap.application.reporters.protocol import format_items

if TYPE_CHECKING:
    from filtermap.application.pipeline import PipelineTrace


class PlainTextReporter:
    """Plain text reporter.

    Output:
        source: [1, 2, 3]
        filter is_even: [2]
        map double: [4]
    """

    def report(self, trace: PipelineTrace) -> str:
        """Format trace as plain text lines."""
        lines = [f"source: {format_items(trace.source)}"]
        lines.extend(
            f"{stage.kind.value} {stage.name}: {format_items(stage.items)}"
            for stage in trace.stages
        )
        return "\n".join(lines) + "\n"
