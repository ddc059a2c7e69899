"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from filtermap.application.pipeline import PipelineTrace


class ReporterProtocol(Protocol):
    """Protocol for pipeline trace reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, trace: PipelineTrace) -> str:
        """Format pipeline trace as string.

        Args:
            trace: Traced pipeline run.

        Returns:
            Formatted string representation.
        """
        ...


def format_items(items: tuple[Any, ...], max_items: int | None = None) -> str:
    """Render items as a bracketed, repr-based list.

    Args:
        items: Items to render.
        max_items: Max items shown. None = all.

    Returns:
        "[a, b, c]" or "[a, b, ... (+N more)]" when truncated.
    """
    shown = items if max_items is None else items[:max_items]
    parts = [repr(item) for item in shown]
    hidden = len(items) - len(shown)
    if hidden:
        parts.append(f"... (+{hidden} more)")
    return "[" + ", ".join(parts) + "]"
