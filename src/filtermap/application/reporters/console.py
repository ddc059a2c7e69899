"""Console reporter: PipelineTrace → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from filtermap.application.reporters.protocol import format_items

if TYPE_CHECKING:
    from filtermap.application.pipeline import PipelineTrace

_MIN_WIDTH = 20


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        title: Table title.
        width: Console width in columns (>= 20).
        max_items: Max items shown per row. None = unlimited.
        color: Emit ANSI styles. False = plain characters only.
    """

    title: str = "PIPELINE TRACE"
    width: int = 120
    max_items: int | None = None
    color: bool = True

    def __post_init__(self) -> None:
        """Validate config (FAIL-FIRST)."""
        if self.width < _MIN_WIDTH:
            raise ValueError(f"width must be >= {_MIN_WIDTH}, got {self.width}")
        if self.max_items is not None and self.max_items < 0:
            raise ValueError(f"max_items must be >= 0, got {self.max_items}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    One table row per step: the source first, then every stage
    with its kind, name, item count and items.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, trace: PipelineTrace) -> str:
        """Format trace as rich formatted string.

        Args:
            trace: Traced pipeline run.

        Returns:
            Formatted string with table.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            no_color=not self._config.color,
            width=self._config.width,
        )

        table = Table(title=self._config.title)
        table.add_column("#", justify="right")
        table.add_column("Stage", style="cyan")
        table.add_column("Name", style="bold")
        table.add_column("Count", justify="right")
        table.add_column("Items")

        table.add_row("0", "source", "", str(len(trace.source)), self._items(trace.source))
        for index, stage in enumerate(trace.stages, start=1):
            table.add_row(
                str(index),
                stage.kind.value,
                Text(stage.name),
                str(len(stage.items)),
                self._items(stage.items),
            )

        console.print(table)
        return output.getvalue()

    def _items(self, items: tuple[object, ...]) -> Text:
        """Render items cell without markup interpretation."""
        return Text(format_items(items, self._config.max_items))
