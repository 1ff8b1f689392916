"""Console reporting shared by pipeline loggers.

- StructuredBlock: collects key/value lines for one unit of work (a shard
  dump) and renders them together when the block closes, so blocks from
  shards finishing in quick succession never interleave
- BasePipelineLogger: Python logging for messages, the shared console for
  blocks and the final summary panel

The replay pipeline's IngestLogger inherits from BasePipelineLogger.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Generator

from rich.console import Console, Group
from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from discord_state.utils.logging import console

if TYPE_CHECKING:
    from typing import Self


class StructuredBlock:
    """Buffered key/value block, printed on exit.

    Usage:
        with logger.block("shard-0.jsonl") as block:
            block.field("events", "1,234")
            block.field("policy", "aggressive", color="magenta")
            block.result("ingested 12 guilds")

    Output:
        shard-0.jsonl
            events: 1,234
            policy: aggressive
            ✓ ingested 12 guilds
    """

    def __init__(self, title: str, parent: "BasePipelineLogger") -> None:
        self.title = title
        self.console = parent.console
        self._fields = Table.grid(padding=(0, 1))
        self._fields.add_column(style="dim", justify="left")
        self._fields.add_column()
        self._footer: Text | None = None

    def __enter__(self) -> "Self":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        body: list[Any] = [self._fields]
        if self._footer is not None:
            body.append(self._footer)
        self.console.print()
        self.console.print(Text(self.title, style="bold"))
        self.console.print(Padding(Group(*body), (0, 0, 0, 4)))

    def field(self, key: str, value: Any, color: str | None = None) -> None:
        self._fields.add_row(f"{key}:", Text(str(value), style=color or ""))

    def result(self, message: str, success: bool = True) -> None:
        """Close the block with a ✓ (or ✗) line."""
        icon = Text("✓ ", style="green") if success else Text("✗ ", style="red")
        self._footer = icon + Text(message)

    def skip(self, reason: str) -> None:
        self._footer = Text(f"Skipped: {reason}", style="dim")


class BasePipelineLogger(ABC):
    """Base for pipeline loggers.

    Messages go through Python logging (and so through RichHandler once
    setup_logging() ran); blocks and summaries print to the shared console.
    Subclasses implement summary().
    """

    def __init__(self, logger_name: str | None = None) -> None:
        self.console: Console = console
        self._logger = logging.getLogger(logger_name or self.__class__.__module__)

    @contextmanager
    def block(self, title: str) -> Generator[StructuredBlock, None, None]:
        with StructuredBlock(title, self) as block:
            yield block

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)

    def debug(self, message: str) -> None:
        self._logger.debug(message)

    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @staticmethod
    def _summary_rows(
        stats: dict[str, int | str],
        extra_sections: dict[str, dict[str, int]] | None,
        elapsed: float,
    ) -> list[tuple[str, str]]:
        """Flatten stats and sections into (label, formatted value) rows."""

        def fmt(value: int | str) -> str:
            return f"{value:,}" if isinstance(value, int) else str(value)

        rows = [(label, fmt(value)) for label, value in stats.items()]
        for section, section_stats in (extra_sections or {}).items():
            rows.append((f"[dim]{section}[/dim]", ""))
            rows.extend((f"  {label}", fmt(value)) for label, value in section_stats.items())
        rows.append(("Time elapsed", f"{elapsed:.1f}s"))
        return rows

    def print_summary(
        self,
        pipeline_name: str,
        *,
        elapsed: float,
        stats: dict[str, int | str],
        extra_sections: dict[str, dict[str, int]] | None = None,
        style: str = "cyan",
    ) -> None:
        """Print the "<pipeline_name> Complete" panel."""
        table = Table.grid(padding=(0, 2))
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right", style="green")
        for label, value in self._summary_rows(stats, extra_sections, elapsed):
            table.add_row(label, value)

        self.console.print()
        self.console.print(
            Panel(
                table,
                title=f"[bold]{pipeline_name} Complete[/bold]",
                border_style=style,
                padding=(1, 2),
            )
        )

    @abstractmethod
    def summary(self, **kwargs: Any) -> None:
        """Print the pipeline's final summary."""
        ...
