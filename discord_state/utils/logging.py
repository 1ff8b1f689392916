"""Rich-backed logging setup for the replay CLI.

The entity, cache and ingest modules only ever call
``logging.getLogger(__name__)``; a long-running client configures logging
however it likes. The replay CLI calls setup_logging() once, which routes
everything through a RichHandler on the shared ``console``:

    from discord_state.utils.logging import setup_logging

    setup_logging(level=logging.DEBUG, log_file="replay.log")

Cache writes are logged at DEBUG per entity, which is far too chatty for a
normal verbose run, so they stay at INFO unless ``debug_internals`` is set.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler


# Shared by RichHandler, the pipeline loggers and summary panels.
console = Console()

NOISY_LOGGERS = ("discord_state.cache",)

FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler() -> logging.Handler:
    return RichHandler(
        console=console,
        show_path=False,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
    )


def _file_handler(log_file: str | Path) -> logging.Handler:
    """Plain-text handler; rich markup and colors stay on the terminal."""
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=FILE_DATE_FORMAT))
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    debug_internals: bool = False,
) -> None:
    """Configure the root logger for a replay run.

    Args:
        level: Root logging level
        log_file: Also write plain-text logs to this file
        debug_internals: Let per-entity cache logs through
    """
    handlers = [_console_handler()]
    if log_file:
        handlers.append(_file_handler(log_file))

    # force=True replaces handlers left behind by an earlier call.
    logging.basicConfig(level=level, handlers=handlers, format="%(message)s", force=True)

    internals_level = logging.DEBUG if debug_internals else logging.INFO
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(internals_level)
