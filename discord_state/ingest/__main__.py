"""Replay recorded gateway traffic into the entity caches.

Usage:
    python -m discord_state.ingest shard-0.jsonl shard-1.jsonl
    python -m discord_state.ingest --config config.json   # shard_files from config
    python -m discord_state.ingest --debug --log-file replay.log shard-0.jsonl
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from discord_state.ingest.logger import logger
from discord_state.ingest.run import run_replay
from discord_state.utils.logging import setup_logging

EPILOG = """
Examples:
  discord-state-replay shard-0.jsonl shard-1.jsonl
      Replay two shard dumps concurrently into one set of caches

  discord-state-replay --config /path/to/config.json
      Replay the shard_files listed in a config file

  discord-state-replay --debug shard-0.jsonl
      Also show every cache write
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="discord-state-replay",
        description="Replay recorded gateway events into the entity caches",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument(
        "files",
        nargs="*",
        help="JSON-lines gateway dumps, one per shard (default: shard_files from config)",
    )
    parser.add_argument(
        "--config",
        default="config.json",
        help="Path to config.json (default: config.json)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        help="Log at DEBUG level, including per-entity cache writes",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main() -> None:
    """CLI entry point."""
    args = build_parser().parse_args()

    setup_logging(
        level=logging.DEBUG if (args.verbose or args.debug) else logging.INFO,
        log_file=args.log_file,
        debug_internals=args.debug,
    )
    logger.info("Starting gateway replay")

    try:
        asyncio.run(run_replay(config_path=args.config, paths=args.files or None))
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        raise
    logger.success("Replay complete!")


if __name__ == "__main__":
    main()
