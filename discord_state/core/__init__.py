"""Base orchestrator for pipeline execution.

Provides common infrastructure for pipeline orchestrators:
- Settings and the CacheRegistry the pipeline fills
- Timing
- Common run() interface over a list of shard dumps

Usage:
    class MyOrchestrator(BaseOrchestrator):
        async def _run_pipeline(self, paths):
            # Implementation
            pass

        def _log_summary(self, elapsed):
            # Log final statistics
            pass
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from pathlib import Path

from discord_state.cache import CacheRegistry
from discord_state.config.settings import AppSettings


class BaseOrchestrator(ABC):
    """Abstract base class for pipeline orchestrators.

    Subclasses must implement:
    - _run_pipeline(): The actual pipeline logic
    - _log_summary(): Log final statistics
    """

    def __init__(
        self, settings: AppSettings, caches: CacheRegistry | None = None
    ) -> None:
        """Initialize the orchestrator.

        Args:
            settings: Validated application settings.
            caches: Caches to fill; a fresh registry when omitted.
        """
        self.settings = settings
        self.caches = caches if caches is not None else CacheRegistry()
        self.start_time: float = 0.0

    async def run(self, paths: list[str | Path] | None = None) -> CacheRegistry:
        """Run the pipeline.

        Args:
            paths: Shard dump files; defaults to ``settings.shard_files``.

        Returns:
            The populated caches.
        """
        self.start_time = time.time()

        shard_paths = [Path(p) for p in (paths or self.settings.shard_files)]
        await self._run_pipeline(shard_paths)

        elapsed = time.time() - self.start_time
        self._log_summary(elapsed)
        return self.caches

    @abstractmethod
    async def _run_pipeline(self, paths: list[Path]) -> None:
        """Execute the pipeline logic."""
        ...

    @abstractmethod
    def _log_summary(self, elapsed: float) -> None:
        """Log the final summary statistics."""
        ...
