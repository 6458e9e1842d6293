"""
Background session expiry.

Periodically removes idle sessions from the store. Started and stopped by the
application lifespan.

Dependencies: asyncio, talkthrough.boundary.session_store
System role: Session lifecycle maintenance
"""

import asyncio
import contextlib
import logging
from datetime import timedelta

from talkthrough.boundary.session_store.memory_store import InMemorySessionStore

logger = logging.getLogger(__name__)


class SessionSweeper:
    """Runs store.sweep_expired on a fixed interval."""

    def __init__(
        self,
        store: InMemorySessionStore,
        max_idle: timedelta,
        interval_seconds: float,
    ) -> None:
        self.store = store
        self.max_idle = max_idle
        self.interval_seconds = interval_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sweep_once(self) -> int:
        """Run a single sweep and return the number of sessions removed."""
        removed = self.store.sweep_expired(self.max_idle)
        logger.info(f"{__name__}:sweep_once - removed={removed}")
        return removed

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.sweep_once()
            except Exception:
                logger.exception(f"{__name__}:_run - Sweep failed")

    def start(self) -> None:
        """Start the background loop on the running event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="session-sweeper")
        logger.info(
            f"{__name__}:start - interval={self.interval_seconds}s "
            f"max_idle={self.max_idle}"
        )

    async def stop(self) -> None:
        """Cancel the background loop and wait for it to finish."""
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info(f"{__name__}:stop - Sweeper stopped")
