"""Trailing-edge debounce on the running asyncio loop."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Run an action once input has been quiet for ``delay`` seconds.

    Each ``schedule()`` cancels the previously scheduled run, so only the
    last call in a burst reaches the action.  Must be used from inside a
    running event loop.
    """

    def __init__(self, delay: float) -> None:
        self._delay = delay
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, action: Callable[[], Awaitable[None]]) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._run(action))

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait until no run is scheduled, following reschedules."""
        while self.pending:
            await asyncio.wait({self._task})

    async def _run(self, action: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(max(0.0, self._delay))
        try:
            await action()
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Debounced action failed")
