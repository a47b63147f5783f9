"""Asyncio debouncer."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from core.log import get_logger

logger = get_logger(__name__)


class Debouncer:
    """Runs only the last action armed within a quiet period.

    Every call to :meth:`call` resets the timer and replaces the pending
    action. Must be used from a running event loop.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._task: asyncio.Task[Any] | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def call(
        self, action: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any
    ) -> None:
        """Arm ``action``, replacing whatever was pending."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(
            self._run(action, *args, **kwargs)
        )

    async def _run(
        self, action: Callable[..., Awaitable[Any]], *args: Any, **kwargs: Any
    ) -> None:
        await asyncio.sleep(self.delay)
        await action(*args, **kwargs)

    def cancel(self) -> None:
        """Drop the pending action, if any."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait until the pending action has run or been cancelled."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
