"""Catalog lookups where only the latest query may win.

Every lookup takes a sequence number when it is issued. A response is
applied only if no newer lookup was issued in the meantime, so a slow
answer to an old query never replaces the answer to the current one.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any

from core.constants import COVER_LIMIT, SUGGESTION_DELAY, SUGGESTION_LIMIT
from core.log import get_logger

from .exceptions import BookshelfAPIError

logger = get_logger(__name__)

Search = Callable[[str, str | None, int], Awaitable[list[Any]]]


class LatestLookup:
    """Runs catalog searches and keeps the results of the newest one."""

    def __init__(self, search: Search, limit: int):
        self._search = search
        self.limit = limit
        self.results: list[Any] = []
        self._sequence = 0

    def supersede(self) -> int:
        """Invalidate every lookup issued so far."""
        self._sequence += 1
        return self._sequence

    async def lookup(self, title: str, author: str | None = None) -> list[Any]:
        """Search now and apply the results if this is still the latest lookup.

        Returns:
            The results currently shown
        """
        sequence = self.supersede()
        if not title.strip():
            self.results = []
            return self.results

        try:
            results = await self._search(title, author, self.limit)
        except BookshelfAPIError as e:
            logger.warning(f"Catalog lookup for {title!r} failed: {e}")
            results = []

        if sequence != self._sequence:
            logger.debug(f"Dropping superseded results for {title!r}")
            return self.results

        self.results = list(results)[: self.limit]
        return self.results


class SuggestionLookup(LatestLookup):
    """Title suggestions, debounced while the user types."""

    def __init__(
        self,
        search: Search,
        delay: float = SUGGESTION_DELAY,
        limit: int = SUGGESTION_LIMIT,
    ):
        super().__init__(search, limit)
        self.delay = delay
        self._task: asyncio.Task[Any] | None = None

    def change(self, title: str, author: str | None = None) -> None:
        """The query changed: cancel pending work and schedule a new lookup."""
        self.cancel()
        if not title.strip():
            self.results = []
            return
        self._task = asyncio.get_running_loop().create_task(
            self._delayed_lookup(title, author)
        )

    async def _delayed_lookup(self, title: str, author: str | None) -> None:
        await asyncio.sleep(self.delay)
        await self.lookup(title, author)

    def blur(self) -> None:
        """The input lost focus: drop pending lookups and their results."""
        self.cancel()
        self.results = []

    def cancel(self) -> None:
        self.supersede()
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the scheduled lookup, if any, to finish."""
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})


class CoverLookup(LatestLookup):
    """Cover image lookups; a new lookup supersedes the previous one."""

    def __init__(self, search: Search, limit: int = COVER_LIMIT):
        super().__init__(search, limit)
