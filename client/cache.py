"""Client-side query cache with optimistic updates.

A :class:`QueryCache` holds the local copy of one server list (the books)
and merges every change into it by record ID. An optimistic patch marks the
record ``optimistic-pending`` until the server answers; the server record
then wins on commit, or the snapshot taken before the patch is restored on
rollback.

A list refetch that was started before a newer mutation is ignored when it
resolves, so a stale response can never overwrite an optimistic patch.
Concurrent fetches share a single in-flight request.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from core.log import get_logger
from core.types import JSONRecord, RecordState

logger = get_logger(__name__)

Loader = Callable[[], Awaitable[Any]]


@dataclass
class CacheSnapshot:
    """Copy of the cache taken before an optimistic change.

    When ``record_id`` is set, rolling back restores only that record so
    that independent edits to other records survive.
    """

    records: list[JSONRecord]
    states: dict[Any, RecordState]
    record_id: Any = None


class DedupedQuery(ABC):
    """A query whose concurrent fetches share one in-flight request."""

    def __init__(self, loader: Loader):
        self._loader = loader
        self._inflight: asyncio.Task[Any] | None = None
        self._generation = 0

    @property
    def generation(self) -> int:
        """Bumped whenever local data changes ahead of the server."""
        return self._generation

    async def fetch(self) -> Any:
        """Load from the server, joining a request already in flight."""
        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.ensure_future(self._load())
        return await asyncio.shield(self._inflight)

    async def invalidate(self) -> Any:
        """Discard the in-flight request, if any, and fetch again."""
        self._generation += 1
        self._inflight = None
        return await self.fetch()

    async def _load(self) -> Any:
        generation = self._generation
        data = await self._loader()
        if generation != self._generation:
            logger.debug("Ignoring stale response started before a newer change")
            return self.current()
        self.store(data)
        return self.current()

    @abstractmethod
    def store(self, data: Any) -> None:
        """Replace the cached data with a server response."""

    @abstractmethod
    def current(self) -> Any:
        """Copy of the cached data."""


class QueryCache(DedupedQuery):
    """Local copy of a server list, merged by record ID."""

    def __init__(self, loader: Loader, id_field: str = "id"):
        super().__init__(loader)
        self.id_field = id_field
        self.loaded = False
        self._records: list[JSONRecord] = []
        self._states: dict[Any, RecordState] = {}

    @property
    def records(self) -> list[JSONRecord]:
        return [dict(record) for record in self._records]

    def current(self) -> list[JSONRecord]:
        return self.records

    def store(self, data: list[JSONRecord]) -> None:
        self._records = [dict(record) for record in data]
        self._states = {
            record[self.id_field]: RecordState.CLEAN for record in self._records
        }
        self.loaded = True

    def get(self, record_id: Any) -> JSONRecord | None:
        index = self._position(record_id)
        return None if index is None else dict(self._records[index])

    def state_of(self, record_id: Any) -> RecordState:
        return self._states.get(record_id, RecordState.CLEAN)

    def get_snapshot(self, record_id: Any = None) -> CacheSnapshot:
        return CacheSnapshot(
            records=self.records,
            states=dict(self._states),
            record_id=record_id,
        )

    def apply_optimistic(self, record_id: Any, patch: JSONRecord) -> CacheSnapshot:
        """Merge ``patch`` into a record before the server confirms it.

        Returns:
            Snapshot to pass to :meth:`rollback` if the request fails
        """
        snapshot = self.get_snapshot(record_id)
        index = self._position(record_id)
        if index is not None:
            self._records[index] = {**self._records[index], **patch}
            self._states[record_id] = RecordState.OPTIMISTIC_PENDING
        self._generation += 1
        return snapshot

    def commit(self, record: JSONRecord) -> None:
        """Merge the server's version of a record. The server wins."""
        record_id = record[self.id_field]
        index = self._position(record_id)
        if index is None:
            self._records.append(dict(record))
        else:
            self._records[index] = {**self._records[index], **record}
        self._states[record_id] = RecordState.CLEAN

    def rollback(self, snapshot: CacheSnapshot) -> None:
        """Restore the state captured by :meth:`get_snapshot`."""
        if snapshot.record_id is None:
            self._records = [dict(record) for record in snapshot.records]
            self._states = dict(snapshot.states)
            return

        record_id = snapshot.record_id
        previous = next(
            (r for r in snapshot.records if r[self.id_field] == record_id), None
        )
        index = self._position(record_id)
        if previous is None:
            if index is not None:
                del self._records[index]
            self._states.pop(record_id, None)
            return

        if index is None:
            self._records.append(dict(previous))
        else:
            self._records[index] = dict(previous)
        self._states[record_id] = snapshot.states.get(record_id, RecordState.CLEAN)

    def _position(self, record_id: Any) -> int | None:
        for index, record in enumerate(self._records):
            if record.get(self.id_field) == record_id:
                return index
        return None


class RecordQuery(DedupedQuery):
    """Cached single record, such as the current user's profile."""

    def __init__(self, loader: Loader):
        super().__init__(loader)
        self.data: JSONRecord | None = None

    def current(self) -> JSONRecord | None:
        return None if self.data is None else dict(self.data)

    def store(self, data: JSONRecord) -> None:
        self.data = dict(data)

    def merge(self, changes: JSONRecord) -> None:
        """Merge a server response into the cached record."""
        self.data = {**(self.data or {}), **changes}
