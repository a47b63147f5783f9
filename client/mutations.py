"""User intents against the Bookshelf API.

Book patches are optimistic. Creates, deletes and genre edits wait for the
server and then refetch. Sorting changes are saved after a quiet period.
Failures never propagate to the caller: the local state is restored and a
notification is pushed instead.
"""

import asyncio
from typing import Any

from core.constants import SORTING_SAVE_DELAY
from core.log import get_logger
from core.types import JSONRecord

from .api_client import BookshelfClient
from .cache import QueryCache, RecordQuery
from .debounce import Debouncer
from .exceptions import BookshelfAPIError
from .notifications import Notifier

logger = get_logger(__name__)


class BookMutations:
    """Mutating intents with cache bookkeeping."""

    def __init__(
        self,
        api: BookshelfClient,
        notifier: Notifier | None = None,
        sorting_delay: float = SORTING_SAVE_DELAY,
    ):
        self.api = api
        self.notifier = notifier or Notifier()
        self.books = QueryCache(api.list_books)
        self.profile = RecordQuery(api.get_me)
        self.sorting_saver = Debouncer(sorting_delay)

    async def patch_book(self, book_id: int, patch: JSONRecord) -> JSONRecord | None:
        """Apply a patch locally, then confirm it with the server.

        Returns:
            Server record, or None if the patch failed and was rolled back
        """
        snapshot = self.books.apply_optimistic(book_id, patch)
        try:
            record = await self.api.patch_book(book_id, patch)
        except BookshelfAPIError as e:
            self.books.rollback(snapshot)
            self.notifier.error(f"Could not update book: {e.code}")
            return None
        except asyncio.CancelledError:
            self.books.rollback(snapshot)
            raise
        except Exception as e:
            logger.error(f"Unexpected error patching book {book_id}: {e}", exc_info=True)
            self.books.rollback(snapshot)
            self.notifier.error("Could not update book")
            return None

        self.books.commit(record)
        return record

    async def create_book(self, data: JSONRecord) -> JSONRecord | None:
        try:
            record = await self.api.create_book(data)
        except BookshelfAPIError as e:
            self.notifier.error(f"Could not add book: {e.code}")
            return None

        await self._refetch_books()
        return record

    async def delete_book(self, book_id: int) -> bool:
        try:
            await self.api.delete_book(book_id)
        except BookshelfAPIError as e:
            self.notifier.error(f"Could not delete book: {e.code}")
            return False

        await self._refetch_books()
        return True

    async def upsert_genre(self, genre: str) -> list[str]:
        """Add a genre to the suggestion list if it is not there yet.

        Returns:
            The genre list after the change
        """
        profile = self.profile.current() or await self.profile.fetch()
        genres = list((profile or {}).get("genres") or [])
        name = genre.strip()
        if not name or name in genres:
            return genres

        try:
            await self.api.patch_genres([*genres, name])
        except BookshelfAPIError as e:
            self.notifier.error(f"Could not save genre: {e.code}")
            return genres

        profile = await self.profile.invalidate()
        return list((profile or {}).get("genres") or [])

    def save_sorting(self, sorting: list[dict[str, Any]]) -> None:
        """Persist the table sorting once it has settled.

        An empty sorting is never saved.
        """
        if not sorting:
            return
        self.sorting_saver.call(self._persist_sorting, [dict(c) for c in sorting])

    async def _persist_sorting(self, sorting: list[dict[str, Any]]) -> None:
        try:
            response = await self.api.patch_preferences({"booksSorting": sorting})
        except BookshelfAPIError as e:
            self.notifier.error(f"Could not save sorting: {e.code}")
            return
        self.profile.merge(response)
        logger.debug(f"Saved sorting {sorting}")

    async def _refetch_books(self) -> None:
        try:
            await self.books.invalidate()
        except BookshelfAPIError as e:
            self.notifier.error(f"Could not refresh books: {e.code}")
