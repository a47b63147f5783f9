"""Service for book CRUD operations."""

from typing import Any

from sqlmodel import Session

from core.coercion import (
    coerce_index,
    coerce_rating,
    parse_finished_date,
    to_boolean,
    validate_status,
    validate_title,
)
from core.constants import BOOK_PATCH_FIELDS
from core.database.repository import BookRepository
from core.exceptions import NotFoundError
from core.log import get_logger
from core.models.api.requests import BookCreateRequest, BookPatchRequest
from core.models.api.responses import BookResponse
from core.models.rows import Book
from core.types import BookStatus

logger = get_logger(__name__)

# Free-text fields copied as-is
TEXT_FIELDS = ("author", "cover_url", "date", "genre", "language", "comment")


class BookService:
    """Service for book CRUD operations scoped to one owner."""

    def list_books(self, session: Session, user_id: int) -> list[BookResponse]:
        """List all books of the user, newest first."""
        books = BookRepository(session).list_for_user(user_id)
        return [BookResponse.from_row(book) for book in books]

    def create_book(
        self, session: Session, user_id: int, data: BookCreateRequest
    ) -> BookResponse:
        """Create a book at the end of the user's manual ordering.

        Raises:
            InvalidFieldError: If the title, status or finished date is invalid
        """
        title = validate_title(data.title)
        status = (
            validate_status(data.status) if data.status is not None else BookStatus.TO_READ
        )
        finished_date = parse_finished_date(data.finished_date)

        repo = BookRepository(session)
        book = Book(
            user_id=user_id,
            index=repo.next_index(user_id),
            title=title,
            status=status,
            downloaded=to_boolean(data.downloaded),
            rating=coerce_rating(data.rating),
            finished_date=finished_date,
            **{field: getattr(data, field) for field in TEXT_FIELDS},
        )
        book = repo.create(book)
        logger.info(f"Created book {book.book_id} (index {book.index}) for user {user_id}")
        return BookResponse.from_row(book)

    def build_changes(self, patch: BookPatchRequest) -> dict[str, Any]:
        """Turn a patch request into column values.

        Only allow-listed fields that are present in the request are kept.
        Every field is validated before anything is returned, so a single
        invalid field rejects the whole patch.

        Raises:
            InvalidFieldError: If any provided field is invalid
        """
        provided = patch.provided()
        changes = {
            field: provided[field] for field in BOOK_PATCH_FIELDS if field in provided
        }

        if "title" in changes:
            changes["title"] = validate_title(changes["title"])
        if "status" in changes:
            changes["status"] = validate_status(changes["status"])
        if "downloaded" in changes:
            changes["downloaded"] = to_boolean(changes["downloaded"])
        if "rating" in changes:
            changes["rating"] = coerce_rating(changes["rating"])
        if "index" in changes:
            changes["index"] = coerce_index(changes["index"])
        if "finished_date" in changes:
            changes["finished_date"] = parse_finished_date(changes["finished_date"])

        return changes

    def patch_book(
        self,
        session: Session,
        user_id: int,
        book_id: int,
        patch: BookPatchRequest,
    ) -> BookResponse:
        """Apply a partial update to an owned book.

        Raises:
            InvalidFieldError: If any provided field is invalid
            NotFoundError: If the book does not exist or is not owned
        """
        changes = self.build_changes(patch)
        book = BookRepository(session).update_owned(user_id, book_id, changes)
        if book is None:
            raise NotFoundError(f"Book {book_id} not found")

        logger.info(f"Patched book {book_id} fields {sorted(changes)}")
        return BookResponse.from_row(book)

    def delete_book(self, session: Session, user_id: int, book_id: int) -> None:
        """Permanently delete an owned book.

        Raises:
            NotFoundError: If the book does not exist or is not owned
        """
        if not BookRepository(session).delete_owned(user_id, book_id):
            raise NotFoundError(f"Book {book_id} not found")

        logger.info(f"Deleted book {book_id} of user {user_id}")
