"""Book repository using SQLModel with dependency injection."""

from typing import Any

from sqlmodel import Session, col, desc, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.rows import Book
from core.utils import get_current_timestamp

logger = get_logger(__name__)


class BookRepository(BaseRepository[Book]):
    """Book repository scoped by owner.

    Every lookup that takes a book ID also takes the owner's user ID, so a
    book owned by someone else behaves exactly like a missing one.
    """

    def __init__(self, db: Session) -> None:
        """Initialize book repository."""
        super().__init__(Book, db)

    def list_for_user(self, user_id: int) -> list[Book]:
        """Get all books of a user, newest first.

        Args:
            user_id: Owner user ID

        Returns:
            Books ordered by creation time, descending
        """
        statement = (
            select(Book)
            .where(Book.user_id == user_id)
            .order_by(desc(col(Book.created_at)), desc(col(Book.book_id)))
        )
        return list(self.db.exec(statement).all())

    def get_owned(self, user_id: int, book_id: int) -> Book | None:
        """Get a book by ID if it belongs to the user.

        Args:
            user_id: Owner user ID
            book_id: Book ID

        Returns:
            Book if found and owned, None otherwise
        """
        statement = select(Book).where(
            (Book.book_id == book_id) & (Book.user_id == user_id)
        )
        return self.db.exec(statement).first()

    def next_index(self, user_id: int) -> int:
        """Compute the ordering index for a new book of the user.

        This reads the current maximum and is not atomic with the insert
        that follows, so two concurrent creates may share an index.
        """
        statement = (
            select(Book.index)
            .where(Book.user_id == user_id)
            .order_by(desc(col(Book.index)))
            .limit(1)
        )
        last = self.db.exec(statement).first()
        return (last or 0) + 1

    def update_owned(
        self, user_id: int, book_id: int, changes: dict[str, Any]
    ) -> Book | None:
        """Apply field changes to an owned book.

        Args:
            user_id: Owner user ID
            book_id: Book ID
            changes: Column values to write

        Returns:
            Updated book, or None if no owned book matched
        """
        book = self.get_owned(user_id, book_id)
        if book is None:
            return None

        for field, value in changes.items():
            setattr(book, field, value)
        book.updated_at = get_current_timestamp()
        return self.update(book)

    def delete_owned(self, user_id: int, book_id: int) -> bool:
        """Delete an owned book.

        Returns:
            True if deleted, False if no owned book matched
        """
        book = self.get_owned(user_id, book_id)
        if book is None:
            return False

        self.db.delete(book)
        self.db.commit()
        return True
