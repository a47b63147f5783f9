"""Test helper utilities for bookshelf tests."""

from typing import Any

from core.models.rows import Book, User
from core.types import BookStatus, Locale


class TestDataFactory:
    """Factory class for creating test data objects."""

    __test__ = False

    @staticmethod
    def create_test_user(
        google_id: str = "google-123",
        email: str | None = "reader@example.com",
        name: str = "Test Reader",
        picture: str | None = None,
        preferred_locale: Locale = Locale.EN,
        genres: list[str] | None = None,
    ) -> User:
        """Create a test User instance with default or custom values."""
        return User(
            google_id=google_id,
            email=email,
            name=name,
            picture=picture,
            preferred_locale=preferred_locale,
            genres=genres or [],
        )

    @staticmethod
    def create_test_book(
        user_id: int,
        index: int = 1,
        title: str = "Dune",
        author: str | None = "Frank Herbert",
        status: BookStatus = BookStatus.TO_READ,
        rating: float = 0.0,
        **fields: Any,
    ) -> Book:
        """Create a test Book instance with default or custom values."""
        return Book(
            user_id=user_id,
            index=index,
            title=title,
            author=author,
            status=status,
            rating=rating,
            **fields,
        )

    @staticmethod
    def create_book_record(book_id: int, **fields: Any) -> dict[str, Any]:
        """Create a book record in the API's camelCase wire format."""
        record: dict[str, Any] = {
            "id": book_id,
            "userId": 1,
            "index": book_id,
            "title": f"Book {book_id}",
            "author": None,
            "coverUrl": None,
            "status": "to_read",
            "downloaded": False,
            "rating": 0.0,
            "date": None,
            "finishedDate": None,
            "genre": None,
            "language": None,
            "comment": None,
            "createdAt": "2024-01-01T00:00:00+00:00",
            "updatedAt": "2024-01-01T00:00:00+00:00",
        }
        record.update(fields)
        return record
