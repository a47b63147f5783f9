"""SQLModel database models for Bookshelf."""

from typing import Any

from sqlalchemy import JSON, Column
from sqlmodel import Field, Index, Relationship, SQLModel

from core.constants import DEFAULT_BOOKS_SORTING
from core.types import BookStatus, Locale
from core.utils import get_current_timestamp


def _default_books_sorting() -> list[dict[str, Any]]:
    return [dict(clause) for clause in DEFAULT_BOOKS_SORTING]


class User(SQLModel, table=True):
    """User database model using SQLModel."""

    user_id: int | None = Field(default=None, primary_key=True)
    google_id: str = Field(
        unique=True, index=True, description="Stable Google account identifier"
    )
    email: str | None = Field(default=None, description="User email")
    name: str = Field(description="Display name")
    picture: str | None = Field(default=None, description="Avatar URL")
    preferred_locale: Locale = Field(
        default=Locale.EN, description="Interface locale (en/fr)"
    )
    genres: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Genre suggestion list",
    )
    books_sorting: list[dict[str, Any]] = Field(
        default_factory=_default_books_sorting,
        sa_column=Column(JSON, nullable=False),
        description="Ordered sort clauses for the books table",
    )
    created_at: str = Field(
        default_factory=get_current_timestamp, description="ISO8601 datetime"
    )
    updated_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime - automatically updated",
    )

    # Relationship attributes
    books: list["Book"] = Relationship(back_populates="user")
    sessions: list["AuthSession"] = Relationship(back_populates="user")


class Book(SQLModel, table=True):
    """Book database model using SQLModel."""

    book_id: int | None = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.user_id")
    index: int = Field(default=0, description="Manual ordering key")
    title: str = Field(description="Book title")
    author: str | None = Field(default=None)
    cover_url: str | None = Field(default=None)
    status: BookStatus = Field(default=BookStatus.TO_READ)
    downloaded: bool = Field(default=False)
    rating: float = Field(default=0.0, ge=0, le=5)
    date: str | None = Field(default=None, description="Free-form date")
    finished_date: str | None = Field(
        default=None, description="ISO8601 datetime the book was finished"
    )
    genre: str | None = Field(default=None)
    language: str | None = Field(default=None)
    comment: str | None = Field(default=None)
    created_at: str = Field(
        default_factory=get_current_timestamp, description="ISO8601 datetime"
    )
    updated_at: str = Field(
        default_factory=get_current_timestamp,
        description="ISO8601 datetime - automatically updated",
    )

    # Performance indexes
    __table_args__ = (
        Index("idx_book_user_created", "user_id", "created_at"),  # For list order
        Index("idx_book_user_index", "user_id", "index"),  # For next index lookup
    )

    # Relationship attributes
    user: User = Relationship(back_populates="books")


class AuthSession(SQLModel, table=True):
    """Login session referenced by the session cookie."""

    session_id: str = Field(primary_key=True, description="Opaque cookie token")
    user_id: int = Field(foreign_key="user.user_id", index=True)
    created_at: str = Field(
        default_factory=get_current_timestamp, description="ISO8601 datetime"
    )
    expires_at: str = Field(description="ISO8601 datetime the session expires")

    # Relationship attributes
    user: User = Relationship(back_populates="sessions")
