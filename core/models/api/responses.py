"""API response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.models.rows import Book, User
from core.types import BookStatus, Locale


class CamelResponse(BaseModel):
    """Response body serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SortClause(CamelResponse):
    """One sort clause of the books table."""

    id: str
    desc: bool = False


class BookResponse(CamelResponse):
    """Canonical book record returned by the API."""

    id: int
    user_id: int
    index: int
    title: str
    author: str | None = None
    cover_url: str | None = None
    status: BookStatus
    downloaded: bool
    rating: float
    date: str | None = None
    finished_date: str | None = None
    genre: str | None = None
    language: str | None = None
    comment: str | None = None
    created_at: str
    updated_at: str

    @classmethod
    def from_row(cls, book: Book) -> "BookResponse":
        """Create BookResponse from a Book row."""
        if book.book_id is None:
            raise ValueError("Book has not been persisted")

        data = book.model_dump(exclude={"book_id"})
        return cls(id=book.book_id, **data)


class ProfileResponse(CamelResponse):
    """Current user's profile and preferences."""

    id: int
    email: str | None = None
    name: str
    picture: str | None = None
    preferred_locale: Locale
    genres: list[str] = Field(default_factory=list)
    books_sorting: list[SortClause] = Field(default_factory=list)

    @classmethod
    def from_row(cls, user: User) -> "ProfileResponse":
        """Create ProfileResponse from a User row."""
        if user.user_id is None:
            raise ValueError("User has not been persisted")

        return cls(
            id=user.user_id,
            email=user.email,
            name=user.name,
            picture=user.picture,
            preferred_locale=user.preferred_locale,
            genres=list(user.genres or []),
            books_sorting=[SortClause(**clause) for clause in user.books_sorting or []],
        )


class PreferencesResponse(CamelResponse):
    """Preferences after an update."""

    id: int
    preferred_locale: Locale
    books_sorting: list[SortClause] = Field(default_factory=list)


class GenresResponse(CamelResponse):
    """Genre suggestion list after an update."""

    id: int
    genres: list[str] = Field(default_factory=list)


class OkResponse(BaseModel):
    """Acknowledgement for operations without a payload."""

    ok: bool = True


class HealthResponse(BaseModel):
    """Health check response model."""

    ok: bool = True
    status: str
    version: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Error body with a machine-readable reason code."""

    error: str = Field(..., description="Error code (e.g. invalid_finishedDate)")
    detail: str | None = Field(default=None, description="Human-readable detail")

