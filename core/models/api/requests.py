"""API request models.

Fields that the server coerces (``downloaded``, ``rating``, ``index``,
``finishedDate`` and the preference lists) are typed ``Any`` so that any
JSON value reaches the coercion rules instead of being rejected here.
Presence is tracked through ``model_fields_set``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelRequest(BaseModel):
    """Request body with camelCase keys; unknown keys are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def provided(self) -> dict[str, Any]:
        """Fields explicitly present in the request body."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class BookFields(CamelRequest):
    """Writable book fields shared by create and patch."""

    title: str | None = Field(default=None, description="Book title")
    author: str | None = None
    cover_url: str | None = None
    status: str | None = Field(default=None, description="to_read, reading or read")
    downloaded: Any = None
    rating: Any = None
    date: str | None = None
    finished_date: Any = None
    genre: str | None = None
    language: str | None = None
    comment: str | None = None


class BookCreateRequest(BookFields):
    """Request model for creating a book."""


class BookPatchRequest(BookFields):
    """Request model for a partial book update."""

    index: Any = None


class PreferencesPatchRequest(CamelRequest):
    """Request model for updating user preferences."""

    preferred_locale: Any = None
    books_sorting: Any = None


class GenresPatchRequest(CamelRequest):
    """Request model for replacing the genre suggestion list."""

    genres: Any = None
