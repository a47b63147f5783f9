"""Unified models package for the bookshelf system."""

# API models (request/response)
from core.models.api.requests import (
    BookCreateRequest,
    BookPatchRequest,
    GenresPatchRequest,
    PreferencesPatchRequest,
)
from core.models.api.responses import (
    BookResponse,
    ErrorResponse,
    GenresResponse,
    HealthResponse,
    OkResponse,
    PreferencesResponse,
    ProfileResponse,
    SortClause,
)

# Domain models
from core.models.domain.catalog import CatalogSuggestion
from core.models.domain.user import GoogleProfile

# Database models (SQLModel rows)
from core.models.rows import AuthSession, Book, User

__all__ = [
    # API models
    "BookCreateRequest",
    "BookPatchRequest",
    "GenresPatchRequest",
    "PreferencesPatchRequest",
    "BookResponse",
    "ErrorResponse",
    "GenresResponse",
    "HealthResponse",
    "OkResponse",
    "PreferencesResponse",
    "ProfileResponse",
    "SortClause",
    # Domain models
    "CatalogSuggestion",
    "GoogleProfile",
    # Database models (SQLModel rows)
    "AuthSession",
    "Book",
    "User",
]
