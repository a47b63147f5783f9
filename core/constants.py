"""Application constants and limits."""

from typing import Final

# User preference limits
MAX_GENRES: Final[int] = 200
MAX_SORT_CLAUSES: Final[int] = 5
DEFAULT_BOOKS_SORTING: Final[list[dict[str, str | bool]]] = [
    {"id": "index", "desc": False}
]

# Book fields a patch request is allowed to write
BOOK_PATCH_FIELDS: Final[tuple[str, ...]] = (
    "index",
    "title",
    "author",
    "cover_url",
    "status",
    "downloaded",
    "rating",
    "date",
    "finished_date",
    "genre",
    "language",
    "comment",
)

# Rating bounds
MIN_RATING: Final[float] = 0.0
MAX_RATING: Final[float] = 5.0
MIN_INDEX: Final[int] = -(2**63)
MAX_INDEX: Final[int] = 2**63 - 1

# Error codes returned in API error bodies
ERROR_INVALID_BODY: Final[str] = "invalid_body"
ERROR_INVALID_TITLE: Final[str] = "invalid_title"
ERROR_INVALID_STATUS: Final[str] = "invalid_status"
ERROR_INVALID_FINISHED_DATE: Final[str] = "invalid_finishedDate"
ERROR_INVALID_LOCALE: Final[str] = "invalid_preferredLocale"
ERROR_INVALID_SORTING: Final[str] = "invalid_booksSorting"
ERROR_INVALID_GENRES: Final[str] = "invalid_genres"
ERROR_NOT_FOUND: Final[str] = "not_found"
ERROR_UNAUTHORIZED: Final[str] = "unauthorized"

# Client-side debounce delays in seconds
SORTING_SAVE_DELAY: Final[float] = 0.5
SUGGESTION_DELAY: Final[float] = 1.0

# External catalog lookup limits
SUGGESTION_LIMIT: Final[int] = 8
COVER_LIMIT: Final[int] = 10
