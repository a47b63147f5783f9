"""Constants for the book catalog client."""

from typing import Final

# Open Library API constants
CATALOG_API_BASE_URL: Final[str] = "https://openlibrary.org/search.json"
CATALOG_COVERS_BASE_URL: Final[str] = "https://covers.openlibrary.org/b/id"
COVER_SIZE: Final[str] = "L"

# HTTP constants
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "bookshelf-catalog/1.0"
