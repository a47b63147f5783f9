"""Async client library for the Bookshelf API with an optimistic cache."""

from .api_client import BookshelfClient
from .cache import CacheSnapshot, QueryCache, RecordQuery
from .debounce import Debouncer
from .exceptions import BookshelfAPIError
from .mutations import BookMutations
from .notifications import Notification, Notifier
from .suggestions import CoverLookup, SuggestionLookup
from .views import filter_books, sort_books

__all__ = [
    "BookMutations",
    "BookshelfAPIError",
    "BookshelfClient",
    "CacheSnapshot",
    "CoverLookup",
    "Debouncer",
    "Notification",
    "Notifier",
    "QueryCache",
    "RecordQuery",
    "SuggestionLookup",
    "filter_books",
    "sort_books",
]
