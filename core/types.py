"""Common type definitions for the bookshelf system."""

from enum import Enum
from typing import Any, TypeAlias

JSONRecord: TypeAlias = dict[str, Any]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class BookStatus(str, Enum):
    """Reading status of a book."""

    TO_READ = "to_read"
    READING = "reading"
    READ = "read"


class Locale(str, Enum):
    """Supported interface locales."""

    EN = "en"
    FR = "fr"


class RecordState(str, Enum):
    """Client-side cache state of a single record."""

    CLEAN = "clean"
    OPTIMISTIC_PENDING = "optimistic-pending"
