"""Core database functionality."""

from .engine import (
    create_database_engine,
    create_database_tables,
)
from .repository import (
    AuthSessionRepository,
    BookRepository,
    UserRepository,
)

__all__ = [
    "AuthSessionRepository",
    "BookRepository",
    "UserRepository",
    "create_database_engine",
    "create_database_tables",
]
