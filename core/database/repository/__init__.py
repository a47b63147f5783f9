"""Repository layer for database operations."""

from .book import BookRepository
from .session import AuthSessionRepository
from .user import UserRepository

__all__ = [
    "AuthSessionRepository",
    "BookRepository",
    "UserRepository",
]
