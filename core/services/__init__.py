"""Business services."""

from .auth_service import AuthService
from .book_service import BookService
from .user_service import UserService

__all__ = ["AuthService", "BookService", "UserService"]
