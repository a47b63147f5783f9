"""Fixtures for service tests."""

import pytest

from core.services import AuthService, BookService, UserService


@pytest.fixture
def book_service() -> BookService:
    """Create BookService instance."""
    return BookService()


@pytest.fixture
def user_service() -> UserService:
    """Create UserService instance."""
    return UserService()


@pytest.fixture
def auth_service() -> AuthService:
    """Create AuthService instance with a one-hour session lifetime."""
    return AuthService(session_max_age_seconds=3600)
