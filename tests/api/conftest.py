"""Fixtures for API tests."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from core.config import Settings
from core.database.repository import AuthSessionRepository
from core.models.rows import User


@pytest.fixture
def client(api_app: FastAPI) -> TestClient:
    """Unauthenticated test client."""
    return TestClient(api_app, follow_redirects=False)


@pytest.fixture
def auth_client(
    api_app: FastAPI,
    session_repo: AuthSessionRepository,
    saved_user: User,
    test_settings: Settings,
) -> TestClient:
    """Test client carrying a session cookie for saved_user."""
    assert saved_user.user_id is not None
    auth_session = session_repo.create_for_user(saved_user.user_id, 3600)

    client = TestClient(api_app, follow_redirects=False)
    client.cookies.set(test_settings.session_cookie_name, auth_session.session_id)
    return client


@pytest.fixture
def other_client(
    api_app: FastAPI,
    session_repo: AuthSessionRepository,
    other_user: User,
    test_settings: Settings,
) -> TestClient:
    """Test client carrying a session cookie for other_user."""
    assert other_user.user_id is not None
    auth_session = session_repo.create_for_user(other_user.user_id, 3600)

    client = TestClient(api_app, follow_redirects=False)
    client.cookies.set(test_settings.session_cookie_name, auth_session.session_id)
    return client
