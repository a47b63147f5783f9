"""Global pytest configuration and fixtures."""

from collections.abc import AsyncGenerator, Generator
from logging import Logger
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from pytest_httpserver import HTTPServer
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from api.app import create_app
from api.services.app_initializer import AppServiceInitializer
from core import setup_test_logging
from core.config import Settings
from core.database.engine import create_database_tables
from core.database.repository import (
    AuthSessionRepository,
    BookRepository,
    UserRepository,
)
from core.models.rows import User
from core.types import Environment

from tests.utils.test_helpers import TestDataFactory


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture(scope="function")
def logger() -> Logger:
    """Provide a logger instance for tests."""
    from core import get_logger

    return get_logger("test")


@pytest.fixture
def mock_db_engine(tmp_path: Path) -> Generator[Engine, None, None]:
    """Create a real database engine for testing using a file-based database."""
    db_path = tmp_path / "test.db"
    database_url = f"sqlite:///{db_path}"

    engine = create_engine(
        database_url,
        echo=False,
        connect_args={
            "check_same_thread": False,
            "timeout": 60.0,
        },
    )
    create_database_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def mock_db_session(mock_db_engine: Engine) -> Generator[Session, None, None]:
    with Session(mock_db_engine) as session:
        yield session


@pytest.fixture
def user_repo(mock_db_session: Session) -> UserRepository:
    """Create user repository instance."""
    return UserRepository(mock_db_session)


@pytest.fixture
def book_repo(mock_db_session: Session) -> BookRepository:
    """Create book repository instance."""
    return BookRepository(mock_db_session)


@pytest.fixture
def session_repo(mock_db_session: Session) -> AuthSessionRepository:
    """Create login session repository instance."""
    return AuthSessionRepository(mock_db_session)


@pytest.fixture
def saved_user(user_repo: UserRepository) -> User:
    """Create and save a test user."""
    return user_repo.create(TestDataFactory.create_test_user())


@pytest.fixture
def other_user(user_repo: UserRepository) -> User:
    """Create and save a second user who owns nothing of saved_user's."""
    return user_repo.create(
        TestDataFactory.create_test_user(
            google_id="google-456", email="other@example.com", name="Other Reader"
        )
    )


@pytest.fixture
def mock_catalog_server(httpserver: HTTPServer) -> HTTPServer:
    """Set up a mock Open Library search endpoint."""
    httpserver.expect_request("/search.json", method="GET").respond_with_json(
        {
            "numFound": 3,
            "docs": [
                {
                    "key": "/works/OL893415W",
                    "title": "Dune",
                    "author_name": ["Frank Herbert"],
                    "cover_i": 11481354,
                },
                {
                    "key": "/works/OL893416W",
                    "title": "Dune Messiah",
                    "author_name": ["Frank Herbert"],
                },
                {"key": "/works/OL1W", "title": ""},
            ],
        }
    )
    return httpserver


@pytest.fixture
def mock_google_server(httpserver: HTTPServer) -> HTTPServer:
    """Set up mock Google token and userinfo endpoints."""
    httpserver.expect_request("/token", method="POST").respond_with_json(
        {"access_token": "test-access-token", "token_type": "Bearer"}
    )
    httpserver.expect_request(
        "/userinfo",
        method="GET",
        headers={"Authorization": "Bearer test-access-token"},
    ).respond_with_json(
        {
            "sub": "google-789",
            "email": "new.reader@example.com",
            "name": "New Reader",
            "picture": "https://example.com/avatar.png",
        }
    )
    return httpserver


@pytest.fixture
def test_settings(httpserver: HTTPServer) -> Settings:
    """Settings pointing every external service at the mock HTTP server."""
    return Settings(
        environment=Environment.TESTING,
        client_url="http://client.test",
        server_url="http://testserver",
        cors_allow_origins=["http://client.test"],
        google_client_id="test-client-id",
        google_client_secret="test-client-secret",
        google_auth_url="https://accounts.google.test/o/oauth2/v2/auth",
        google_token_url=httpserver.url_for("/token"),
        google_userinfo_url=httpserver.url_for("/userinfo"),
        catalog_api_base_url=httpserver.url_for("/search.json"),
        catalog_covers_base_url="https://covers.openlibrary.org/b/id",
        catalog_timeout=5.0,
    )


@pytest_asyncio.fixture
async def api_app(
    test_settings: Settings, mock_db_engine: Engine
) -> AsyncGenerator[FastAPI, None]:
    """Create an app wired to the test database and mock upstream server."""
    app = create_app(test_settings)

    initializer = AppServiceInitializer(test_settings)
    await initializer.initialize_all_services(app=app, engine=mock_db_engine)

    yield app
