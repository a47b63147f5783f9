"""FastAPI dependencies for SQLModel integration."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.engine import Engine
from sqlmodel import Session

from core.catalog import CatalogClient
from core.config import Settings
from core.log import get_logger
from core.models.rows import User
from core.oauth import GoogleOAuthClient
from core.services import AuthService, BookService, UserService

logger = get_logger(__name__)


def get_settings(request: Request) -> Settings:
    """Get settings from app state."""
    settings: Settings = request.app.state.settings
    return settings


# Database engine dependency
def get_engine(request: Request) -> Engine:
    """Get database engine from app state."""
    engine: Engine = request.app.state.engine
    return engine


# Database session dependency
def get_db(
    engine: Annotated[Engine, Depends(get_engine)],
) -> Generator[Session, None, None]:
    """Get a database session scoped to one request."""
    with Session(engine) as session:
        yield session


# External client dependencies
def get_catalog_client(request: Request) -> CatalogClient:
    """Get catalog client from app state."""
    client: CatalogClient = request.app.state.catalog_client
    return client


def get_oauth_client(request: Request) -> GoogleOAuthClient:
    """Get Google OAuth client from app state."""
    client: GoogleOAuthClient = request.app.state.oauth_client
    return client


# Service dependencies
def get_auth_service(request: Request) -> AuthService:
    """Get auth service from app state."""
    service: AuthService = request.app.state.auth_service
    return service


def get_book_service(request: Request) -> BookService:
    """Get book service from app state."""
    service: BookService = request.app.state.book_service
    return service


def get_user_service(request: Request) -> UserService:
    """Get user service from app state."""
    service: UserService = request.app.state.user_service
    return service


SettingsDep = Annotated[Settings, Depends(get_settings)]
DBSession = Annotated[Session, Depends(get_db)]
CatalogDep = Annotated[CatalogClient, Depends(get_catalog_client)]
OAuthDep = Annotated[GoogleOAuthClient, Depends(get_oauth_client)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
BookServiceDep = Annotated[BookService, Depends(get_book_service)]
UserServiceDep = Annotated[UserService, Depends(get_user_service)]


# User authentication dependency
def get_current_user(
    request: Request,
    settings: SettingsDep,
    db: DBSession,
    auth_service: AuthServiceDep,
) -> User:
    """Resolve the signed-in user from the session cookie.

    Raises:
        UnauthorizedError: If the cookie is missing, unknown or expired
    """
    session_id = request.cookies.get(settings.session_cookie_name)
    return auth_service.resolve_user(db, session_id)


CurrentUser = Annotated[User, Depends(get_current_user)]


def current_user_id(user: User) -> int:
    """Primary key of a user loaded from the database."""
    if user.user_id is None:
        raise ValueError("User has not been persisted")
    return user.user_id
