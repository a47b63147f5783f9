"""Configuration management for the bookshelf system."""

import os
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import Environment


class Settings(BaseModel):
    """Application settings."""

    # Environment
    version: str = Field(default="0.1.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development/production/testing)",
    )

    # API Settings
    api_title: str = Field(default="Bookshelf API", description="API title")
    api_version: str = Field(default="1.0.0", description="API version")

    # URLs
    client_url: str = Field(
        default="http://localhost:5173", description="Browser client base URL"
    )
    server_url: str = Field(
        default="http://localhost:5174", description="Public URL of this API server"
    )

    # CORS Settings
    cors_allow_origins: list[str] = Field(
        default=["http://localhost:5173"], description="Allowed CORS origins"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Database
    database_path: str | None = Field(
        default=None, description="Custom SQLite database path"
    )

    # Session Settings
    session_cookie_name: str = Field(
        default="bookshelf_session", description="Session cookie name"
    )
    session_max_age_days: int = Field(
        default=30, ge=1, description="Session lifetime in days"
    )
    session_cookie_secure: bool = Field(
        default=False, description="Whether the session cookie requires HTTPS"
    )

    # Google OAuth Settings
    google_client_id: str = Field(default="", description="Google OAuth client ID")
    google_client_secret: str = Field(
        default="", description="Google OAuth client secret"
    )
    google_auth_url: str = Field(
        default="https://accounts.google.com/o/oauth2/v2/auth",
        description="Google OAuth consent URL",
    )
    google_token_url: str = Field(
        default="https://oauth2.googleapis.com/token",
        description="Google OAuth token endpoint",
    )
    google_userinfo_url: str = Field(
        default="https://openidconnect.googleapis.com/v1/userinfo",
        description="Google userinfo endpoint",
    )

    # Catalog Settings
    catalog_api_base_url: str = Field(
        default="https://openlibrary.org/search.json",
        description="Open Library search endpoint",
    )
    catalog_covers_base_url: str = Field(
        default="https://covers.openlibrary.org/b/id",
        description="Open Library cover image base URL",
    )
    catalog_timeout: float = Field(
        default=10.0, description="Timeout in seconds for catalog requests"
    )

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        # Cookies must be sent over HTTPS only in production
        if self.environment == Environment.PRODUCTION:
            self.session_cookie_secure = True

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING

    @property
    def google_redirect_uri(self) -> str:
        """OAuth callback URL registered with Google."""
        return f"{self.server_url.rstrip('/')}/auth/google/callback"

    @property
    def session_max_age_seconds(self) -> int:
        """Session lifetime in seconds."""
        return self.session_max_age_days * 24 * 60 * 60


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    client_url = os.getenv("BOOKSHELF_CLIENT_URL", "http://localhost:5173")

    # Parse CORS origins from comma-separated string, defaulting to the client
    cors_origins_str = os.getenv("BOOKSHELF_CORS_ORIGINS", client_url)
    cors_origins = [origin.strip() for origin in cors_origins_str.split(",")]

    session_cookie_secure = os.getenv(
        "BOOKSHELF_SESSION_COOKIE_SECURE", "false"
    ).lower() in ["true", "1", "yes", "on"]

    return Settings(
        environment=Environment(os.getenv("BOOKSHELF_ENV", "development")),
        api_title=os.getenv("BOOKSHELF_API_TITLE", "Bookshelf API"),
        api_version=os.getenv("BOOKSHELF_API_VERSION", "1.0.0"),
        client_url=client_url,
        server_url=os.getenv("BOOKSHELF_SERVER_URL", "http://localhost:5174"),
        cors_allow_origins=cors_origins,
        log_level=os.getenv("BOOKSHELF_LOG_LEVEL", "INFO").upper(),
        database_path=os.getenv("BOOKSHELF_DATABASE_PATH"),
        session_cookie_name=os.getenv(
            "BOOKSHELF_SESSION_COOKIE_NAME", "bookshelf_session"
        ),
        session_max_age_days=int(os.getenv("BOOKSHELF_SESSION_MAX_AGE_DAYS", "30")),
        session_cookie_secure=session_cookie_secure,
        google_client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        google_client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        catalog_api_base_url=os.getenv(
            "BOOKSHELF_CATALOG_API_BASE_URL", "https://openlibrary.org/search.json"
        ),
        catalog_covers_base_url=os.getenv(
            "BOOKSHELF_CATALOG_COVERS_BASE_URL", "https://covers.openlibrary.org/b/id"
        ),
        catalog_timeout=float(os.getenv("BOOKSHELF_CATALOG_TIMEOUT", "10.0")),
    )


# Global settings instance
settings = load_settings()
