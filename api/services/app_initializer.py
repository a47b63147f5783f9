"""Application service initializer for managing startup and shutdown."""

from pathlib import Path

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from core.catalog import CatalogClient
from core.config import Settings
from core.database.engine import create_database_engine, create_database_tables
from core.log import get_logger
from core.oauth import GoogleOAuthClient
from core.services import AuthService, BookService, UserService

logger = get_logger(__name__)


class AppServiceInitializer:
    """Manages initialization and lifecycle of application services."""

    def __init__(self, settings: Settings):
        """Initialize with application settings."""
        self.settings = settings
        self.engine: Engine | None = None
        self.catalog_client: CatalogClient | None = None
        self.oauth_client: GoogleOAuthClient | None = None

    async def initialize_all_services(
        self, app: FastAPI, engine: Engine | None = None
    ) -> None:
        """Initialize all services and configure app.state."""
        logger.info("Initializing all application services...")

        await self.initialize_database(engine)
        await self.initialize_http_clients()
        self._setup_app_state(app)

        logger.info("All application services initialized successfully")

    async def initialize_database(self, engine: Engine | None = None) -> None:
        """Initialize database engine and create tables."""
        logger.info("Initializing database...")

        if engine:
            self.engine = engine
        else:
            db_path = self.settings.database_path
            self.engine = create_database_engine(
                self.settings.environment,
                db_path=Path(db_path) if db_path else None,
            )

        create_database_tables(self.engine)

        logger.info("Database initialized successfully")

    async def initialize_http_clients(self) -> None:
        """Create the catalog and Google OAuth clients."""
        self.catalog_client = CatalogClient(
            base_url=self.settings.catalog_api_base_url,
            covers_base_url=self.settings.catalog_covers_base_url,
            timeout=self.settings.catalog_timeout,
        )

        if not self.settings.google_client_id:
            logger.warning("GOOGLE_CLIENT_ID is not set; Google login will fail")
        self.oauth_client = GoogleOAuthClient(
            client_id=self.settings.google_client_id,
            client_secret=self.settings.google_client_secret,
            redirect_uri=self.settings.google_redirect_uri,
            auth_url=self.settings.google_auth_url,
            token_url=self.settings.google_token_url,
            userinfo_url=self.settings.google_userinfo_url,
        )

    async def shutdown_all_services(self) -> None:
        """Close HTTP clients and dispose of the database engine."""
        logger.info("Stopping all application services...")

        if self.catalog_client:
            await self.catalog_client.close()
        if self.oauth_client:
            await self.oauth_client.close()
        if self.engine:
            self.engine.dispose()

        logger.info("All application services stopped successfully")

    def _setup_app_state(self, app: FastAPI) -> None:
        """Configure app.state with initialized services."""
        app.state.settings = self.settings
        app.state.engine = self.engine
        app.state.catalog_client = self.catalog_client
        app.state.oauth_client = self.oauth_client
        app.state.auth_service = AuthService(self.settings.session_max_age_seconds)
        app.state.book_service = BookService()
        app.state.user_service = UserService()
