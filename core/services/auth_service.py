"""Service for login sessions."""

from sqlmodel import Session

from core.database.repository import AuthSessionRepository, UserRepository
from core.exceptions import UnauthorizedError
from core.log import get_logger
from core.models.domain.user import GoogleProfile
from core.models.rows import AuthSession, User

logger = get_logger(__name__)


class AuthService:
    """Service for login sessions."""

    def __init__(self, session_max_age_seconds: int):
        self.session_max_age_seconds = session_max_age_seconds

    def login(self, session: Session, profile: GoogleProfile) -> AuthSession:
        """Upsert the user behind a Google profile and open a session."""
        user = UserRepository(session).upsert_from_profile(profile)
        if user.user_id is None:
            raise ValueError("User has not been persisted")

        sessions = AuthSessionRepository(session)
        sessions.purge_expired()
        auth_session = sessions.create_for_user(
            user.user_id, self.session_max_age_seconds
        )
        logger.info(f"User {user.user_id} logged in")
        return auth_session

    def logout(self, session: Session, session_id: str | None) -> None:
        """Close a session. Unknown or missing IDs are ignored."""
        if session_id and AuthSessionRepository(session).delete(session_id):
            logger.info("Session closed")

    def resolve_user(self, session: Session, session_id: str | None) -> User:
        """Return the user identified by a session cookie.

        Raises:
            UnauthorizedError: If the session is missing, unknown or expired
        """
        if not session_id:
            raise UnauthorizedError("Missing session")

        auth_session = AuthSessionRepository(session).get_active(session_id)
        if auth_session is None:
            raise UnauthorizedError("Invalid or expired session")

        user = UserRepository(session).get_by_id(auth_session.user_id)
        if user is None:
            raise UnauthorizedError("Session user no longer exists")
        return user
