"""Login session repository using SQLModel with dependency injection."""

import secrets
from datetime import UTC, datetime, timedelta

from sqlmodel import Session, col, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.rows import AuthSession
from core.utils import format_timestamp

logger = get_logger(__name__)

TOKEN_BYTES = 32


class AuthSessionRepository(BaseRepository[AuthSession]):
    """Repository for cookie-backed login sessions."""

    def __init__(self, db: Session) -> None:
        """Initialize session repository."""
        super().__init__(AuthSession, db)

    def create_for_user(self, user_id: int, max_age_seconds: int) -> AuthSession:
        """Open a new session for a user.

        Args:
            user_id: User the session identifies
            max_age_seconds: Session lifetime

        Returns:
            Created session; its ID is the cookie value
        """
        now = datetime.now(UTC)
        session = AuthSession(
            session_id=secrets.token_urlsafe(TOKEN_BYTES),
            user_id=user_id,
            created_at=format_timestamp(now),
            expires_at=format_timestamp(now + timedelta(seconds=max_age_seconds)),
        )
        return self.create(session)

    def get_active(self, session_id: str) -> AuthSession | None:
        """Get a session if it exists and has not expired.

        Expired sessions are deleted on lookup.
        """
        session = self.get_by_id(session_id)
        if session is None:
            return None

        if datetime.fromisoformat(session.expires_at) <= datetime.now(UTC):
            logger.info(f"Session for user {session.user_id} expired")
            self.db.delete(session)
            self.db.commit()
            return None

        return session

    def purge_expired(self) -> int:
        """Delete every expired session.

        Returns:
            Number of sessions deleted
        """
        now = format_timestamp(datetime.now(UTC))
        statement = select(AuthSession).where(col(AuthSession.expires_at) <= now)
        expired = list(self.db.exec(statement).all())
        for session in expired:
            self.db.delete(session)
        if expired:
            self.db.commit()
            logger.info(f"Purged {len(expired)} expired sessions")
        return len(expired)
