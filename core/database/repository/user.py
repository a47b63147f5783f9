"""User repository using SQLModel with dependency injection."""

from typing import Any

from sqlmodel import Session, select

from core.database.repository.base import BaseRepository
from core.log import get_logger
from core.models.domain.user import GoogleProfile
from core.models.rows import User
from core.utils import get_current_timestamp

logger = get_logger(__name__)


class UserRepository(BaseRepository[User]):
    """User repository using SQLModel with dependency injection."""

    def __init__(self, db: Session) -> None:
        """Initialize user repository."""
        super().__init__(User, db)

    def get_by_google_id(self, google_id: str) -> User | None:
        """Get user by Google account ID.

        Args:
            google_id: Google subject identifier

        Returns:
            User if found, None otherwise
        """
        statement = select(User).where(User.google_id == google_id)
        return self.db.exec(statement).first()

    def upsert_from_profile(self, profile: GoogleProfile) -> User:
        """Create or refresh a user from a Google profile.

        Profile fields are overwritten on every login; preferences, genres
        and sorting are left untouched for existing users.

        Args:
            profile: Identity returned by Google

        Returns:
            The stored user
        """
        user = self.get_by_google_id(profile.google_id)
        if user is None:
            logger.info(f"Creating user for Google account {profile.google_id}")
            return self.create(
                User(
                    google_id=profile.google_id,
                    email=profile.email,
                    name=profile.name,
                    picture=profile.picture,
                )
            )

        return self.update_fields(
            user,
            {"email": profile.email, "name": profile.name, "picture": profile.picture},
        )

    def update_fields(self, user: User, changes: dict[str, Any]) -> User:
        """Write column values to a user and bump ``updated_at``.

        Args:
            user: User to update
            changes: Column values to write

        Returns:
            Updated user
        """
        for field, value in changes.items():
            setattr(user, field, value)
        user.updated_at = get_current_timestamp()
        return self.update(user)
