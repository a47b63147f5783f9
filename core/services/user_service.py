"""Service for profile and preference operations."""

from typing import Any

from sqlmodel import Session

from core.coercion import normalize_genres, normalize_sorting, validate_locale
from core.database.repository import UserRepository
from core.log import get_logger
from core.models.api.requests import GenresPatchRequest, PreferencesPatchRequest
from core.models.api.responses import (
    GenresResponse,
    PreferencesResponse,
    ProfileResponse,
    SortClause,
)
from core.models.rows import User

logger = get_logger(__name__)


class UserService:
    """Service for profile and preference operations."""

    def get_profile(self, user: User) -> ProfileResponse:
        """Return the user's profile and preferences."""
        return ProfileResponse.from_row(user)

    def update_preferences(
        self, session: Session, user: User, data: PreferencesPatchRequest
    ) -> PreferencesResponse:
        """Update locale and/or sorting preferences.

        Both fields are validated before either is written.

        Raises:
            InvalidFieldError: If the locale is unsupported or sorting is not a list
        """
        provided = data.provided()
        changes: dict[str, Any] = {}

        if "preferred_locale" in provided:
            changes["preferred_locale"] = validate_locale(provided["preferred_locale"])
        if "books_sorting" in provided:
            changes["books_sorting"] = normalize_sorting(provided["books_sorting"])

        if changes:
            user = UserRepository(session).update_fields(user, changes)
            logger.info(f"Updated preferences {sorted(changes)} of user {user.user_id}")

        return PreferencesResponse(
            id=self._user_id(user),
            preferred_locale=user.preferred_locale,
            books_sorting=[SortClause(**clause) for clause in user.books_sorting or []],
        )

    def update_genres(
        self, session: Session, user: User, data: GenresPatchRequest
    ) -> GenresResponse:
        """Replace the genre suggestion list.

        Raises:
            InvalidFieldError: If genres is not a list
        """
        genres = normalize_genres(data.genres)
        user = UserRepository(session).update_fields(user, {"genres": genres})
        logger.info(f"Stored {len(genres)} genres for user {user.user_id}")
        return GenresResponse(id=self._user_id(user), genres=list(user.genres))

    @staticmethod
    def _user_id(user: User) -> int:
        if user.user_id is None:
            raise ValueError("User has not been persisted")
        return user.user_id
