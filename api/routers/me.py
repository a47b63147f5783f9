"""Current user profile and preferences router."""

from fastapi import APIRouter

from api.dependencies import CurrentUser, DBSession, UserServiceDep
from api.literals import ME_BASE_PATH
from core.models.api.requests import GenresPatchRequest, PreferencesPatchRequest
from core.models.api.responses import (
    GenresResponse,
    PreferencesResponse,
    ProfileResponse,
)

router = APIRouter(prefix=ME_BASE_PATH, tags=["me"])


@router.get("", response_model=ProfileResponse)
async def get_me(user: CurrentUser, user_service: UserServiceDep) -> ProfileResponse:
    """Return the caller's profile and preferences."""
    return user_service.get_profile(user)


@router.patch("/preferences", response_model=PreferencesResponse)
async def patch_preferences(
    data: PreferencesPatchRequest,
    user: CurrentUser,
    db: DBSession,
    user_service: UserServiceDep,
) -> PreferencesResponse:
    """Update the interface locale and/or the books table sorting."""
    return user_service.update_preferences(db, user, data)


@router.patch("/genres", response_model=GenresResponse)
async def patch_genres(
    data: GenresPatchRequest,
    user: CurrentUser,
    db: DBSession,
    user_service: UserServiceDep,
) -> GenresResponse:
    """Replace the caller's genre suggestion list."""
    return user_service.update_genres(db, user, data)
