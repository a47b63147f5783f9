"""Tests for UserRepository."""

from core.database.repository import UserRepository
from core.models.domain.user import GoogleProfile
from core.models.rows import User
from core.types import Locale


def test_new_user_defaults(saved_user: User) -> None:
    assert saved_user.user_id is not None
    assert saved_user.preferred_locale == Locale.EN
    assert saved_user.genres == []
    assert saved_user.books_sorting == [{"id": "index", "desc": False}]


def test_get_by_google_id(user_repo: UserRepository, saved_user: User) -> None:
    found = user_repo.get_by_google_id("google-123")
    assert found is not None
    assert found.user_id == saved_user.user_id
    assert user_repo.get_by_google_id("unknown") is None


def test_upsert_from_profile_creates_user(user_repo: UserRepository) -> None:
    profile = GoogleProfile(google_id="google-new", email=None, name="Someone")

    user = user_repo.upsert_from_profile(profile)

    assert user.user_id is not None
    assert user.google_id == "google-new"
    assert user.email is None
    assert user_repo.count() == 1


def test_upsert_from_profile_refreshes_identity_only(
    user_repo: UserRepository, saved_user: User
) -> None:
    user_repo.update_fields(
        saved_user, {"genres": ["Fantasy"], "preferred_locale": Locale.FR}
    )
    profile = GoogleProfile(
        google_id="google-123",
        email="renamed@example.com",
        name="Renamed",
        picture="https://example.com/new.png",
    )

    user = user_repo.upsert_from_profile(profile)

    assert user.user_id == saved_user.user_id
    assert user.name == "Renamed"
    assert user.email == "renamed@example.com"
    assert user.picture == "https://example.com/new.png"
    assert user.genres == ["Fantasy"]
    assert user.preferred_locale == Locale.FR
    assert user_repo.count() == 1


def test_update_fields_persists_json_columns(
    user_repo: UserRepository, saved_user: User
) -> None:
    sorting = [{"id": "rating", "desc": True}]
    user_repo.update_fields(saved_user, {"books_sorting": sorting})

    reloaded = user_repo.get_by_id(saved_user.user_id)
    assert reloaded is not None
    assert reloaded.books_sorting == sorting


def test_profile_from_userinfo_fallbacks() -> None:
    profile = GoogleProfile.from_userinfo({"sub": "1", "email": "a@b.c", "name": ""})
    assert profile.name == "a@b.c"
    assert profile.picture is None

    anonymous = GoogleProfile.from_userinfo({"sub": "2"})
    assert anonymous.name == "User"
    assert anonymous.email is None
