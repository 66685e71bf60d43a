"""Tests for user service."""

from fittrack.domain.profile import UserProfile
from fittrack.services.users import UserService
from tests.conftest import InMemoryUserRepository

PROFILE = UserProfile(
    weight_kg=67.7, height_cm=168, age=23, activity_level="moderate", goal="recomp"
)


def test_ensure_user_creates_from_profile() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository, pin="0007")

    user = service.ensure_user(PROFILE)

    assert user.weight_kg == 67.7
    assert repository.created_payloads == [
        {
            "pin_hash": "0007",
            "weight_kg": 67.7,
            "height_cm": 168,
            "age": 23,
            "goal": "recomp",
        }
    ]


def test_ensure_user_reuses_existing() -> None:
    repository = InMemoryUserRepository()
    service = UserService(repository, pin="0007")

    first = service.ensure_user(PROFILE)
    second = service.ensure_user(PROFILE)

    assert first.id == second.id
    assert len(repository.users) == 1
