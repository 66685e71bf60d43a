"""User-related business logic for the single-user deployment."""

from dataclasses import dataclass
from typing import Protocol

from fittrack.domain.profile import UserProfile, UserRecord


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_first_user(self) -> UserRecord | None:
        """Return the only user row, if present."""

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository
    pin: str

    def ensure_user(self, profile: UserProfile) -> UserRecord:
        """Return the stored user, creating it from the profile when missing."""
        existing = self.repository.get_first_user()
        if existing:
            return existing
        return self.repository.create_user(
            {
                "pin_hash": self.pin,
                "weight_kg": profile.weight_kg,
                "height_cm": profile.height_cm,
                "age": profile.age,
                "goal": profile.goal,
            }
        )
