"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fittrack.domain.profile import UserRecord
from fittrack.services.users import UserRepository

_COLUMNS = "id, weight_kg, height_cm, age, goal"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_first_user(self) -> UserRecord | None:
        """Return the first user row, if any."""
        response = self.client.table("users").select(_COLUMNS).limit(1).execute()
        if response.data:
            return _parse_user(response.data[0])
        return None

    def create_user(self, payload: dict[str, object]) -> UserRecord:
        """Create a new user row and return it."""
        response = self.client.table("users").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create user")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    weight = row.get("weight_kg")
    height = row.get("height_cm")
    age = row.get("age")
    return UserRecord(
        id=UUID(row["id"]),
        weight_kg=float(weight) if weight is not None else None,
        height_cm=float(height) if height is not None else None,
        age=int(age) if age is not None else None,
        goal=row.get("goal"),
    )
