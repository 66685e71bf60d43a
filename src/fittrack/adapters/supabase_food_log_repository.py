"""Supabase repository for food logs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from fittrack.domain.food import FoodEntry
from fittrack.services.food_log import FoodLogRepository

_COLUMNS = (
    "id, user_id, logged_at, description, calories, protein_g, carbs_g, fat_g, "
    "fiber_g, meal_type"
)


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for the food_logs table."""

    client: Client

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Insert a food log row and return it."""
        response = (
            self.client.table("food_logs")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save food log")
        return _parse_entry(response.data[0])

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return entries in the time range, newest first."""
        response = (
            self.client.table("food_logs")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a food log row."""
        self.client.table("food_logs").delete().eq("id", str(entry_id)).execute()


def _optional_float(value: object) -> float | None:
    return None if value is None else float(value)


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        logged_at=datetime.fromisoformat(row["logged_at"]),
        description=str(row.get("description", "")),
        calories=int(row.get("calories") or 0),
        protein_g=_optional_float(row.get("protein_g")),
        carbs_g=_optional_float(row.get("carbs_g")),
        fat_g=_optional_float(row.get("fat_g")),
        fiber_g=_optional_float(row.get("fiber_g")),
        meal_type=row.get("meal_type"),
    )
