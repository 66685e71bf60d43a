"""Supabase repository for food presets."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from fittrack.domain.food import FoodPreset
from fittrack.services.presets import PresetRepository

_COLUMNS = "id, user_id, name, description, calories, protein_g, carbs_g, fat_g"


@dataclass
class SupabasePresetRepository(PresetRepository):
    """Supabase implementation for the food_presets table."""

    client: Client

    def list_presets(self, user_id: UUID) -> list[FoodPreset]:
        """Return a user's presets ordered by name."""
        response = (
            self.client.table("food_presets")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("name", desc=False)
            .execute()
        )
        return [_parse_preset(row) for row in response.data or []]

    def get_preset(self, preset_id: UUID) -> FoodPreset | None:
        """Return a preset by id."""
        response = (
            self.client.table("food_presets")
            .select(_COLUMNS)
            .eq("id", str(preset_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_preset(response.data[0])

    def create_preset(self, user_id: UUID, payload: dict[str, object]) -> FoodPreset:
        """Insert a preset row and return it."""
        response = (
            self.client.table("food_presets")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save preset")
        return _parse_preset(response.data[0])

    def delete_preset(self, preset_id: UUID) -> None:
        """Delete a preset row."""
        self.client.table("food_presets").delete().eq("id", str(preset_id)).execute()


def _parse_preset(row: dict[str, object]) -> FoodPreset:
    name = str(row.get("name", ""))
    return FoodPreset(
        id=UUID(row["id"]),
        user_id=UUID(row["user_id"]),
        name=name,
        description=str(row.get("description") or name),
        calories=int(row.get("calories") or 0),
        protein_g=float(row.get("protein_g") or 0.0),
        carbs_g=float(row.get("carbs_g") or 0.0),
        fat_g=float(row.get("fat_g") or 0.0),
    )
