"""Services for saved food presets."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from fittrack.domain.food import FoodEntry, FoodPreset
from fittrack.services.food_log import FoodLogService, NewFoodEntry
from fittrack.services.rounding import round_half_up


class PresetRepository(Protocol):
    """Persistence interface for food presets."""

    def list_presets(self, user_id: UUID) -> list[FoodPreset]:
        """Return presets ordered by name."""

    def get_preset(self, preset_id: UUID) -> FoodPreset | None:
        """Return a preset by id, if present."""

    def create_preset(self, user_id: UUID, payload: dict[str, object]) -> FoodPreset:
        """Insert a preset row and return it."""

    def delete_preset(self, preset_id: UUID) -> None:
        """Delete a preset by id."""


@dataclass(frozen=True)
class NewPreset:
    """Values for a preset about to be saved."""

    name: str
    calories: float
    description: str | None = None
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None


@dataclass
class PresetService:
    """Application service for preset operations."""

    repository: PresetRepository
    food_log_service: FoodLogService

    def list_presets(self, user_id: UUID) -> list[FoodPreset]:
        return self.repository.list_presets(user_id)

    def create_preset(self, user_id: UUID, preset: NewPreset) -> FoodPreset:
        """Save a preset; description falls back to the name."""
        return self.repository.create_preset(
            user_id,
            {
                "name": preset.name,
                "description": preset.description or preset.name,
                "calories": round_half_up(preset.calories),
                "protein_g": preset.protein_g or 0,
                "carbs_g": preset.carbs_g or 0,
                "fat_g": preset.fat_g or 0,
            },
        )

    def delete_preset(self, preset_id: UUID) -> None:
        self.repository.delete_preset(preset_id)

    def log_preset(self, user_id: UUID, preset_id: UUID) -> FoodEntry | None:
        """Log a preset as a food entry; returns None when it doesn't exist."""
        preset = self.repository.get_preset(preset_id)
        if preset is None:
            return None
        return self.food_log_service.log_food(
            user_id,
            NewFoodEntry(
                description=preset.name,
                calories=preset.calories,
                protein_g=preset.protein_g,
                carbs_g=preset.carbs_g,
                fat_g=preset.fat_g,
                meal_type="preset",
            ),
        )
