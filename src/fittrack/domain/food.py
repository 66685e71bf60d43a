"""Domain models for food logging."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal
from uuid import UUID

MealType = Literal["breakfast", "lunch", "dinner", "snack", "preset"]


@dataclass(frozen=True)
class FoodEntry:
    """A logged food item. Optional macros stay None when not provided."""

    id: UUID
    user_id: UUID
    logged_at: datetime
    description: str
    calories: int
    protein_g: float | None
    carbs_g: float | None
    fat_g: float | None
    fiber_g: float | None
    meal_type: str | None


@dataclass(frozen=True)
class FoodPreset:
    """A saved food that can be logged with one action."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class NutrientTotals:
    """Summed nutrients over a set of food entries."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0


@dataclass(frozen=True)
class DailyLog:
    """Food entries for one calendar day with their totals."""

    day: date
    entries: list[FoodEntry]
    totals: NutrientTotals


@dataclass(frozen=True)
class DailyTotals:
    """Totals for a single day of a period summary."""

    day: date
    totals: NutrientTotals
