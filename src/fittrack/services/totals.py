"""Folding food entries into nutrient totals and progress percentages."""

from collections.abc import Iterable
from dataclasses import dataclass

from fittrack.domain.food import FoodEntry, NutrientTotals
from fittrack.services.rounding import round_half_up

_MAX_PROGRESS = 100


@dataclass(frozen=True)
class DailyProgress:
    """Progress of today's totals towards the daily targets."""

    calorie_percentage: int
    protein_percentage: int
    capped_calorie_percentage: int
    capped_protein_percentage: int


def sum_entries(entries: Iterable[FoodEntry]) -> NutrientTotals:
    """Sum nutrients across entries, counting missing values as zero."""
    calories = protein = carbs = fat = fiber = 0.0
    for entry in entries:
        calories += entry.calories or 0
        protein += entry.protein_g or 0
        carbs += entry.carbs_g or 0
        fat += entry.fat_g or 0
        fiber += entry.fiber_g or 0
    return NutrientTotals(
        calories=calories, protein=protein, carbs=carbs, fat=fat, fiber=fiber
    )


def add_totals(left: NutrientTotals, right: NutrientTotals) -> NutrientTotals:
    """Return the element-wise sum of two totals."""
    return NutrientTotals(
        calories=left.calories + right.calories,
        protein=left.protein + right.protein,
        carbs=left.carbs + right.carbs,
        fat=left.fat + right.fat,
        fiber=left.fiber + right.fiber,
    )


def percentage_of(value: float, target: float) -> int:
    """Return value as a whole percentage of target; a zero target counts as 1."""
    return round_half_up(value / (target or 1) * 100)


def capped_percentage(current: float, target: float) -> int:
    """Return a progress-bar percentage between 0 and 100."""
    if target == 0:
        return 0
    return min(round_half_up(current / target * 100), _MAX_PROGRESS)


def daily_progress(
    totals: NutrientTotals, calorie_target: float, protein_target: float
) -> DailyProgress:
    return DailyProgress(
        calorie_percentage=percentage_of(totals.calories, calorie_target),
        protein_percentage=percentage_of(totals.protein, protein_target),
        capped_calorie_percentage=capped_percentage(totals.calories, calorie_target),
        capped_protein_percentage=capped_percentage(totals.protein, protein_target),
    )
