"""Request models for the JSON API."""

from pydantic import BaseModel, ConfigDict, Field

from fittrack.domain.food import MealType
from fittrack.domain.profile import ActivityLevel, Goal


class PinRequest(BaseModel):
    pin: str


class _NumericRequest(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)


class LogFoodRequest(_NumericRequest):
    """Body for logging a food entry."""

    description: str = Field(min_length=1)
    calories: float = Field(ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)
    fiber_g: float | None = Field(default=None, ge=0)
    meal_type: MealType | None = None


class PresetRequest(_NumericRequest):
    """Body for saving a food preset."""

    name: str = Field(min_length=1)
    description: str | None = None
    calories: float = Field(ge=0)
    protein_g: float | None = Field(default=None, ge=0)
    carbs_g: float | None = Field(default=None, ge=0)
    fat_g: float | None = Field(default=None, ge=0)


class AnalyzeFoodRequest(BaseModel):
    description: str


class MetabolismRequest(_NumericRequest):
    """Body for the BMR/TDEE/macro calculator."""

    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    age: int = Field(gt=0)
    activity_level: ActivityLevel = "moderate"
    goal: Goal = "recomp"
    consumed_calories: float | None = Field(default=None, ge=0)


class BodyCompositionRequest(_NumericRequest):
    """Body for the Navy-method calculator, all lengths in centimeters."""

    weight_kg: float = Field(gt=0)
    waist_cm: float
    neck_cm: float
    height_cm: float
    target_body_fat: float = Field(default=15, gt=0, lt=100)


class DaysToGoalRequest(_NumericRequest):
    current_weight: float = Field(gt=0)
    goal_weight: float = Field(gt=0)
    weekly_change_kg: float
