"""Models for AI nutrition and body-photo estimates."""

from typing import Literal

from pydantic import BaseModel, Field


class FoodAnalysis(BaseModel):
    """Nutrition estimate for a free-text food description."""

    food_name: str
    portion_description: str = ""
    calories: float = Field(ge=0)
    protein_g: float = Field(ge=0)
    carbs_g: float = Field(ge=0)
    fat_g: float = Field(ge=0)
    fiber_g: float = Field(default=0, ge=0)
    confidence: Literal["high", "medium", "low"] = "medium"


class BodyAnalysis(BaseModel):
    """Body-composition feedback for a progress photo."""

    estimated_body_fat_range: str = Field(min_length=1)
    strong_areas: list[str]
    improvement_areas: list[str]
    recommendations: list[str]
    overall_assessment: str = Field(min_length=1)
