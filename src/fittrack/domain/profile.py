"""Domain models for the user's body profile."""

from dataclasses import dataclass
from typing import Literal
from uuid import UUID

ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
Goal = Literal["lose", "maintain", "gain", "recomp"]


@dataclass(frozen=True)
class UserProfile:
    """Body metrics and goals used by the calculators."""

    weight_kg: float
    height_cm: float
    age: int
    activity_level: ActivityLevel
    goal: Goal


@dataclass(frozen=True)
class UserRecord:
    """Represents the user row stored in the database."""

    id: UUID
    weight_kg: float | None
    height_cm: float | None
    age: int | None
    goal: str | None
