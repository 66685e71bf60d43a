"""Domain models for energy and macro targets."""

from dataclasses import dataclass
from typing import Literal

BalanceStatus = Literal["deficit", "surplus", "on_target"]


@dataclass(frozen=True)
class MacroSplit:
    """Daily macro targets in grams."""

    protein: int
    carbs: int
    fat: int


@dataclass(frozen=True)
class CalorieBalance:
    """Consumed calories compared against a target."""

    difference: float
    status: BalanceStatus
    percentage: int


@dataclass(frozen=True)
class UserStats:
    """Derived energy targets for a profile."""

    bmr: int
    tdee: int
    target_calories: int
    protein_target: int
    macros: MacroSplit
