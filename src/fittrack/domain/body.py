"""Domain models for body-composition results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BodyFatResult:
    """Body-fat percentage with its category."""

    percentage: float
    category: str
    description: str
    target_range: str


@dataclass(frozen=True)
class FatLossProjection:
    """Fat mass to lose to reach a target body-fat percentage."""

    current_fat_mass: float
    target_fat_mass: float
    fat_to_lose: float
    estimated_target_weight: float


@dataclass(frozen=True)
class BodyComposition:
    """Full body-composition summary from Navy measurements."""

    body_fat_percentage: float
    category: BodyFatResult
    lean_mass: float
    fat_mass: float
    fat_loss_to_target: FatLossProjection
