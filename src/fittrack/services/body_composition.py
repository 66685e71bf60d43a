"""Body-fat estimation using the US Navy circumference method.

Only the male formula is implemented:
86.010 * log10(waist - neck) - 70.041 * log10(height) + 36.76
"""

import math

from fittrack.domain.body import BodyComposition, BodyFatResult, FatLossProjection
from fittrack.services.rounding import round_one_decimal

TARGET_RANGE = "10-15%"
DEFAULT_TARGET_BODY_FAT = 15

_CATEGORIES: tuple[tuple[float, str, str], ...] = (
    (6, "Essential Fat", "Too low - health risk"),
    (13, "Athletes", "Athletic build"),
    (17, "Fitness", "Fit and lean"),
    (24, "Average", "Acceptable range"),
    (100, "Obese", "Above healthy range"),
)


class InvalidMeasurementError(ValueError):
    """Raised when body measurements cannot produce an estimate."""


def calculate_body_fat_navy(waist_cm: float, neck_cm: float, height_cm: float) -> float:
    """Return body-fat percentage from waist, neck and height in centimeters."""
    if waist_cm <= neck_cm:
        raise InvalidMeasurementError(
            "Waist measurement must be larger than neck measurement"
        )
    if waist_cm <= 0 or neck_cm <= 0 or height_cm <= 0:
        raise InvalidMeasurementError("All measurements must be positive numbers")

    body_fat = (
        86.010 * math.log10(waist_cm - neck_cm)
        - 70.041 * math.log10(height_cm)
        + 36.76
    )
    return round_one_decimal(body_fat)


def get_body_fat_category(body_fat_percentage: float) -> BodyFatResult:
    """Return the category bucket for a body-fat percentage."""
    for upper_bound, category, description in _CATEGORIES:
        if body_fat_percentage <= upper_bound:
            break
    else:
        category, description = "Unknown", "Unable to categorize"
    return BodyFatResult(
        percentage=body_fat_percentage,
        category=category,
        description=description,
        target_range=TARGET_RANGE,
    )


def calculate_lean_body_mass(weight_kg: float, body_fat_percentage: float) -> float:
    """Return mass that is not fat, in kilograms."""
    fat_mass = weight_kg * (body_fat_percentage / 100)
    return round_one_decimal(weight_kg - fat_mass)


def calculate_fat_mass(weight_kg: float, body_fat_percentage: float) -> float:
    """Return fat mass in kilograms."""
    return round_one_decimal(weight_kg * (body_fat_percentage / 100))


def calculate_fat_loss_to_target(
    weight_kg: float,
    current_body_fat_percent: float,
    target_body_fat_percent: float = DEFAULT_TARGET_BODY_FAT,
) -> FatLossProjection:
    """Estimate fat to lose to reach a target, keeping lean mass constant."""
    lean_mass = calculate_lean_body_mass(weight_kg, current_body_fat_percent)
    current_fat_mass = calculate_fat_mass(weight_kg, current_body_fat_percent)
    estimated_target_weight = round_one_decimal(
        lean_mass / (1 - target_body_fat_percent / 100)
    )
    target_fat_mass = round_one_decimal(estimated_target_weight - lean_mass)
    fat_to_lose = round_one_decimal(current_fat_mass - target_fat_mass)
    return FatLossProjection(
        current_fat_mass=current_fat_mass,
        target_fat_mass=target_fat_mass,
        fat_to_lose=fat_to_lose,
        estimated_target_weight=estimated_target_weight,
    )


def get_body_composition(
    weight_kg: float,
    waist_cm: float,
    neck_cm: float,
    height_cm: float,
    target_body_fat_percent: float = DEFAULT_TARGET_BODY_FAT,
) -> BodyComposition:
    """Return the full body-composition summary for a set of measurements."""
    body_fat = calculate_body_fat_navy(waist_cm, neck_cm, height_cm)
    return BodyComposition(
        body_fat_percentage=body_fat,
        category=get_body_fat_category(body_fat),
        lean_mass=calculate_lean_body_mass(weight_kg, body_fat),
        fat_mass=calculate_fat_mass(weight_kg, body_fat),
        fat_loss_to_target=calculate_fat_loss_to_target(
            weight_kg, body_fat, target_body_fat_percent
        ),
    )
