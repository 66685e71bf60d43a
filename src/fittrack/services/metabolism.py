"""Energy expenditure and macro target calculations (Mifflin-St Jeor)."""

from types import MappingProxyType

from fittrack.domain.metabolism import CalorieBalance, MacroSplit, UserStats
from fittrack.domain.profile import ActivityLevel, Goal, UserProfile
from fittrack.services.rounding import round_half_up

ACTIVITY_MULTIPLIERS = MappingProxyType(
    {
        "sedentary": 1.2,
        "light": 1.375,
        "moderate": 1.55,
        "active": 1.725,
        "very_active": 1.9,
    }
)

_GOAL_CALORIE_FACTORS = MappingProxyType(
    {
        "lose": 0.8,
        "maintain": 1.0,
        "gain": 1.1,
        "recomp": 0.9,
    }
)

_HIGH_PROTEIN_GOALS = frozenset({"gain", "recomp"})
_ON_TARGET_KCAL = 100
_FAT_SHARE = 0.35


def calculate_bmr(weight_kg: float, height_cm: float, age: int) -> int:
    """Return basal metabolic rate for a man in kcal/day."""
    return round_half_up(10 * weight_kg + 6.25 * height_cm - 5 * age + 5)


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> int:
    """Return total daily energy expenditure for an activity level."""
    try:
        multiplier = ACTIVITY_MULTIPLIERS[activity_level]
    except KeyError:
        raise ValueError(f"Unknown activity level: {activity_level}") from None
    return round_half_up(bmr * multiplier)


def calculate_target_calories(tdee: int, goal: Goal) -> int:
    """Return the daily calorie target for a goal."""
    factor = _GOAL_CALORIE_FACTORS.get(goal)
    if factor is None:
        return tdee
    return round_half_up(tdee * factor)


def calculate_protein_target(weight_kg: float, goal: Goal) -> int:
    """Return daily protein in grams: 2.0 g/kg when building, 1.6 g/kg otherwise."""
    multiplier = 2.0 if goal in _HIGH_PROTEIN_GOALS else 1.6
    return round_half_up(weight_kg * multiplier)


def calculate_macros(total_calories: float, protein_target_g: int) -> MacroSplit:
    """Split calories into protein, fat and carbs.

    Fat takes 35% of the calories left after protein. Carbs take the rest,
    computed from the unrounded fat calories.
    """
    protein_calories = protein_target_g * 4
    remaining_calories = total_calories - protein_calories
    fat_calories = remaining_calories * _FAT_SHARE
    fat = round_half_up(fat_calories / 9)
    carb_calories = total_calories - protein_calories - fat_calories
    carbs = round_half_up(carb_calories / 4)
    return MacroSplit(protein=protein_target_g, carbs=carbs, fat=fat)


def calculate_deficit(consumed: float, target: float) -> CalorieBalance:
    """Compare consumed calories with the target."""
    difference = consumed - target
    percentage = round_half_up(consumed / (target or 1) * 100)
    if abs(difference) <= _ON_TARGET_KCAL:
        status = "on_target"
    elif difference < 0:
        status = "deficit"
    else:
        status = "surplus"
    return CalorieBalance(difference=difference, status=status, percentage=percentage)


def calculate_days_to_goal(
    current_weight: float, goal_weight: float, weekly_change_kg: float
) -> int | None:
    """Return days to reach the goal weight, or None if it is never reached."""
    if weekly_change_kg == 0:
        return None
    weeks_needed = (goal_weight - current_weight) / weekly_change_kg
    if weeks_needed < 0:
        return None
    return round_half_up(weeks_needed * 7)


def calculate_user_stats(profile: UserProfile) -> UserStats:
    """Return energy and macro targets for a profile."""
    bmr = calculate_bmr(profile.weight_kg, profile.height_cm, profile.age)
    tdee = calculate_tdee(bmr, profile.activity_level)
    target_calories = calculate_target_calories(tdee, profile.goal)
    protein_target = calculate_protein_target(profile.weight_kg, profile.goal)
    return UserStats(
        bmr=bmr,
        tdee=tdee,
        target_calories=target_calories,
        protein_target=protein_target,
        macros=calculate_macros(target_calories, protein_target),
    )
