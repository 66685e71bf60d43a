"""Dashboard aggregation for today's progress."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from fittrack.domain.food import FoodEntry, NutrientTotals
from fittrack.domain.metabolism import CalorieBalance, UserStats
from fittrack.domain.profile import UserProfile
from fittrack.services.food_log import FoodLogService
from fittrack.services.metabolism import calculate_deficit, calculate_user_stats
from fittrack.services.streaks import (
    calculate_streak,
    is_workout_day,
    workout_day_name,
)
from fittrack.services.totals import DailyProgress, daily_progress, sum_entries

STREAK_LOOKBACK_DAYS = 60


@dataclass(frozen=True)
class DailyTargets:
    """Daily targets shown on the dashboard."""

    calories: int
    protein_g: int
    water_ml: int


@dataclass(frozen=True)
class Dashboard:
    """Snapshot of today's progress."""

    day: date
    entries: list[FoodEntry]
    totals: NutrientTotals
    targets: DailyTargets
    progress: DailyProgress
    balance: CalorieBalance
    streak: int
    is_workout_day: bool
    workout_day: str | None
    stats: UserStats


@dataclass
class DashboardService:
    """Combines food logs with the calculators for the dashboard."""

    food_log_service: FoodLogService
    profile: UserProfile
    targets: DailyTargets
    streak_lookback_days: int = STREAK_LOOKBACK_DAYS

    def get_dashboard(self, user_id: UUID) -> Dashboard:
        """Return today's totals, progress and streak."""
        entries = self.food_log_service.list_today(user_id)
        totals = sum_entries(entries)
        today = self.food_log_service.today()
        logged_days = self.food_log_service.list_logged_days(
            user_id, self.streak_lookback_days
        )
        return Dashboard(
            day=today,
            entries=entries,
            totals=totals,
            targets=self.targets,
            progress=daily_progress(
                totals, self.targets.calories, self.targets.protein_g
            ),
            balance=calculate_deficit(totals.calories, self.targets.calories),
            streak=calculate_streak(logged_days, today=today),
            is_workout_day=is_workout_day(today),
            workout_day=workout_day_name(today),
            stats=calculate_user_stats(self.profile),
        )
