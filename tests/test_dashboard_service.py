"""Tests for dashboard service."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from fittrack.domain.profile import UserProfile
from fittrack.services.dashboard import DailyTargets, DashboardService
from fittrack.services.food_log import FoodLogService
from tests.conftest import InMemoryFoodLogRepository

PROFILE = UserProfile(
    weight_kg=67.7, height_cm=168, age=23, activity_level="moderate", goal="recomp"
)
TARGETS = DailyTargets(calories=2200, protein_g=135, water_ml=3000)


def test_dashboard_for_empty_day() -> None:
    service = DashboardService(
        food_log_service=FoodLogService(InMemoryFoodLogRepository()),
        profile=PROFILE,
        targets=TARGETS,
    )

    dashboard = service.get_dashboard(uuid4())

    assert dashboard.totals.calories == 0
    assert dashboard.progress.calorie_percentage == 0
    assert dashboard.progress.protein_percentage == 0
    assert dashboard.streak == 0
    assert dashboard.balance.status == "deficit"
    assert dashboard.stats.bmr == 1617


def test_dashboard_totals_progress_and_streak() -> None:
    repository = InMemoryFoodLogRepository()
    user_id = uuid4()
    now = datetime.now(tz=UTC)
    repository.add(user_id, now, 1100, protein_g=67.5)
    repository.add(user_id, now - timedelta(days=1), 2000)
    repository.add(user_id, now - timedelta(days=2), 1800)
    service = DashboardService(
        food_log_service=FoodLogService(repository),
        profile=PROFILE,
        targets=TARGETS,
    )

    dashboard = service.get_dashboard(user_id)

    assert dashboard.day == now.date()
    assert dashboard.totals.calories == 1100
    assert dashboard.progress.calorie_percentage == 50
    assert dashboard.progress.protein_percentage == 50
    assert dashboard.streak == 3
    assert len(dashboard.entries) == 1


def test_dashboard_capped_progress_and_workout_flag() -> None:
    repository = InMemoryFoodLogRepository()
    user_id = uuid4()
    repository.add(user_id, datetime.now(tz=UTC), 2420, protein_g=150)
    service = DashboardService(
        food_log_service=FoodLogService(repository),
        profile=PROFILE,
        targets=TARGETS,
    )

    dashboard = service.get_dashboard(user_id)

    assert dashboard.progress.calorie_percentage == 110
    assert dashboard.progress.capped_calorie_percentage == 100
    assert dashboard.progress.protein_percentage == 111
    assert dashboard.progress.capped_protein_percentage == 100
    assert dashboard.is_workout_day is (dashboard.day.weekday() < 5)
    assert (dashboard.workout_day is None) is not dashboard.is_workout_day


def test_dashboard_streak_limited_by_lookback() -> None:
    repository = InMemoryFoodLogRepository()
    user_id = uuid4()
    now = datetime.now(tz=UTC)
    for offset in range(5):
        repository.add(user_id, now - timedelta(days=offset), 2000)
    food_log_service = FoodLogService(repository)

    default = DashboardService(
        food_log_service=food_log_service, profile=PROFILE, targets=TARGETS
    )
    short = DashboardService(
        food_log_service=food_log_service,
        profile=PROFILE,
        targets=TARGETS,
        streak_lookback_days=3,
    )

    assert default.get_dashboard(user_id).streak == 5
    assert short.get_dashboard(user_id).streak == 4
