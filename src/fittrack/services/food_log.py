"""Food logging service with local-day windows and summaries."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from fittrack.domain.food import DailyLog, DailyTotals, FoodEntry, NutrientTotals
from fittrack.services.rounding import round_half_up
from fittrack.services.totals import add_totals, sum_entries

DECEMBER = 12
DEFAULT_MEAL_TYPE = "snack"


class FoodLogRepository(Protocol):
    """Persistence interface for food log entries."""

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> FoodEntry:
        """Insert a food log row and return it."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return entries logged in [start, end), newest first."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a food log row by id."""


@dataclass(frozen=True)
class NewFoodEntry:
    """Values for a food entry about to be logged."""

    description: str
    calories: float
    protein_g: float | None = None
    carbs_g: float | None = None
    fat_g: float | None = None
    fiber_g: float | None = None
    meal_type: str | None = None


@dataclass
class PeriodSummary:
    """Daily totals and per-day averages for a week or month."""

    daily: list[DailyTotals]
    totals: NutrientTotals
    average: NutrientTotals


@dataclass
class FoodLogService:
    """Application service for logging food and reading it back."""

    repository: FoodLogRepository
    timezone_name: str = "UTC"

    def log_food(self, user_id: UUID, entry: NewFoodEntry) -> FoodEntry:
        """Store a food entry with calories rounded to whole kcal."""
        payload: dict[str, object] = {
            "logged_at": datetime.now(tz=UTC).isoformat(),
            "description": entry.description,
            "calories": round_half_up(entry.calories),
            "protein_g": entry.protein_g,
            "carbs_g": entry.carbs_g,
            "fat_g": entry.fat_g,
            "fiber_g": entry.fiber_g,
            "meal_type": entry.meal_type or DEFAULT_MEAL_TYPE,
        }
        return self.repository.create_entry(user_id, payload)

    def delete(self, entry_id: UUID) -> None:
        """Delete a logged entry."""
        self.repository.delete_entry(entry_id)

    def list_today(self, user_id: UUID) -> list[FoodEntry]:
        """Return today's entries in the configured timezone."""
        start = self._local_midnight(self._now())
        return self._list(user_id, start, start + timedelta(days=1))

    def get_history(self, user_id: UUID, days: int = 7) -> list[DailyLog]:
        """Return entries since local midnight ``days`` ago grouped by day."""
        now = self._now()
        start = self._local_midnight(now - timedelta(days=days))
        entries = self._list(user_id, start, now + timedelta(microseconds=1))
        grouped: dict[date, list[FoodEntry]] = {}
        for entry in entries:
            grouped.setdefault(self._local_day(entry), []).append(entry)
        return [
            DailyLog(day=day, entries=day_entries, totals=sum_entries(day_entries))
            for day, day_entries in sorted(grouped.items(), reverse=True)
        ]

    def get_week(self, user_id: UUID) -> PeriodSummary:
        """Return Monday-to-Sunday totals for the current week."""
        now = self._now()
        start = self._local_midnight(now - timedelta(days=now.weekday()))
        return self._summarize(user_id, start, 7)

    def get_month(self, user_id: UUID) -> PeriodSummary:
        """Return totals for the current calendar month."""
        start = self._local_midnight(self._now()).replace(day=1)
        if start.month == DECEMBER:
            end = start.replace(year=start.year + 1, month=1)
        else:
            end = start.replace(month=start.month + 1)
        return self._summarize(user_id, start, (end - start).days)

    def list_logged_days(self, user_id: UUID, days: int) -> list[date]:
        """Return local days with at least one entry within the last ``days``."""
        now = self._now()
        start = self._local_midnight(now - timedelta(days=days))
        entries = self._list(user_id, start, now + timedelta(days=1))
        return sorted({self._local_day(entry) for entry in entries}, reverse=True)

    def today(self) -> date:
        """Return the current date in the configured timezone."""
        return self._now().date()

    def _summarize(self, user_id: UUID, start: datetime, days: int) -> PeriodSummary:
        entries = self._list(user_id, start, start + timedelta(days=days))
        daily = []
        total = NutrientTotals()
        for offset in range(days):
            day = (start + timedelta(days=offset)).date()
            day_totals = sum_entries(
                entry for entry in entries if self._local_day(entry) == day
            )
            daily.append(DailyTotals(day=day, totals=day_totals))
            total = add_totals(total, day_totals)

        divisor = max(days, 1)
        average = NutrientTotals(
            calories=total.calories / divisor,
            protein=total.protein / divisor,
            carbs=total.carbs / divisor,
            fat=total.fat / divisor,
            fiber=total.fiber / divisor,
        )
        return PeriodSummary(daily=daily, totals=total, average=average)

    def _list(self, user_id: UUID, start: datetime, end: datetime) -> list[FoodEntry]:
        return self.repository.list_entries(
            user_id, start.astimezone(UTC), end.astimezone(UTC)
        )

    def _now(self) -> datetime:
        return datetime.now(tz=ZoneInfo(self.timezone_name))

    def _local_day(self, entry: FoodEntry) -> date:
        logged_at = entry.logged_at
        if logged_at.tzinfo is None:
            logged_at = logged_at.replace(tzinfo=UTC)
        return logged_at.astimezone(ZoneInfo(self.timezone_name)).date()

    @staticmethod
    def _local_midnight(moment: datetime) -> datetime:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)
