"""Consecutive-day streaks over logged activity dates."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

SATURDAY = 5

_WORKOUT_DAY_NAMES = {
    0: "Push Day",
    1: "Pull Day",
    2: "Legs Day",
    3: "Upper Body",
    4: "Core & Conditioning",
}


def calculate_streak(
    dates: Iterable[date | datetime | str],
    exclude_weekends: bool = False,
    today: date | None = None,
) -> int:
    """Count consecutive days with activity, ending today.

    Weekends are skipped without breaking the streak when
    ``exclude_weekends`` is set. Days after the expected day are ignored.
    """
    days = sorted({_to_day(value) for value in dates}, reverse=True)
    if not days:
        return 0

    expected = today or date.today()
    streak = 0
    index = 0
    while index < len(days):
        if exclude_weekends and expected.weekday() >= SATURDAY:
            expected -= timedelta(days=1)
            continue
        day = days[index]
        if day == expected:
            streak += 1
            index += 1
        elif day < expected:
            break
        else:
            index += 1
            continue
        expected -= timedelta(days=1)
    return streak


def is_workout_day(day: date) -> bool:
    """Return True for Monday through Friday."""
    return day.weekday() < SATURDAY


def workout_day_name(day: date) -> str | None:
    """Return the training split name for a day, or None on rest days."""
    return _WORKOUT_DAY_NAMES.get(day.weekday())


def _to_day(value: date | datetime | str) -> date:
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime):
        return value.date()
    return value
