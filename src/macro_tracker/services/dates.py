"""Calendar helpers for ages and goal durations."""

from datetime import date, timedelta

DAYS_PER_WEEK = 7


def calculate_age(birth_date: date, today: date | None = None) -> int:
    """Return age in whole years on ``today``."""
    current = today or date.today()
    age = current.year - birth_date.year
    if (current.month, current.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def weeks_elapsed(start: date, today: date | None = None) -> int:
    """Return whole weeks since ``start``, never negative."""
    current = today or date.today()
    return max(0, (current - start).days // DAYS_PER_WEEK)


def end_date(start: date, duration_weeks: int) -> date:
    """Return the date ``duration_weeks`` after ``start``."""
    return start + timedelta(days=duration_weeks * DAYS_PER_WEEK)
