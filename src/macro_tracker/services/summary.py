"""Daily and weekly adherence summaries."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.errors import InvalidArgumentError
from macro_tracker.domain.models import DailyTarget, Entry
from macro_tracker.domain.summary import (
    AdherenceStatus,
    DailySummary,
    MacroTotals,
    TrendDay,
    WeeklyTrend,
)
from macro_tracker.domain.targets import MacroTargets
from macro_tracker.rounding import round_half_up, round_int

STATUS_TOLERANCE_PCT = 5
TREND_DAYS = 7


class DailyTargetRepository(Protocol):
    """Persistence interface for daily targets."""

    def get_target(self, user_id: UUID, day: date) -> DailyTarget | None:
        """Return the target for a user and date, if present."""

    def list_targets(self, user_id: UUID, start: date, end: date) -> list[DailyTarget]:
        """Return targets between two dates, inclusive."""

    def upsert_target(self, target: DailyTarget) -> DailyTarget:
        """Create or replace the target for the target's user and date."""


class EntryRepository(Protocol):
    """Persistence interface for logged entries."""

    def create_entry(self, entry: Entry) -> Entry:
        """Create an entry and return it with its id."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[Entry]:
        """Return entries between two dates, inclusive, oldest first."""


def calculate_daily_summary(
    entries: Iterable[Entry],
    target: DailyTarget | MacroTargets | MacroTotals,
    day: date,
) -> DailySummary:
    """Sum a day's entries and compare them with its target."""
    calories = protein = fat = carbs = 0.0
    for entry in entries:
        calories += entry.kcal
        protein += entry.protein_g
        fat += entry.fat_g
        carbs += entry.carbs_g

    if target.calories_kcal <= 0:
        raise InvalidArgumentError("target calories must be positive")

    delta = MacroTotals(
        calories_kcal=round_half_up(calories - target.calories_kcal, 1),
        protein_g=round_half_up(protein - target.protein_g, 1),
        fat_g=round_half_up(fat - target.fat_g, 1),
        carbs_g=round_half_up(carbs - target.carbs_g, 1),
    )
    diff_pct = abs(delta.calories_kcal) / target.calories_kcal * 100
    status = AdherenceStatus.OK
    if diff_pct > STATUS_TOLERANCE_PCT:
        status = (
            AdherenceStatus.UNDER if delta.calories_kcal < 0 else AdherenceStatus.OVER
        )

    return DailySummary(
        day=day,
        consumed=MacroTotals(
            calories_kcal=round_int(calories),
            protein_g=round_half_up(protein, 1),
            fat_g=round_half_up(fat, 1),
            carbs_g=round_half_up(carbs, 1),
        ),
        target=MacroTotals(
            calories_kcal=target.calories_kcal,
            protein_g=target.protein_g,
            fat_g=target.fat_g,
            carbs_g=target.carbs_g,
        ),
        delta=delta,
        status=status,
    )


def summarize_week(
    end: date, targets: list[DailyTarget], entries: list[Entry]
) -> WeeklyTrend:
    """Build the seven-day trend ending on ``end``."""
    start = end - timedelta(days=TREND_DAYS - 1)
    targets_by_day = {target.day: target for target in targets}
    days: list[TrendDay] = []
    for offset in range(TREND_DAYS):
        day = start + timedelta(days=offset)
        target = targets_by_day.get(day)
        if target is None:
            days.append(TrendDay(day=day, summary=None))
            continue
        day_entries = [entry for entry in entries if entry.day == day]
        days.append(
            TrendDay(day=day, summary=calculate_daily_summary(day_entries, target, day))
        )

    summaries = [item.summary for item in days if item.summary is not None]
    avg_calories = avg_target = 0
    if summaries:
        avg_calories = round_int(
            sum(summary.consumed.calories_kcal for summary in summaries)
            / len(summaries)
        )
        avg_target = round_int(
            sum(summary.target.calories_kcal for summary in summaries) / len(summaries)
        )
    counts = {status: 0 for status in AdherenceStatus}
    for summary in summaries:
        counts[summary.status] += 1
    return WeeklyTrend(
        days=days,
        avg_calories=avg_calories,
        avg_target=avg_target,
        avg_delta=avg_calories - avg_target,
        status_counts=counts,
    )


@dataclass
class SummaryService:
    """Service that loads targets and entries and summarizes them."""

    target_repository: DailyTargetRepository
    entry_repository: EntryRepository

    def get_day(self, user_id: UUID, day: date) -> DailySummary | None:
        """Return the summary for a date, or None when no target is defined."""
        target = self.target_repository.get_target(user_id, day)
        if target is None:
            return None
        entries = self.entry_repository.list_entries(user_id, day, day)
        return calculate_daily_summary(entries, target, day)

    def get_week(self, user_id: UUID, today: date | None = None) -> WeeklyTrend:
        """Return the trend for the seven days ending today."""
        end = today or date.today()
        start = end - timedelta(days=TREND_DAYS - 1)
        targets = self.target_repository.list_targets(user_id, start, end)
        entries = self.entry_repository.list_entries(user_id, start, end)
        return summarize_week(end, targets, entries)
