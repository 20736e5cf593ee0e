"""Domain models for daily and weekly summaries."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum


class AdherenceStatus(StrEnum):
    """How consumed calories compare to the day's target."""

    UNDER = "under"
    OK = "ok"
    OVER = "over"


@dataclass(frozen=True)
class MacroTotals:
    """Calories and macros for a day."""

    calories_kcal: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class DailySummary:
    """Consumed totals against the stored target for a date."""

    day: date
    consumed: MacroTotals
    target: MacroTotals
    delta: MacroTotals
    status: AdherenceStatus


@dataclass(frozen=True)
class TrendDay:
    """One day of a weekly trend; summary is None when no target exists."""

    day: date
    summary: DailySummary | None


@dataclass(frozen=True)
class WeeklyTrend:
    """Seven-day adherence overview."""

    days: list[TrendDay]
    avg_calories: int
    avg_target: int
    avg_delta: int
    status_counts: dict[AdherenceStatus, int]
