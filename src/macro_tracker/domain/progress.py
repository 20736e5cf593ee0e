"""Domain models for goal progress."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class GoalProgress:
    """Time-based progress towards a target weight."""

    current_weight: float
    target_weight: float
    weight_change: float
    weight_change_pct: float
    weeks_elapsed: int
    weeks_remaining: int
    weeks_total: int
    progress_pct: float
    weekly_rate_target: float
    on_track: bool
    estimated_end_date: date
