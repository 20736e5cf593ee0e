"""Goal progress tracking."""

import logging
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from macro_tracker.domain.errors import InvalidArgumentError
from macro_tracker.domain.models import GoalType
from macro_tracker.domain.progress import GoalProgress
from macro_tracker.rounding import round_half_up
from macro_tracker.services.dates import end_date, weeks_elapsed
from macro_tracker.services.goals import GoalRepository, ProfileRepository

logger = logging.getLogger(__name__)


def calculate_goal_progress(  # noqa: PLR0913
    current_weight_kg: float,
    target_weight_kg: float,
    duration_weeks: int,
    start_date: date,
    goal_type: GoalType,
    today: date | None = None,
    start_weight_kg: float | None = None,
) -> GoalProgress:
    """Return time-based progress towards a target weight.

    Without ``start_weight_kg`` the actual change is measured against the
    current weight itself and is therefore always zero.
    """
    if duration_weeks <= 0:
        raise InvalidArgumentError("duration_weeks must be positive")
    if current_weight_kg <= 0:
        raise InvalidArgumentError("current_weight_kg must be positive")
    elapsed = weeks_elapsed(start_date, today)
    remaining = max(0, duration_weeks - elapsed)
    total_change = target_weight_kg - current_weight_kg
    weekly_rate = total_change / duration_weeks
    progress_pct = min(100.0, elapsed / duration_weeks * 100)

    expected_change = weekly_rate * elapsed
    baseline = current_weight_kg if start_weight_kg is None else start_weight_kg
    actual_change = current_weight_kg - baseline
    on_track = abs(actual_change - expected_change) < abs(weekly_rate)
    logger.debug(
        "Progress for %s goal: %s/%s weeks elapsed",
        goal_type.value,
        elapsed,
        duration_weeks,
    )

    return GoalProgress(
        current_weight=current_weight_kg,
        target_weight=target_weight_kg,
        weight_change=total_change,
        weight_change_pct=total_change / current_weight_kg * 100,
        weeks_elapsed=elapsed,
        weeks_remaining=remaining,
        weeks_total=duration_weeks,
        progress_pct=round_half_up(progress_pct, 1),
        weekly_rate_target=round_half_up(weekly_rate, 2),
        on_track=on_track,
        estimated_end_date=end_date(start_date, duration_weeks),
    )


@dataclass
class ProgressService:
    """Service that reports progress for a user's active goal."""

    profile_repository: ProfileRepository
    goal_repository: GoalRepository

    def get_active(
        self,
        user_id: UUID,
        current_weight_kg: float | None = None,
        today: date | None = None,
    ) -> GoalProgress | None:
        """Return progress for the active goal, or None if it has no timeline."""
        goal = self.goal_repository.get_active_goal(user_id)
        if goal is None:
            return None
        params = goal.params
        if (
            params.target_weight_kg is None
            or not params.duration_weeks
            or params.start_date is None
        ):
            return None
        weight = current_weight_kg
        if weight is None:
            profile = self.profile_repository.get_profile(user_id)
            if profile is None:
                return None
            weight = profile.weight_kg
        return calculate_goal_progress(
            weight,
            params.target_weight_kg,
            params.duration_weeks,
            params.start_date,
            params.goal_type,
            today=today,
        )
