"""Back-solve a deficit or surplus percentage from a weight goal."""

from macro_tracker.domain.errors import InvalidArgumentError
from macro_tracker.domain.models import GoalType
from macro_tracker.rounding import round_int

KCAL_PER_KG_BODY_WEIGHT = 7700
MIN_PCT = 5
MAX_LOSS_PCT = 25
MAX_GAIN_PCT = 20


def calculate_optimal_deficit_or_surplus(
    current_weight_kg: float,
    target_weight_kg: float,
    duration_weeks: float,
    tdee: float,
    goal_type: GoalType,
) -> int:
    """Return the percentage needed to reach the target weight in time."""
    if duration_weeks <= 0:
        raise InvalidArgumentError("duration_weeks must be positive")
    if tdee <= 0:
        raise InvalidArgumentError("tdee must be positive")
    weekly_change = abs(target_weight_kg - current_weight_kg) / duration_weeks
    daily_delta = weekly_change * KCAL_PER_KG_BODY_WEIGHT / 7
    raw_pct = daily_delta / tdee * 100
    max_pct = MAX_LOSS_PCT if goal_type == GoalType.LOSS else MAX_GAIN_PCT
    return max(MIN_PCT, min(max_pct, round_int(raw_pct)))
