"""Calorie target and macro split resolution."""

from datetime import date

from macro_tracker.domain.models import GoalParams, GoalType, Profile
from macro_tracker.domain.targets import MacroTargets
from macro_tracker.rounding import round_half_up, round_int
from macro_tracker.services.energy import (
    calculate_bmr,
    calculate_tdee,
    default_bmr_method,
)

PROTEIN_FLOOR_G_PER_KG = 1.6
FAT_MIN_CALORIE_SHARE = 0.25
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

GOAL_TYPE_LABELS = {
    GoalType.LOSS: "Weight loss",
    GoalType.MAINTAIN: "Maintenance",
    GoalType.GAIN: "Weight gain",
}


def calculate_target_calories(
    tdee: float, goal_type: GoalType, deficit_or_surplus_pct: float
) -> int:
    """Apply the goal's deficit or surplus to TDEE.

    The percentage is a magnitude; its sign comes from the goal type.
    """
    if goal_type == GoalType.MAINTAIN:
        return round_int(tdee)
    adjustment = abs(deficit_or_surplus_pct) / 100
    if goal_type == GoalType.LOSS:
        return round_int(tdee * (1 - adjustment))
    return round_int(tdee * (1 + adjustment))


def calculate_macros(
    target_calories: float,
    weight_kg: float,
    protein_g_per_kg: float,
    fat_g_per_kg_min: float,
) -> MacroTargets:
    """Split a calorie target into protein, fat and carbs."""
    protein_g = max(PROTEIN_FLOOR_G_PER_KG, protein_g_per_kg) * weight_kg
    fat_g = max(
        fat_g_per_kg_min * weight_kg,
        FAT_MIN_CALORIE_SHARE * target_calories / KCAL_PER_G_FAT,
    )
    remaining = target_calories - (
        protein_g * KCAL_PER_G_PROTEIN + fat_g * KCAL_PER_G_FAT
    )
    carbs_g = max(0.0, remaining / KCAL_PER_G_CARBS)
    return MacroTargets(
        calories_kcal=round_int(target_calories),
        protein_g=round_half_up(protein_g, 1),
        fat_g=round_half_up(fat_g, 1),
        carbs_g=round_half_up(carbs_g, 1),
    )


def calculate_complete_targets(
    profile: Profile, params: GoalParams, today: date | None = None
) -> MacroTargets:
    """Run the full BMR -> TDEE -> calories -> macros pipeline."""
    method = params.bmr_method or default_bmr_method(profile)
    bmr = calculate_bmr(profile, method, today)
    tdee = calculate_tdee(bmr, params.activity_level)
    target_calories = calculate_target_calories(
        tdee, params.goal_type, params.deficit_or_surplus_pct
    )
    return calculate_macros(
        target_calories,
        profile.weight_kg,
        params.protein_g_per_kg,
        params.fat_g_per_kg_min,
    )


def goal_type_label(goal_type: GoalType) -> str:
    """Return a human-readable label for a goal type."""
    return GOAL_TYPE_LABELS[goal_type]
