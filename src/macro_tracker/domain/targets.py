"""Derived calorie and macro targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroTargets:
    """Calorie target with its protein/fat/carb split."""

    calories_kcal: int
    protein_g: float
    fat_g: float
    carbs_g: float
