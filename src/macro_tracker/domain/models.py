"""Domain models for the macro tracker."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from uuid import UUID


class Sex(StrEnum):
    """Biological sex used by the standard BMR formula."""

    MALE = "male"
    FEMALE = "female"


class GoalType(StrEnum):
    """Direction of a body-weight goal."""

    LOSS = "loss"
    MAINTAIN = "maintain"
    GAIN = "gain"


class BmrMethod(StrEnum):
    """BMR formula selector."""

    STANDARD = "standard"
    LEAN_MASS = "lean_mass"


class MealType(StrEnum):
    """Optional meal slot for a logged entry."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class Profile:
    """Body metrics for a user."""

    user_id: UUID
    sex: Sex
    birth_date: date
    height_cm: float
    weight_kg: float
    body_fat_pct: float | None = None


@dataclass(frozen=True)
class GoalParams:
    """Parameters that drive target calculation."""

    goal_type: GoalType
    activity_level: float
    bmr_method: BmrMethod | None
    deficit_or_surplus_pct: float
    protein_g_per_kg: float
    fat_g_per_kg_min: float
    target_weight_kg: float | None = None
    duration_weeks: int | None = None
    start_date: date | None = None


@dataclass(frozen=True)
class Goal:
    """A stored goal; only one is active per user."""

    id: UUID | None
    user_id: UUID
    params: GoalParams
    is_active: bool
    end_date: date | None = None


@dataclass(frozen=True)
class DailyTarget:
    """Persisted calorie and macro target for one user and date."""

    id: UUID | None
    user_id: UUID
    day: date
    goal_id: UUID
    calories_kcal: float
    protein_g: float
    fat_g: float
    carbs_g: float
    fiber_g: float


@dataclass(frozen=True)
class Food:
    """Nutrition reference values per 100 g."""

    id: UUID | None
    user_id: UUID | None
    name: str
    kcal_per_100g: float
    protein_g: float
    fat_g: float
    carbs_g: float
    fiber_g: float
    is_public: bool


@dataclass(frozen=True)
class Entry:
    """One logged intake event with nutrients scaled to the quantity."""

    id: UUID | None
    user_id: UUID
    day: date
    label: str
    qty_g: float
    kcal: float
    protein_g: float
    fat_g: float
    carbs_g: float
    fiber_g: float = 0.0
    food_id: UUID | None = None
    meal_type: MealType | None = None
