"""Pydantic request models for the HTTP API."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from macro_tracker.domain.models import BmrMethod, GoalType, MealType, Sex


class ProfileIn(BaseModel):
    """Body metrics captured at onboarding."""

    sex: Sex
    birth_date: date
    height_cm: float = Field(gt=0)
    weight_kg: float = Field(gt=0)
    body_fat_pct: float | None = Field(default=None, ge=0, lt=100)


class GoalIn(BaseModel):
    """Goal parameters; unset defaults come from settings."""

    type: GoalType
    activity_level: float = Field(default=1.55, gt=0)
    method: BmrMethod | None = None
    deficit_or_surplus_pct: float = 15
    protein_g_per_kg: float | None = Field(default=None, ge=0)
    fat_g_per_kg_min: float | None = Field(default=None, ge=0)
    target_weight_kg: float | None = Field(default=None, gt=0)
    duration_weeks: int | None = Field(default=None, gt=0)
    start_date: date | None = None


class OnboardingIn(BaseModel):
    """Profile and first goal."""

    profile: ProfileIn
    goal: GoalIn


class PaceIn(BaseModel):
    """Inputs for back-solving a deficit or surplus percentage."""

    current_weight_kg: float = Field(gt=0)
    target_weight_kg: float = Field(gt=0)
    duration_weeks: float = Field(gt=0)
    tdee: float = Field(gt=0)
    type: GoalType


class UserPaceIn(BaseModel):
    """Weight goal to solve against the stored profile's TDEE."""

    target_weight_kg: float = Field(gt=0)
    duration_weeks: int = Field(gt=0)
    type: GoalType
    activity_level: float = Field(default=1.55, gt=0)
    method: BmrMethod | None = None


class FoodIn(BaseModel):
    """Per-100g nutrition values for a new food."""

    name: str = Field(min_length=1)
    kcal_per_100g: float = Field(ge=0)
    protein_g: float = Field(default=0, ge=0)
    fat_g: float = Field(default=0, ge=0)
    carbs_g: float = Field(default=0, ge=0)
    fiber_g: float = Field(default=0, ge=0)
    is_public: bool = False


class EntryIn(BaseModel):
    """A logged intake; either a food reference or pre-scaled nutrients."""

    qty_g: float = Field(gt=0)
    food_id: UUID | None = None
    label: str | None = None
    kcal: float = 0
    protein_g: float = 0
    fat_g: float = 0
    carbs_g: float = 0
    fiber_g: float = 0
    meal_type: MealType | None = None
