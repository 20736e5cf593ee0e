"""Onboarding and goal management."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import (
    BmrMethod,
    DailyTarget,
    Goal,
    GoalParams,
    GoalType,
    Profile,
)
from macro_tracker.services.dates import end_date
from macro_tracker.services.energy import (
    calculate_bmr,
    calculate_tdee,
    default_bmr_method,
    resolve_bmr_method,
)
from macro_tracker.services.pace import calculate_optimal_deficit_or_surplus
from macro_tracker.services.summary import DailyTargetRepository
from macro_tracker.services.targets import calculate_complete_targets

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profiles."""

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""

    def create_profile(self, profile: Profile) -> Profile:
        """Create a profile row and return it."""


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def get_active_goal(self, user_id: UUID) -> Goal | None:
        """Return the user's active goal, if any."""

    def create_active_goal(self, goal: Goal) -> Goal:
        """Store ``goal`` as active and deactivate the user's other goals."""


@dataclass
class GoalService:
    """Application service for profiles, goals and their daily targets."""

    profile_repository: ProfileRepository
    goal_repository: GoalRepository
    target_repository: DailyTargetRepository
    fiber_g: float = 25.0

    def onboard(
        self, profile: Profile, params: GoalParams, today: date | None = None
    ) -> DailyTarget:
        """Create the profile and its first goal, returning today's target."""
        created = self.profile_repository.create_profile(profile)
        target = self._store_goal(created, params, today or date.today())
        logger.info("Onboarded user %s", created.user_id)
        return target

    def set_goal(
        self, user_id: UUID, params: GoalParams, today: date | None = None
    ) -> DailyTarget | None:
        """Replace the active goal and store a fresh target for today."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return None
        return self._store_goal(profile, params, today or date.today())

    def get_target(self, user_id: UUID, day: date) -> DailyTarget | None:
        """Return the stored target for a date."""
        return self.target_repository.get_target(user_id, day)

    def suggest_pace(  # noqa: PLR0913
        self,
        user_id: UUID,
        target_weight_kg: float,
        duration_weeks: int,
        goal_type: GoalType,
        activity_level: float,
        bmr_method: BmrMethod | None = None,
        today: date | None = None,
    ) -> int | None:
        """Return the deficit/surplus percentage for a weight goal."""
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            return None
        method = resolve_bmr_method(profile, bmr_method or default_bmr_method(profile))
        tdee = calculate_tdee(calculate_bmr(profile, method, today), activity_level)
        return calculate_optimal_deficit_or_surplus(
            profile.weight_kg, target_weight_kg, duration_weeks, tdee, goal_type
        )

    def _store_goal(
        self, profile: Profile, params: GoalParams, today: date
    ) -> DailyTarget:
        requested = params.bmr_method or default_bmr_method(profile)
        method = resolve_bmr_method(profile, requested)
        if method != requested:
            logger.info(
                "No body fat recorded for user %s; using %s BMR",
                profile.user_id,
                method.value,
            )
        if method != params.bmr_method:
            params = replace(params, bmr_method=method)
        goal_end = (
            end_date(params.start_date, params.duration_weeks)
            if params.start_date and params.duration_weeks
            else None
        )
        goal = self.goal_repository.create_active_goal(
            Goal(
                id=None,
                user_id=profile.user_id,
                params=params,
                is_active=True,
                end_date=goal_end,
            )
        )
        if goal.id is None:
            raise RuntimeError("Stored goal has no id")
        macros = calculate_complete_targets(profile, params, today)
        return self.target_repository.upsert_target(
            DailyTarget(
                id=None,
                user_id=profile.user_id,
                day=today,
                goal_id=goal.id,
                calories_kcal=macros.calories_kcal,
                protein_g=macros.protein_g,
                fat_g=macros.fat_g,
                carbs_g=macros.carbs_g,
                fiber_g=self.fiber_g,
            )
        )
