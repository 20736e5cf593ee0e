"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer
from macro_tracker.domain.models import DailyTarget, Entry, Food, Goal, Profile
from macro_tracker.services.goals import GoalRepository, GoalService, ProfileRepository
from macro_tracker.services.journal import FoodRepository, JournalService
from macro_tracker.services.progress import ProgressService
from macro_tracker.services.summary import (
    DailyTargetRepository,
    EntryRepository,
    SummaryService,
)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, Profile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> Profile | None:
        return self.profiles.get(user_id)

    def create_profile(self, profile: Profile) -> Profile:
        self.profiles[profile.user_id] = profile
        return profile


@dataclass
class InMemoryGoalRepository(GoalRepository):
    """In-memory goal repository for tests."""

    goals: list[Goal] = field(default_factory=list)

    def get_active_goal(self, user_id: UUID) -> Goal | None:
        for goal in reversed(self.goals):
            if goal.user_id == user_id and goal.is_active:
                return goal
        return None

    def create_active_goal(self, goal: Goal) -> Goal:
        self.goals = [
            replace(existing, is_active=False)
            if existing.user_id == goal.user_id
            else existing
            for existing in self.goals
        ]
        stored = replace(goal, id=uuid4(), is_active=True)
        self.goals.append(stored)
        return stored


@dataclass
class InMemoryDailyTargetRepository(DailyTargetRepository):
    """In-memory daily target repository for tests."""

    targets: dict[tuple[UUID, date], DailyTarget] = field(default_factory=dict)

    def get_target(self, user_id: UUID, day: date) -> DailyTarget | None:
        return self.targets.get((user_id, day))

    def list_targets(self, user_id: UUID, start: date, end: date) -> list[DailyTarget]:
        return sorted(
            (
                target
                for (owner, day), target in self.targets.items()
                if owner == user_id and start <= day <= end
            ),
            key=lambda target: target.day,
        )

    def upsert_target(self, target: DailyTarget) -> DailyTarget:
        stored = replace(target, id=target.id or uuid4())
        self.targets[(target.user_id, target.day)] = stored
        return stored


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: list[Entry] = field(default_factory=list)

    def create_entry(self, entry: Entry) -> Entry:
        stored = replace(entry, id=uuid4())
        self.entries.append(stored)
        return stored

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries = [entry for entry in self.entries if entry.id != entry_id]

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[Entry]:
        return [
            entry
            for entry in self.entries
            if entry.user_id == user_id and start <= entry.day <= end
        ]


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: dict[UUID, Food] = field(default_factory=dict)

    def get_food(self, food_id: UUID) -> Food | None:
        return self.foods.get(food_id)

    def search_foods(self, user_id: UUID, query: str, limit: int) -> list[Food]:
        query_lower = query.lower()
        matches = [
            food
            for food in self.foods.values()
            if (food.is_public or food.user_id == user_id)
            and query_lower in food.name.lower()
        ]
        return sorted(matches, key=lambda food: food.name)[:limit]

    def create_food(self, food: Food) -> Food:
        stored = replace(food, id=uuid4())
        self.foods[stored.id] = stored
        return stored


def make_entry(user_id: UUID, day: date, kcal: float, **macros: float) -> Entry:
    """Build a manual entry with optional macro overrides."""
    return Entry(
        id=None,
        user_id=user_id,
        day=day,
        label="item",
        qty_g=100,
        kcal=kcal,
        protein_g=macros.get("protein_g", 0.0),
        fat_g=macros.get("fat_g", 0.0),
        carbs_g=macros.get("carbs_g", 0.0),
    )


def make_target(user_id: UUID, day: date, calories: float = 2000) -> DailyTarget:
    """Build a stored target with a fixed macro split."""
    return DailyTarget(
        id=uuid4(),
        user_id=user_id,
        day=day,
        goal_id=uuid4(),
        calories_kcal=calories,
        protein_g=140,
        fat_g=60,
        carbs_g=200,
        fiber_g=25,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def goal_repository() -> InMemoryGoalRepository:
    return InMemoryGoalRepository()


@pytest.fixture
def target_repository() -> InMemoryDailyTargetRepository:
    return InMemoryDailyTargetRepository()


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def container(  # noqa: PLR0913
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    goal_repository: InMemoryGoalRepository,
    target_repository: InMemoryDailyTargetRepository,
    entry_repository: InMemoryEntryRepository,
    food_repository: InMemoryFoodRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        goal_service=GoalService(
            profile_repository=profile_repository,
            goal_repository=goal_repository,
            target_repository=target_repository,
            fiber_g=settings.default_fiber_g,
        ),
        journal_service=JournalService(
            food_repository=food_repository,
            entry_repository=entry_repository,
            search_limit=settings.food_search_limit,
        ),
        summary_service=SummaryService(
            target_repository=target_repository,
            entry_repository=entry_repository,
        ),
        progress_service=ProgressService(
            profile_repository=profile_repository,
            goal_repository=goal_repository,
        ),
    )
