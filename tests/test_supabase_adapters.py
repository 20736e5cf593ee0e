"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

import pytest

from macro_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from macro_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from macro_tracker.adapters.supabase_target_repository import (
    SupabaseDailyTargetRepository,
)
from macro_tracker.domain.models import (
    BmrMethod,
    DailyTarget,
    Entry,
    Goal,
    GoalParams,
    GoalType,
    MealType,
    Profile,
    Sex,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "update": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_options: dict[str, object] = field(default_factory=dict)
    actions: list[str] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload, **options) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_options = options
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def neq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((f"not.{column}", value))
        return self

    def or_(self, filters: str) -> "FakeTable":
        self.last_filters.append(("or", filters))
        return self

    def ilike(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def gte(self, _column: str, _value) -> "FakeTable":  # type: ignore[no-untyped-def]
        return self

    def lte(self, _column: str, _value) -> "FakeTable":  # type: ignore[no-untyped-def]
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        self.actions.append(action)
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_supabase_profile_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    user_id = uuid4()
    row = {
        "id": str(user_id),
        "sex": "female",
        "birth_date": "1990-05-05",
        "height_cm": 165,
        "weight_kg": 62.5,
        "body_fat_pct": None,
    }
    table.queue("insert", [row])
    table.queue("select", [row])

    repository = SupabaseProfileRepository(client)
    created = repository.create_profile(
        Profile(
            user_id=user_id,
            sex=Sex.FEMALE,
            birth_date=date(1990, 5, 5),
            height_cm=165,
            weight_kg=62.5,
        )
    )
    fetched = repository.get_profile(user_id)

    assert created == fetched
    assert fetched is not None
    assert fetched.body_fat_pct is None
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["sex"] == "female"
    assert repository.get_profile(uuid4()) is None


def test_supabase_profile_repository_failed_insert() -> None:
    repository = SupabaseProfileRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError):
        repository.create_profile(
            Profile(
                user_id=uuid4(),
                sex=Sex.MALE,
                birth_date=date(1990, 1, 1),
                height_cm=180,
                weight_kg=80,
            )
        )


def test_supabase_goal_repository_deactivates_other_goals_after_insert() -> None:
    client = FakeSupabaseClient()
    table = client.table("goals")
    user_id = uuid4()
    goal_row = {
        "id": str(uuid4()),
        "user_id": str(user_id),
        "type": "loss",
        "activity_level": 1.55,
        "method": "lean_mass",
        "deficit_or_surplus_pct": 20,
        "protein_g_per_kg": 2.0,
        "fat_g_per_kg_min": 0.8,
        "target_weight_kg": 75,
        "duration_weeks": 10,
        "start_date": "2024-01-01",
        "end_date": "2024-03-11",
        "is_active": True,
    }
    table.queue("insert", [goal_row])
    table.queue("select", [goal_row])

    repository = SupabaseGoalRepository(client)
    created = repository.create_active_goal(
        Goal(
            id=None,
            user_id=user_id,
            params=GoalParams(
                goal_type=GoalType.LOSS,
                activity_level=1.55,
                bmr_method=BmrMethod.LEAN_MASS,
                deficit_or_surplus_pct=20,
                protein_g_per_kg=2.0,
                fat_g_per_kg_min=0.8,
                target_weight_kg=75,
                duration_weeks=10,
                start_date=date(2024, 1, 1),
            ),
            is_active=True,
            end_date=date(2024, 3, 11),
        )
    )
    active = repository.get_active_goal(user_id)

    assert table.actions[:2] == ["insert", "update"]
    assert ("not.id", goal_row["id"]) in table.last_filters
    assert created == active
    assert created.params.bmr_method == BmrMethod.LEAN_MASS
    assert created.params.start_date == date(2024, 1, 1)
    assert created.end_date == date(2024, 3, 11)


def test_supabase_goal_repository_failed_insert_keeps_previous_goal() -> None:
    client = FakeSupabaseClient()
    table = client.table("goals")
    repository = SupabaseGoalRepository(client)

    with pytest.raises(RuntimeError):
        repository.create_active_goal(
            Goal(
                id=None,
                user_id=uuid4(),
                params=GoalParams(
                    goal_type=GoalType.MAINTAIN,
                    activity_level=1.2,
                    bmr_method=BmrMethod.STANDARD,
                    deficit_or_surplus_pct=0,
                    protein_g_per_kg=2.0,
                    fat_g_per_kg_min=0.8,
                ),
                is_active=True,
            )
        )

    assert table.actions == ["insert"]


def test_supabase_target_repository_upserts_by_user_and_date() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_targets")
    user_id = uuid4()
    goal_id = uuid4()
    row = {
        "id": str(uuid4()),
        "user_id": str(user_id),
        "date": "2024-03-10",
        "goal_id": str(goal_id),
        "calories_kcal": 1600,
        "protein_g": 140,
        "fat_g": 56,
        "carbs_g": 134,
        "fiber_g": 25,
    }
    table.queue("upsert", [row])
    table.queue("select", [row])
    table.queue("select", [row])

    repository = SupabaseDailyTargetRepository(client)
    stored = repository.upsert_target(
        DailyTarget(
            id=None,
            user_id=user_id,
            day=date(2024, 3, 10),
            goal_id=goal_id,
            calories_kcal=1600,
            protein_g=140,
            fat_g=56,
            carbs_g=134,
            fiber_g=25,
        )
    )
    fetched = repository.get_target(user_id, date(2024, 3, 10))
    listed = repository.list_targets(user_id, date(2024, 3, 4), date(2024, 3, 10))

    assert table.last_options == {"on_conflict": "user_id,date"}
    assert stored == fetched
    assert listed == [stored]
    assert stored.calories_kcal == 1600


def test_supabase_food_repository_search_filters_visibility() -> None:
    client = FakeSupabaseClient()
    table = client.table("foods")
    user_id = uuid4()
    table.queue(
        "select",
        [
            {
                "id": str(uuid4()),
                "user_id": None,
                "name": "Rice",
                "kcal_per_100g": 130,
                "protein_g": 2.7,
                "fat_g": 0.3,
                "carbs_g": 28.2,
                "fiber_g": 0.4,
                "is_public": True,
            }
        ],
    )

    repository = SupabaseFoodRepository(client)
    foods = repository.search_foods(user_id, "ric", limit=20)

    assert foods[0].name == "Rice"
    assert foods[0].user_id is None
    assert ("or", f"is_public.eq.true,user_id.eq.{user_id}") in table.last_filters
    assert ("name", "%ric%") in table.last_filters
    assert repository.get_food(uuid4()) is None


def test_supabase_entry_repository() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    user_id = uuid4()
    entry_id = uuid4()
    row = {
        "id": str(entry_id),
        "user_id": str(user_id),
        "date": "2024-03-10",
        "food_id": None,
        "label": "Banana",
        "qty_g": 120,
        "kcal": 107,
        "protein_g": 1.3,
        "fat_g": 0.4,
        "carbs_g": 27.6,
        "fiber_g": None,
        "meal_type": "snack",
    }
    table.queue("insert", [row])
    table.queue("select", [row])

    repository = SupabaseEntryRepository(client)
    created = repository.create_entry(
        Entry(
            id=None,
            user_id=user_id,
            day=date(2024, 3, 10),
            label="Banana",
            qty_g=120,
            kcal=107,
            protein_g=1.3,
            fat_g=0.4,
            carbs_g=27.6,
            meal_type=MealType.SNACK,
        )
    )
    listed = repository.list_entries(user_id, date(2024, 3, 10), date(2024, 3, 10))
    repository.delete_entry(entry_id)

    assert created.id == entry_id
    assert created.meal_type == MealType.SNACK
    assert created.fiber_g == 0.0
    assert listed == [created]
    assert table.actions[-1] == "delete"
    assert ("id", str(entry_id)) in table.last_filters
