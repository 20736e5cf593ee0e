"""Supabase repository for goals."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import BmrMethod, Goal, GoalParams, GoalType
from macro_tracker.services.goals import GoalRepository


@dataclass
class SupabaseGoalRepository(GoalRepository):
    """Supabase implementation for goals."""

    client: Client

    def get_active_goal(self, user_id: UUID) -> Goal | None:
        """Return the user's active goal, if any."""
        response = (
            self.client.table("goals")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("is_active", True)
            .order("created_at", desc=True)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_goal(response.data[0])

    def create_active_goal(self, goal: Goal) -> Goal:
        """Insert the new active goal, then deactivate the user's other goals."""
        params = goal.params
        response = (
            self.client.table("goals")
            .insert(
                {
                    "user_id": str(goal.user_id),
                    "type": params.goal_type.value,
                    "activity_level": params.activity_level,
                    "method": params.bmr_method.value if params.bmr_method else None,
                    "deficit_or_surplus_pct": params.deficit_or_surplus_pct,
                    "protein_g_per_kg": params.protein_g_per_kg,
                    "fat_g_per_kg_min": params.fat_g_per_kg_min,
                    "target_weight_kg": params.target_weight_kg,
                    "duration_weeks": params.duration_weeks,
                    "start_date": _iso(params.start_date),
                    "end_date": _iso(goal.end_date),
                    "is_active": True,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create goal")
        created = _parse_goal(response.data[0])
        self.client.table("goals").update({"is_active": False}).eq(
            "user_id", str(goal.user_id)
        ).eq("is_active", True).neq("id", str(created.id)).execute()
        return created


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value else None


def _parse_date(value: object) -> date | None:
    if isinstance(value, str) and value:
        return date.fromisoformat(value)
    return None


def _parse_goal(row: dict[str, object]) -> Goal:
    target_weight = row.get("target_weight_kg")
    duration = row.get("duration_weeks")
    return Goal(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        params=GoalParams(
            goal_type=GoalType(str(row["type"])),
            activity_level=float(row.get("activity_level", 1.2)),
            bmr_method=BmrMethod(str(row.get("method") or BmrMethod.STANDARD)),
            deficit_or_surplus_pct=float(row.get("deficit_or_surplus_pct", 0.0)),
            protein_g_per_kg=float(row.get("protein_g_per_kg", 0.0)),
            fat_g_per_kg_min=float(row.get("fat_g_per_kg_min", 0.0)),
            target_weight_kg=float(target_weight)
            if target_weight is not None
            else None,
            duration_weeks=int(duration) if duration is not None else None,
            start_date=_parse_date(row.get("start_date")),
        ),
        is_active=bool(row.get("is_active", False)),
        end_date=_parse_date(row.get("end_date")),
    )
