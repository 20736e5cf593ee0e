"""Supabase repository for daily targets."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import DailyTarget
from macro_tracker.services.summary import DailyTargetRepository


@dataclass
class SupabaseDailyTargetRepository(DailyTargetRepository):
    """Supabase implementation for daily targets."""

    client: Client

    def get_target(self, user_id: UUID, day: date) -> DailyTarget | None:
        """Return the target for a user and date, if present."""
        response = (
            self.client.table("daily_targets")
            .select("*")
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_target(response.data[0])

    def list_targets(self, user_id: UUID, start: date, end: date) -> list[DailyTarget]:
        """Return targets between two dates, inclusive."""
        response = (
            self.client.table("daily_targets")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_target(row) for row in response.data or []]

    def upsert_target(self, target: DailyTarget) -> DailyTarget:
        """Insert or replace the target for its user and date."""
        response = (
            self.client.table("daily_targets")
            .upsert(
                {
                    "user_id": str(target.user_id),
                    "date": target.day.isoformat(),
                    "goal_id": str(target.goal_id),
                    "calories_kcal": target.calories_kcal,
                    "protein_g": target.protein_g,
                    "fat_g": target.fat_g,
                    "carbs_g": target.carbs_g,
                    "fiber_g": target.fiber_g,
                },
                on_conflict="user_id,date",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store daily target")
        return _parse_target(response.data[0])


def _parse_target(row: dict[str, object]) -> DailyTarget:
    return DailyTarget(
        id=UUID(str(row["id"])) if row.get("id") else None,
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        goal_id=UUID(str(row["goal_id"])),
        calories_kcal=float(row.get("calories_kcal", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        fat_g=float(row.get("fat_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        fiber_g=float(row.get("fiber_g", 0.0)),
    )
