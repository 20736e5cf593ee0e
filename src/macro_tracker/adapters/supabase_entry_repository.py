"""Supabase repository for logged entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import Entry, MealType
from macro_tracker.services.summary import EntryRepository


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for entries."""

    client: Client

    def create_entry(self, entry: Entry) -> Entry:
        """Create an entry row and return it."""
        response = (
            self.client.table("entries")
            .insert(
                {
                    "user_id": str(entry.user_id),
                    "date": entry.day.isoformat(),
                    "food_id": str(entry.food_id) if entry.food_id else None,
                    "label": entry.label,
                    "qty_g": entry.qty_g,
                    "kcal": entry.kcal,
                    "protein_g": entry.protein_g,
                    "fat_g": entry.fat_g,
                    "carbs_g": entry.carbs_g,
                    "fiber_g": entry.fiber_g,
                    "meal_type": entry.meal_type.value if entry.meal_type else None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry row."""
        self.client.table("entries").delete().eq("id", str(entry_id)).execute()

    def list_entries(self, user_id: UUID, start: date, end: date) -> list[Entry]:
        """Return entries between two dates, oldest first."""
        response = (
            self.client.table("entries")
            .select("*")
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> Entry:
    food_id = row.get("food_id")
    meal_type = row.get("meal_type")
    return Entry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        label=str(row.get("label") or ""),
        qty_g=float(row.get("qty_g", 0.0)),
        kcal=float(row.get("kcal", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        fat_g=float(row.get("fat_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        fiber_g=float(row.get("fiber_g") or 0.0),
        food_id=UUID(str(food_id)) if food_id else None,
        meal_type=MealType(str(meal_type)) if meal_type else None,
    )
