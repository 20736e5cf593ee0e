"""Supabase repository for the food reference table."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import Food
from macro_tracker.services.journal import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for public and private foods."""

    client: Client

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def search_foods(self, user_id: UUID, query: str, limit: int) -> list[Food]:
        """Search public foods and the user's own foods by name."""
        response = (
            self.client.table("foods")
            .select("*")
            .or_(f"is_public.eq.true,user_id.eq.{user_id}")
            .ilike("name", f"%{query}%")
            .order("name", desc=False)
            .limit(limit)
            .execute()
        )
        return [_parse_food(row) for row in response.data or []]

    def create_food(self, food: Food) -> Food:
        """Create a food row and return it."""
        response = (
            self.client.table("foods")
            .insert(
                {
                    "user_id": str(food.user_id) if food.user_id else None,
                    "name": food.name,
                    "kcal_per_100g": food.kcal_per_100g,
                    "protein_g": food.protein_g,
                    "fat_g": food.fat_g,
                    "carbs_g": food.carbs_g,
                    "fiber_g": food.fiber_g,
                    "is_public": food.is_public,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    owner = row.get("user_id")
    return Food(
        id=UUID(str(row["id"])),
        user_id=UUID(str(owner)) if owner else None,
        name=str(row.get("name", "")),
        kcal_per_100g=float(row.get("kcal_per_100g", 0.0)),
        protein_g=float(row.get("protein_g", 0.0)),
        fat_g=float(row.get("fat_g", 0.0)),
        carbs_g=float(row.get("carbs_g", 0.0)),
        fiber_g=float(row.get("fiber_g", 0.0)),
        is_public=bool(row.get("is_public", False)),
    )
