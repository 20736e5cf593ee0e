"""Food lookup and intake logging."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from macro_tracker.domain.models import Entry, Food, MealType
from macro_tracker.rounding import round_half_up, round_int
from macro_tracker.services.summary import EntryRepository


class FoodRepository(Protocol):
    """Persistence interface for the food reference table."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""

    def search_foods(self, user_id: UUID, query: str, limit: int) -> list[Food]:
        """Return public and user-owned foods matching a name, ordered by name."""

    def create_food(self, food: Food) -> Food:
        """Create a food row and return it."""


def scale_food(
    food: Food,
    user_id: UUID,
    day: date,
    qty_g: float,
    meal_type: MealType | None = None,
) -> Entry:
    """Build an entry for ``qty_g`` grams of a per-100g food."""
    multiplier = qty_g / 100
    return Entry(
        id=None,
        user_id=user_id,
        day=day,
        label=food.name,
        qty_g=qty_g,
        kcal=round_int(food.kcal_per_100g * multiplier),
        protein_g=round_half_up(food.protein_g * multiplier, 1),
        fat_g=round_half_up(food.fat_g * multiplier, 1),
        carbs_g=round_half_up(food.carbs_g * multiplier, 1),
        fiber_g=round_half_up(food.fiber_g * multiplier, 1),
        food_id=food.id,
        meal_type=meal_type,
    )


@dataclass
class JournalService:
    """Application service for foods and logged entries."""

    food_repository: FoodRepository
    entry_repository: EntryRepository
    search_limit: int = 20

    def search_foods(self, user_id: UUID, query: str | None) -> list[Food]:
        """Search foods by name; an empty query returns nothing."""
        if not query or not query.strip():
            return []
        return self.food_repository.search_foods(
            user_id, query.strip(), self.search_limit
        )

    def create_food(self, food: Food) -> Food:
        """Add a food to the reference table."""
        return self.food_repository.create_food(food)

    def add_entry(self, entry: Entry) -> Entry:
        """Log an entry whose nutrients are already scaled."""
        return self.entry_repository.create_entry(entry)

    def add_food_entry(  # noqa: PLR0913
        self,
        user_id: UUID,
        day: date,
        food_id: UUID,
        qty_g: float,
        meal_type: MealType | None = None,
    ) -> Entry | None:
        """Log ``qty_g`` grams of a known food."""
        food = self.food_repository.get_food(food_id)
        if food is None:
            return None
        return self.entry_repository.create_entry(
            scale_food(food, user_id, day, qty_g, meal_type)
        )

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete a logged entry."""
        self.entry_repository.delete_entry(entry_id)

    def list_entries(self, user_id: UUID, day: date) -> list[Entry]:
        """Return a day's entries in the order they were logged."""
        return self.entry_repository.list_entries(user_id, day, day)
