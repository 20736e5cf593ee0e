"""Supabase repository for profiles."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from macro_tracker.domain.models import Profile, Sex
from macro_tracker.services.goals import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile persistence."""

    client: Client

    def get_profile(self, user_id: UUID) -> Profile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("id, sex, birth_date, height_cm, weight_kg, body_fat_pct")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, profile: Profile) -> Profile:
        """Create a profile row keyed by the user id."""
        response = (
            self.client.table("profiles")
            .insert(
                {
                    "id": str(profile.user_id),
                    "sex": profile.sex.value,
                    "birth_date": profile.birth_date.isoformat(),
                    "height_cm": profile.height_cm,
                    "weight_kg": profile.weight_kg,
                    "body_fat_pct": profile.body_fat_pct,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create profile in Supabase")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> Profile:
    body_fat = row.get("body_fat_pct")
    return Profile(
        user_id=UUID(str(row["id"])),
        sex=Sex(str(row["sex"])),
        birth_date=date.fromisoformat(str(row["birth_date"])),
        height_cm=float(row.get("height_cm", 0.0)),
        weight_kg=float(row.get("weight_kg", 0.0)),
        body_fat_pct=float(body_fat) if body_fat is not None else None,
    )
