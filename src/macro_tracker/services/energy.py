"""Energy expenditure calculations (BMR and TDEE)."""

from datetime import date

from macro_tracker.domain.errors import InvalidArgumentError
from macro_tracker.domain.models import BmrMethod, Profile, Sex
from macro_tracker.services.dates import calculate_age

# Katch-McArdle
LEAN_MASS_BASE_KCAL = 370
LEAN_MASS_KCAL_PER_KG = 21.6

# Mifflin-St Jeor
MALE_OFFSET_KCAL = 5
FEMALE_OFFSET_KCAL = -161

ACTIVITY_LABELS = (
    (1.2, "Sedentary (little or no exercise)"),
    (1.375, "Lightly active (1-3 days/week)"),
    (1.55, "Moderately active (3-5 days/week)"),
    (1.725, "Very active (6-7 days/week)"),
)


def calculate_bmr(
    profile: Profile,
    method: BmrMethod = BmrMethod.STANDARD,
    today: date | None = None,
) -> float:
    """Return basal metabolic rate in kcal/day."""
    if method == BmrMethod.LEAN_MASS:
        if profile.body_fat_pct is None:
            raise InvalidArgumentError("lean-mass BMR requires body fat percentage")
        lean_body_mass = profile.weight_kg * (1 - profile.body_fat_pct / 100)
        return LEAN_MASS_BASE_KCAL + LEAN_MASS_KCAL_PER_KG * lean_body_mass

    age = calculate_age(profile.birth_date, today)
    offset = MALE_OFFSET_KCAL if profile.sex == Sex.MALE else FEMALE_OFFSET_KCAL
    return 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * age + offset


def calculate_tdee(bmr: float, activity_level: float) -> float:
    """Scale BMR by an activity multiplier."""
    return bmr * activity_level


def resolve_bmr_method(profile: Profile, requested: BmrMethod) -> BmrMethod:
    """Fall back to the standard formula when body fat is unknown."""
    if requested == BmrMethod.LEAN_MASS and profile.body_fat_pct is None:
        return BmrMethod.STANDARD
    return requested


def default_bmr_method(profile: Profile) -> BmrMethod:
    """Pick lean-mass when body fat is recorded, standard otherwise."""
    if profile.body_fat_pct is not None:
        return BmrMethod.LEAN_MASS
    return BmrMethod.STANDARD


def activity_level_label(activity_level: float) -> str:
    """Return a human-readable label for an activity multiplier."""
    for threshold, label in ACTIVITY_LABELS:
        if activity_level <= threshold:
            return label
    return "Extremely active (twice a day)"
