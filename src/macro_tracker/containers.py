"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_goal_repository import SupabaseGoalRepository
from macro_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from macro_tracker.adapters.supabase_target_repository import (
    SupabaseDailyTargetRepository,
)
from macro_tracker.config import Settings
from macro_tracker.services.goals import GoalService
from macro_tracker.services.journal import JournalService
from macro_tracker.services.progress import ProgressService
from macro_tracker.services.summary import SummaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    goal_service: GoalService
    journal_service: JournalService
    summary_service: SummaryService
    progress_service: ProgressService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    profile_repository = SupabaseProfileRepository(supabase_client)
    goal_repository = SupabaseGoalRepository(supabase_client)
    target_repository = SupabaseDailyTargetRepository(supabase_client)
    entry_repository = SupabaseEntryRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)

    return AppContainer(
        settings=resolved_settings,
        goal_service=GoalService(
            profile_repository=profile_repository,
            goal_repository=goal_repository,
            target_repository=target_repository,
            fiber_g=resolved_settings.default_fiber_g,
        ),
        journal_service=JournalService(
            food_repository=food_repository,
            entry_repository=entry_repository,
            search_limit=resolved_settings.food_search_limit,
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
