"""User-facing API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING, Annotated
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from macro_tracker.api.schemas import (  # noqa: TC001
    EntryIn,
    FoodIn,
    GoalIn,
    OnboardingIn,
    PaceIn,
    UserPaceIn,
)
from macro_tracker.domain.models import (
    DailyTarget,
    Entry,
    Food,
    GoalParams,
    Profile,
)
from macro_tracker.services.pace import calculate_optimal_deficit_or_surplus

if TYPE_CHECKING:
    from macro_tracker.config import Settings
    from macro_tracker.containers import AppContainer
    from macro_tracker.domain.summary import DailySummary, WeeklyTrend

router = APIRouter(tags=["tracker"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/users/{user_id}/onboarding", dependencies=[Depends(require_token)])
async def onboard(
    user_id: UUID, payload: OnboardingIn, request: Request
) -> dict[str, object]:
    """Create a profile and first goal, returning today's target."""
    container: AppContainer = request.app.state.container
    profile = Profile(user_id=user_id, **payload.profile.model_dump())
    params = _goal_params(payload.goal, container.settings)
    target = container.goal_service.onboard(profile, params)
    return {"target": _serialize_target(target)}


@router.post("/users/{user_id}/goals", dependencies=[Depends(require_token)])
async def set_goal(
    user_id: UUID, payload: GoalIn, request: Request
) -> dict[str, object]:
    """Replace the active goal and return today's new target."""
    container: AppContainer = request.app.state.container
    params = _goal_params(payload, container.settings)
    target = container.goal_service.set_goal(user_id, params)
    if target is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Unknown profile"
        )
    return {"target": _serialize_target(target)}


@router.get("/users/{user_id}/targets/{day}", dependencies=[Depends(require_token)])
async def get_target(user_id: UUID, day: date, request: Request) -> dict[str, object]:
    """Return the stored target for a date."""
    container: AppContainer = request.app.state.container
    target = container.goal_service.get_target(user_id, day)
    if target is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No target defined for date",
        )
    return {"target": _serialize_target(target)}


@router.get("/users/{user_id}/summary/{day}", dependencies=[Depends(require_token)])
async def get_summary(
    user_id: UUID, day: date, request: Request
) -> dict[str, object]:
    """Return consumed totals against the day's target."""
    container: AppContainer = request.app.state.container
    summary = container.summary_service.get_day(user_id, day)
    if summary is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No target defined for date",
        )
    return _serialize_summary(summary)


@router.get("/users/{user_id}/trends", dependencies=[Depends(require_token)])
async def get_trends(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the seven-day adherence trend."""
    container: AppContainer = request.app.state.container
    return _serialize_trend(container.summary_service.get_week(user_id))


@router.get("/users/{user_id}/progress", dependencies=[Depends(require_token)])
async def get_progress(
    user_id: UUID,
    request: Request,
    current_weight_kg: Annotated[float | None, Query(gt=0)] = None,
) -> dict[str, object]:
    """Return progress for the active goal."""
    container: AppContainer = request.app.state.container
    progress = container.progress_service.get_active(user_id, current_weight_kg)
    if progress is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Active goal has no target weight timeline",
        )
    return asdict(progress)


@router.post("/pace", dependencies=[Depends(require_token)])
async def solve_pace(payload: PaceIn) -> dict[str, object]:
    """Return the deficit or surplus percentage for a weight goal."""
    pct = calculate_optimal_deficit_or_surplus(
        payload.current_weight_kg,
        payload.target_weight_kg,
        payload.duration_weeks,
        payload.tdee,
        payload.type,
    )
    return {"deficit_or_surplus_pct": pct}


@router.post("/users/{user_id}/pace", dependencies=[Depends(require_token)])
async def suggest_pace(
    user_id: UUID, payload: UserPaceIn, request: Request
) -> dict[str, object]:
    """Return the deficit or surplus percentage using the stored profile."""
    container: AppContainer = request.app.state.container
    pct = container.goal_service.suggest_pace(
        user_id,
        payload.target_weight_kg,
        payload.duration_weeks,
        payload.type,
        payload.activity_level,
        payload.method,
    )
    if pct is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Unknown profile"
        )
    return {"deficit_or_surplus_pct": pct}


@router.get("/users/{user_id}/foods", dependencies=[Depends(require_token)])
async def search_foods(
    user_id: UUID, request: Request, query: str | None = None
) -> dict[str, object]:
    """Search public and private foods by name."""
    container: AppContainer = request.app.state.container
    foods = container.journal_service.search_foods(user_id, query)
    return {"foods": [_serialize_food(food) for food in foods]}


@router.post("/users/{user_id}/foods", dependencies=[Depends(require_token)])
async def create_food(
    user_id: UUID, payload: FoodIn, request: Request
) -> dict[str, object]:
    """Add a private or public food."""
    container: AppContainer = request.app.state.container
    food = container.journal_service.create_food(
        Food(id=None, user_id=user_id, **payload.model_dump())
    )
    return {"food": _serialize_food(food)}


@router.get("/users/{user_id}/entries/{day}", dependencies=[Depends(require_token)])
async def list_entries(
    user_id: UUID, day: date, request: Request
) -> dict[str, object]:
    """Return the entries logged on a date."""
    container: AppContainer = request.app.state.container
    entries = container.journal_service.list_entries(user_id, day)
    return {"entries": [_serialize_entry(entry) for entry in entries]}


@router.post("/users/{user_id}/entries/{day}", dependencies=[Depends(require_token)])
async def add_entry(
    user_id: UUID, day: date, payload: EntryIn, request: Request
) -> dict[str, object]:
    """Log a food by reference or a manual entry."""
    container: AppContainer = request.app.state.container
    if payload.food_id is not None:
        entry = container.journal_service.add_food_entry(
            user_id, day, payload.food_id, payload.qty_g, payload.meal_type
        )
        if entry is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Unknown food"
            )
    else:
        if not payload.label:
            raise HTTPException(
                status_code=422,
                detail="Manual entries need a label",
            )
        entry = container.journal_service.add_entry(
            Entry(
                id=None,
                user_id=user_id,
                day=day,
                label=payload.label,
                qty_g=payload.qty_g,
                kcal=payload.kcal,
                protein_g=payload.protein_g,
                fat_g=payload.fat_g,
                carbs_g=payload.carbs_g,
                fiber_g=payload.fiber_g,
                meal_type=payload.meal_type,
            )
        )
    return {"entry": _serialize_entry(entry)}


@router.delete("/entries/{entry_id}", dependencies=[Depends(require_token)])
async def delete_entry(entry_id: UUID, request: Request) -> dict[str, str]:
    """Delete a logged entry."""
    container: AppContainer = request.app.state.container
    container.journal_service.delete_entry(entry_id)
    return {"status": "ok"}


def _goal_params(payload: GoalIn, settings: Settings) -> GoalParams:
    return GoalParams(
        goal_type=payload.type,
        activity_level=payload.activity_level,
        bmr_method=payload.method,
        deficit_or_surplus_pct=payload.deficit_or_surplus_pct,
        protein_g_per_kg=payload.protein_g_per_kg
        if payload.protein_g_per_kg is not None
        else settings.default_protein_g_per_kg,
        fat_g_per_kg_min=payload.fat_g_per_kg_min
        if payload.fat_g_per_kg_min is not None
        else settings.default_fat_g_per_kg_min,
        target_weight_kg=payload.target_weight_kg,
        duration_weeks=payload.duration_weeks,
        start_date=payload.start_date,
    )


def _serialize_target(target: DailyTarget) -> dict[str, object]:
    return {
        "id": str(target.id) if target.id else None,
        "date": target.day.isoformat(),
        "goal_id": str(target.goal_id),
        "calories_kcal": target.calories_kcal,
        "protein_g": target.protein_g,
        "fat_g": target.fat_g,
        "carbs_g": target.carbs_g,
        "fiber_g": target.fiber_g,
    }


def _serialize_summary(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.day.isoformat(),
        "consumed": asdict(summary.consumed),
        "target": asdict(summary.target),
        "delta": asdict(summary.delta),
        "status": summary.status.value,
    }


def _serialize_trend(trend: WeeklyTrend) -> dict[str, object]:
    return {
        "days": [
            {
                "date": item.day.isoformat(),
                "summary": _serialize_summary(item.summary) if item.summary else None,
            }
            for item in trend.days
        ],
        "avg_calories": trend.avg_calories,
        "avg_target": trend.avg_target,
        "avg_delta": trend.avg_delta,
        "status_counts": {
            status_.value: count for status_, count in trend.status_counts.items()
        },
    }


def _serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": str(food.id),
        "user_id": str(food.user_id) if food.user_id else None,
        "name": food.name,
        "kcal_per_100g": food.kcal_per_100g,
        "protein_g": food.protein_g,
        "fat_g": food.fat_g,
        "carbs_g": food.carbs_g,
        "fiber_g": food.fiber_g,
        "is_public": food.is_public,
    }


def _serialize_entry(entry: Entry) -> dict[str, object]:
    return {
        "id": str(entry.id) if entry.id else None,
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
