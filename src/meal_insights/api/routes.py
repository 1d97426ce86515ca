"""Per-user analytics, nutrition, shopping and recommendation endpoints."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request, status

from meal_insights.api.schemas import NutritionGoalsUpdate  # noqa: TC001
from meal_insights.api.serializers import (
    serialize_analytics,
    serialize_goals,
    serialize_progress,
    serialize_recommendations,
    serialize_shopping_list,
)
from meal_insights.domain.meals import MealType

if TYPE_CHECKING:
    from meal_insights.containers import AppContainer

MAX_ANALYTICS_PERIOD = 365
DATE_FORMAT = "%Y-%m-%d"


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


router = APIRouter(
    prefix="/api/users/{user_id}",
    tags=["insights"],
    dependencies=[Depends(require_token)],
)


@router.get("/analytics")
async def get_analytics(
    user_id: str, request: Request, period: str | None = None
) -> dict[str, object]:
    """Return meal analytics for the trailing period."""
    container: AppContainer = request.app.state.container
    resolved = _parse_analytics_period(
        period, container.settings.default_analytics_period
    )
    result = container.analytics_service.get_analytics(user_id, resolved)
    return serialize_analytics(result)


@router.get("/nutrition/progress")
async def get_nutrition_progress(
    user_id: str, request: Request, period: str | None = None
) -> dict[str, object]:
    """Return daily nutrition against the user's goals."""
    container: AppContainer = request.app.state.container
    resolved = container.settings.default_progress_period
    if period is not None:
        try:
            resolved = int(period)
        except ValueError:
            resolved = 0
        if resolved <= 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid period parameter",
            )
    result = container.progress_service.get_progress(user_id, resolved)
    return serialize_progress(result)


@router.get("/nutrition/goals")
async def get_nutrition_goals(user_id: str, request: Request) -> dict[str, int]:
    """Return the user's goals with defaults filled in."""
    container: AppContainer = request.app.state.container
    return serialize_goals(container.goals_service.get_goals(user_id))


@router.put("/nutrition/goals")
async def update_nutrition_goals(
    user_id: str, payload: NutritionGoalsUpdate, request: Request
) -> dict[str, int]:
    """Replace the user's goals."""
    container: AppContainer = request.app.state.container
    goals = container.goals_service.update_goals(user_id, payload.to_goals())
    return serialize_goals(goals)


@router.get("/shopping-list")
async def get_shopping_list(
    user_id: str,
    request: Request,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> dict[str, object]:
    """Return the ingredients needed for meals in a date range."""
    container: AppContainer = request.app.state.container
    if not start_date or not end_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="startDate and endDate parameters are required",
        )
    start_day = _parse_date(start_date, "startDate")
    end_day = _parse_date(end_date, "endDate")
    result = container.shopping_list_service.get_shopping_list(
        user_id, start_day, end_day
    )
    return serialize_shopping_list(result)


@router.get("/recommendations")
async def get_recommendations(
    user_id: str,
    request: Request,
    meal_type: str | None = Query(default=None, alias="mealType"),
    target_date: str | None = Query(default=None, alias="date"),
) -> dict[str, object]:
    """Return dish recommendations for a meal slot on a date."""
    container: AppContainer = request.app.state.container
    if not meal_type or not target_date:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="mealType and date parameters are required",
        )
    try:
        slot = MealType(meal_type)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="mealType must be one of breakfast, lunch, dinner, snack",
        ) from exc
    day = _parse_date(target_date, "date")
    result = container.recommendation_service.get_recommendations(
        user_id, slot.value, day
    )
    return serialize_recommendations(result)


def _parse_analytics_period(raw: str | None, default: int) -> int:
    """Parse the analytics period, falling back to the default when invalid."""
    if raw is None:
        return default
    try:
        period = int(raw)
    except ValueError:
        return default
    if period < 1 or period > MAX_ANALYTICS_PERIOD:
        return default
    return period


def _parse_date(raw: str, name: str) -> date:
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()  # noqa: DTZ007
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {name} format. Use YYYY-MM-DD",
        ) from exc
