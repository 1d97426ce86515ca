"""Daily nutrition progress against goals."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, timedelta

from meal_insights.domain.goals import ResolvedGoals
from meal_insights.domain.meals import MealRecord
from meal_insights.domain.progress import (
    DailyNutrition,
    NutritionProgress,
    ProgressSummary,
)
from meal_insights.services.errors import UpstreamFetchError
from meal_insights.services.goals import GoalsService
from meal_insights.services.meal_records import MealRecordService, day_bounds, today_utc

_logger = logging.getLogger(__name__)


@dataclass
class ProgressService:
    """Service for nutrition progress over a trailing period."""

    records: MealRecordService
    goals_service: GoalsService
    today: Callable[[], date] = field(default=today_utc)

    def get_progress(self, user_id: str, period: int) -> NutritionProgress:
        """Return daily nutrition from ``period`` days before today through today."""
        end_day = self.today()
        start, end = day_bounds(end_day - timedelta(days=period), end_day)
        try:
            goals = self.goals_service.get_goals(user_id)
            meals = self.records.fetch(user_id, start, end)
        except Exception as exc:
            _logger.exception(
                "Failed to get meals for nutrition progress",
                extra={"user_id": user_id},
            )
            raise UpstreamFetchError("failed to get nutrition progress") from exc
        return track_progress(meals, goals, period)


def track_progress(
    meals: list[MealRecord], goals: ResolvedGoals, period: int
) -> NutritionProgress:
    """Bucket meals by day and count days meeting the calorie and protein goals.

    A goal counts as met when the day's total is at least the target, so
    going over the calorie goal also counts.
    """
    days: dict[date, DailyNutrition] = {}
    for meal in meals:
        day = meal.date.date()
        current = days.get(day) or DailyNutrition(
            date=day,
            calories=0,
            protein=0,
            carbs=0,
            fat=0,
            fiber=0,
            sodium=0,
            meal_count=0,
        )
        nutrition = meal.dish.nutrition
        days[day] = DailyNutrition(
            date=day,
            calories=current.calories + meal.dish.calories,
            protein=current.protein + nutrition.protein,
            carbs=current.carbs + nutrition.carbs,
            fat=current.fat + nutrition.fat,
            fiber=current.fiber + nutrition.fiber,
            sodium=current.sodium + nutrition.sodium,
            meal_count=current.meal_count + 1,
        )

    daily = [days[day] for day in sorted(days)]
    total_days = max(len(daily), 1)
    calorie_goal_met = sum(1 for day in daily if day.calories >= goals.daily_calories)
    protein_goal_met = sum(1 for day in daily if day.protein >= goals.protein)

    summary = ProgressSummary(
        avg_calories=sum(day.calories for day in daily) / total_days,
        avg_protein=sum(day.protein for day in daily) / total_days,
        avg_carbs=sum(day.carbs for day in daily) / total_days,
        avg_fat=sum(day.fat for day in daily) / total_days,
        avg_fiber=sum(day.fiber for day in daily) / total_days,
        total_days=total_days,
        calorie_goal_met=calorie_goal_met,
        protein_goal_met=protein_goal_met,
        goal_percentage=calorie_goal_met / total_days * 100,
    )
    return NutritionProgress(
        period=period, progress=daily, goals=goals, summary=summary
    )
