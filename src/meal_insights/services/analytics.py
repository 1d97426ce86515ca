"""Meal analytics for a trailing period."""

import logging
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date, timedelta

from meal_insights.domain.analytics import (
    AnalyticsResult,
    DailyMealCount,
    DishPopularity,
    NutritionAnalytics,
)
from meal_insights.domain.meals import DishSnapshot, MealRecord
from meal_insights.services.errors import UpstreamFetchError
from meal_insights.services.meal_records import MealRecordService, day_bounds, today_utc

TOP_DISHES_LIMIT = 10

_logger = logging.getLogger(__name__)


@dataclass
class AnalyticsService:
    """Computes analytics over a user's recent meals."""

    records: MealRecordService
    today: Callable[[], date] = field(default=today_utc)

    def get_analytics(self, user_id: str, period: int) -> AnalyticsResult:
        """Return analytics from ``period`` days before today through today."""
        end_day = self.today()
        start, end = day_bounds(end_day - timedelta(days=period), end_day)
        try:
            meals = self.records.fetch(user_id, start, end)
        except Exception as exc:
            _logger.exception(
                "Failed to get meals for analytics", extra={"user_id": user_id}
            )
            raise UpstreamFetchError("failed to get analytics data") from exc
        return analyze(meals, period)


def analyze(meals: list[MealRecord], period: int) -> AnalyticsResult:
    """Aggregate distributions, popularity, nutrition and daily trend.

    ``period`` is trusted to be positive; the API boundary clamps it.
    """
    meal_types: Counter[str] = Counter()
    cuisines: Counter[str] = Counter()
    dish_counts: Counter[str] = Counter()
    dishes: dict[str, DishSnapshot] = {}
    daily_meals: Counter[date] = Counter()
    daily_calories: Counter[date] = Counter()
    totals = dict.fromkeys(("calories", "protein", "carbs", "fat", "fiber"), 0)

    for meal in meals:
        dish = meal.dish
        meal_types[meal.meal_type] += 1
        cuisines[dish.cuisine] += 1
        dish_counts[dish.id] += 1
        dishes.setdefault(dish.id, dish)

        totals["calories"] += dish.calories
        totals["protein"] += dish.nutrition.protein
        totals["carbs"] += dish.nutrition.carbs
        totals["fat"] += dish.nutrition.fat
        totals["fiber"] += dish.nutrition.fiber

        day = meal.date.date()
        daily_meals[day] += 1
        daily_calories[day] += dish.calories

    popularity = [
        DishPopularity(
            dish_id=dish_id,
            dish_name=dishes[dish_id].name,
            count=count,
            calories=dishes[dish_id].calories,
            cuisine=dishes[dish_id].cuisine,
        )
        for dish_id, count in dish_counts.items()
    ]
    popularity.sort(key=lambda item: (-item.count, item.dish_name, item.dish_id))

    meal_count = len(meals)
    summary = NutritionAnalytics(
        total_calories=totals["calories"],
        total_protein=totals["protein"],
        total_carbs=totals["carbs"],
        total_fat=totals["fat"],
        total_fiber=totals["fiber"],
        avg_calories=_average(totals["calories"], meal_count),
        avg_protein=_average(totals["protein"], meal_count),
        avg_carbs=_average(totals["carbs"], meal_count),
        avg_fat=_average(totals["fat"], meal_count),
    )

    return AnalyticsResult(
        total_meals=meal_count,
        avg_calories_per_day=totals["calories"] / period,
        meal_type_distribution=dict(meal_types),
        cuisine_distribution=dict(cuisines),
        top_dishes=popularity[:TOP_DISHES_LIMIT],
        nutrition_summary=summary,
        weekly_trend=[
            DailyMealCount(
                date=day, meal_count=daily_meals[day], calories=daily_calories[day]
            )
            for day in sorted(daily_meals)
        ],
        period=period,
    )


def _average(total: int, count: int) -> float:
    if count == 0:
        return 0.0
    return total / count
