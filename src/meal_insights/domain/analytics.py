"""Domain models for meal analytics."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DishPopularity:
    """A dish and how many meals referenced it."""

    dish_id: str
    dish_name: str
    count: int
    calories: int
    cuisine: str


@dataclass(frozen=True)
class NutritionAnalytics:
    """Nutrition totals and per-meal averages."""

    total_calories: int
    total_protein: int
    total_carbs: int
    total_fat: int
    total_fiber: int
    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float


@dataclass(frozen=True)
class DailyMealCount:
    """Meals and calories logged on a single day."""

    date: date
    meal_count: int
    calories: int


@dataclass(frozen=True)
class AnalyticsResult:
    """Aggregated meal analytics for a period."""

    total_meals: int
    avg_calories_per_day: float
    meal_type_distribution: dict[str, int]
    cuisine_distribution: dict[str, int]
    top_dishes: list[DishPopularity]
    nutrition_summary: NutritionAnalytics
    weekly_trend: list[DailyMealCount]
    period: int
