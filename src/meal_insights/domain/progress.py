"""Domain models for nutrition progress."""

from dataclasses import dataclass
from datetime import date

from meal_insights.domain.goals import ResolvedGoals


@dataclass(frozen=True)
class DailyNutrition:
    """Nutrition totals for a single day."""

    date: date
    calories: int
    protein: int
    carbs: int
    fat: int
    fiber: int
    sodium: int
    meal_count: int


@dataclass(frozen=True)
class ProgressSummary:
    """Per-day averages and goal achievement counts."""

    avg_calories: float
    avg_protein: float
    avg_carbs: float
    avg_fat: float
    avg_fiber: float
    total_days: int
    calorie_goal_met: int
    protein_goal_met: int
    goal_percentage: float


@dataclass(frozen=True)
class NutritionProgress:
    """Daily nutrition against the user's goals."""

    period: int
    progress: list[DailyNutrition]
    goals: ResolvedGoals
    summary: ProgressSummary
