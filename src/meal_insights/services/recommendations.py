"""Dish recommendations based on recent meal history."""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, timedelta

from meal_insights.domain.meals import Dish, DishFilter, MealEntry, MealRecord
from meal_insights.domain.recommendations import Recommendations, RecommendedDish
from meal_insights.services.errors import UpstreamFetchError
from meal_insights.services.meal_records import (
    DishRepository,
    MealRecordService,
    day_bounds,
)

BASE_SCORE = 0.6
CUISINE_MATCH_BONUS = 0.3
LIGHT_MEAL_BONUS = 0.1
LIGHT_MEAL_CALORIES = 600
FALLBACK_SCORE = 0.5
FALLBACK_REASON = "Popular dish to try"
MAX_SCORE = 1.0

_logger = logging.getLogger(__name__)


@dataclass
class RecommendationService:
    """Service that suggests unseen catalog dishes for a meal slot."""

    records: MealRecordService
    dish_repository: DishRepository
    lookback_days: int = 30
    catalog_size: int = 20
    max_results: int = 5
    rank_by_score: bool = False

    def get_recommendations(
        self, user_id: str, meal_type: str, target_date: date
    ) -> Recommendations:
        """Return recommendations for ``meal_type`` on ``target_date``."""
        start, end = day_bounds(
            target_date - timedelta(days=self.lookback_days), target_date
        )
        try:
            recent_entries, recent_meals = self.records.fetch_history(
                user_id, start, end
            )
            candidates = self.dish_repository.list_dishes(
                DishFilter(), page=1, limit=self.catalog_size
            )
        except Exception as exc:
            _logger.exception(
                "Failed to load data for recommendations",
                extra={"user_id": user_id, "meal_type": meal_type},
            )
            raise UpstreamFetchError("failed to get recommendations") from exc
        return recommend(
            recent_meals,
            candidates,
            meal_type,
            target_date,
            recent_entries=recent_entries,
            max_results=self.max_results,
            lookback_days=self.lookback_days,
            rank_by_score=self.rank_by_score,
        )


def recommend(  # noqa: PLR0913
    recent_meals: list[MealRecord],
    candidates: list[Dish],
    meal_type: str,
    target_date: date,
    *,
    recent_entries: list[MealEntry] | None = None,
    max_results: int = 5,
    lookback_days: int = 30,
    rank_by_score: bool = False,
) -> Recommendations:
    """Score catalog dishes the user has not eaten for this meal type.

    ``recent_entries`` are the logged meals before joining with dishes; when
    given, they decide which dishes count as eaten and whether the user has
    any history, so meals whose dish was deleted still count. Cuisine
    preferences always come from the joined ``recent_meals``.

    Dishes are emitted in catalog order unless ``rank_by_score`` is set.
    When every candidate was already eaten, the first catalog entries are
    returned with a flat fallback score.
    """
    window_start = target_date - timedelta(days=lookback_days)
    joined = [
        meal
        for meal in recent_meals
        if window_start <= meal.date.date() <= target_date
    ]
    if recent_entries is None:
        logged = [(meal.meal_type, meal.dish.id) for meal in joined]
    else:
        logged = [
            (entry.meal_type, entry.dish_id)
            for entry in recent_entries
            if window_start <= entry.date.date() <= target_date
        ]
    eaten_dish_ids = {dish_id for slot, dish_id in logged if slot == meal_type}
    preferred_cuisines = Counter(
        meal.dish.cuisine for meal in joined if meal.meal_type == meal_type
    )

    eligible = [dish for dish in candidates if dish.id not in eaten_dish_ids]
    scored = [_score(dish, preferred_cuisines) for dish in eligible]
    if rank_by_score:
        scored.sort(key=lambda item: item.score, reverse=True)
    recommendations = scored[:max_results]

    if not recommendations:
        recommendations = [
            _to_recommendation(dish, FALLBACK_SCORE, FALLBACK_REASON)
            for dish in candidates[:max_results]
        ]

    if logged:
        reason = f"Recommendations for {meal_type} based on your recent meal history"
    else:
        reason = f"Popular {meal_type} recommendations to get you started"
    return Recommendations(recommendations=recommendations, reason=reason)


def _score(dish: Dish, preferred_cuisines: Counter[str]) -> RecommendedDish:
    score = BASE_SCORE
    cuisine_match = preferred_cuisines[dish.cuisine] > 0
    if cuisine_match:
        score += CUISINE_MATCH_BONUS
    if 0 < dish.calories < LIGHT_MEAL_CALORIES:
        score += LIGHT_MEAL_BONUS
    score = min(round(score, 2), MAX_SCORE)

    if cuisine_match:
        reason = f"You enjoyed {dish.cuisine} cuisine recently"
    else:
        reason = "Trying something new based on your dietary patterns"
    return _to_recommendation(dish, score, reason)


def _to_recommendation(dish: Dish, score: float, reason: str) -> RecommendedDish:
    return RecommendedDish(
        dish_id=dish.id,
        dish_name=dish.name,
        cuisine=dish.cuisine,
        calories=dish.calories,
        score=score,
        reason=reason,
        image=dish.image,
        prep_time=dish.prep_time,
        difficulty=dish.difficulty,
    )
