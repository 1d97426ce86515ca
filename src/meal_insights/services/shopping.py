"""Shopping list generation from planned and logged meals."""

import logging
from dataclasses import dataclass
from datetime import date

from meal_insights.domain.meals import MealRecord
from meal_insights.domain.shopping import IngredientItem, ShoppingList
from meal_insights.services.errors import UpstreamFetchError
from meal_insights.services.meal_records import MealRecordService, day_bounds

# Checked in order; the first category with a matching keyword wins.
INGREDIENT_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Grains", ("rice", "wheat", "flour", "bread")),
    ("Vegetables", ("onion", "tomato", "potato", "carrot", "peas", "beans")),
    ("Protein", ("chicken", "fish", "meat", "egg")),
    ("Dairy", ("milk", "cheese", "yogurt", "butter")),
    ("Pantry", ("oil", "ghee", "salt", "sugar", "spice")),
)
DEFAULT_CATEGORY = "Others"

_logger = logging.getLogger(__name__)


@dataclass
class ShoppingListService:
    """Service for building shopping lists over a date range."""

    records: MealRecordService

    def get_shopping_list(
        self, user_id: str, start_day: date, end_day: date
    ) -> ShoppingList:
        """Return ingredients for meals between both days, inclusive."""
        start, end = day_bounds(start_day, end_day)
        try:
            meals = self.records.fetch(user_id, start, end)
        except Exception as exc:
            _logger.exception(
                "Failed to get meals for shopping list", extra={"user_id": user_id}
            )
            raise UpstreamFetchError("failed to get meals for shopping list") from exc
        return build_shopping_list(meals, start_day, end_day)


def build_shopping_list(
    meals: list[MealRecord], start_day: date, end_day: date
) -> ShoppingList:
    """Count ingredient occurrences across meals.

    Ingredient names are matched exactly, so "Tomato" and "tomato" stay
    separate entries.
    """
    counts: dict[str, int] = {}
    for meal in meals:
        for ingredient in meal.dish.ingredients:
            counts[ingredient] = counts.get(ingredient, 0) + 1

    ingredients = [
        IngredientItem(
            name=name,
            quantity=_quantity(count),
            category=categorize_ingredient(name),
            count=count,
        )
        for name, count in counts.items()
    ]
    return ShoppingList(
        ingredients=ingredients,
        total_items=len(ingredients),
        date_range=f"{start_day.isoformat()} to {end_day.isoformat()}",
    )


def categorize_ingredient(name: str) -> str:
    """Return the shopping category for an ingredient name."""
    lowered = name.lower()
    for category, keywords in INGREDIENT_CATEGORIES:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY


def _quantity(count: int) -> str:
    if count > 1:
        return f"{count} units"
    return "1 unit"
