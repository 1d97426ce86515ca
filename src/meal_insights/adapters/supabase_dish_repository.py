"""Supabase implementation for the dish catalog."""

from dataclasses import dataclass

from supabase import Client

from meal_insights.domain.meals import Dish, DishFilter, DishSnapshot, NutritionFacts
from meal_insights.services.meal_records import DishRepository

_DISH_COLUMNS = (
    "id, name, cuisine, calories, nutrition, ingredients, prep_time, difficulty, image"
)


@dataclass
class SupabaseDishRepository(DishRepository):
    """Supabase-backed dish catalog."""

    client: Client

    def get_dishes(self, dish_ids: set[str]) -> dict[str, DishSnapshot]:
        """Return dishes for the given ids in a single query."""
        if not dish_ids:
            return {}
        response = (
            self.client.table("dishes")
            .select(_DISH_COLUMNS)
            .in_("id", sorted(dish_ids))
            .execute()
        )
        dishes = [_parse_dish(row) for row in response.data or []]
        return {dish.id: dish for dish in dishes}

    def list_dishes(self, dish_filter: DishFilter, page: int, limit: int) -> list[Dish]:
        """Return one page of the catalog with optional filters."""
        query = self.client.table("dishes").select(_DISH_COLUMNS)
        if dish_filter.dish_type:
            query = query.eq("type", dish_filter.dish_type)
        if dish_filter.cuisine:
            query = query.eq("cuisine", dish_filter.cuisine)
        if dish_filter.min_calories is not None:
            query = query.gte("calories", dish_filter.min_calories)
        if dish_filter.max_calories is not None:
            query = query.lte("calories", dish_filter.max_calories)
        offset = (max(page, 1) - 1) * limit
        response = (
            query.order("name", desc=False).range(offset, offset + limit - 1).execute()
        )
        return [_parse_dish(row) for row in response.data or []]


def _parse_dish(row: dict[str, object]) -> DishSnapshot:
    """Parse a dish row into a domain snapshot."""
    nutrition_raw = row.get("nutrition")
    nutrition = nutrition_raw if isinstance(nutrition_raw, dict) else {}
    ingredients_raw = row.get("ingredients")
    ingredients = ingredients_raw if isinstance(ingredients_raw, list) else []
    return DishSnapshot(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        cuisine=str(row.get("cuisine") or ""),
        calories=int(row.get("calories") or 0),
        nutrition=NutritionFacts(
            protein=int(nutrition.get("protein") or 0),
            carbs=int(nutrition.get("carbs") or 0),
            fat=int(nutrition.get("fat") or 0),
            fiber=int(nutrition.get("fiber") or 0),
            sugar=int(nutrition.get("sugar") or 0),
            sodium=int(nutrition.get("sodium") or 0),
        ),
        ingredients=tuple(str(item) for item in ingredients),
        prep_time=int(row.get("prep_time") or 0),
        difficulty=str(row.get("difficulty") or ""),
        image=str(row.get("image") or ""),
    )
