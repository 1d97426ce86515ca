"""Domain models for meals and dishes."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class MealType(str, Enum):
    """Slots a meal can be logged under."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


@dataclass(frozen=True)
class NutritionFacts:
    """Per-serving nutrition of a dish (grams, sodium in milligrams)."""

    protein: int = 0
    carbs: int = 0
    fat: int = 0
    fiber: int = 0
    sugar: int = 0
    sodium: int = 0


@dataclass(frozen=True)
class DishSnapshot:
    """Dish data as read from the catalog at query time."""

    id: str
    name: str
    cuisine: str
    calories: int
    nutrition: NutritionFacts = field(default_factory=NutritionFacts)
    ingredients: tuple[str, ...] = ()
    prep_time: int = 0
    difficulty: str = ""
    image: str = ""


# Catalog candidates and joined dishes share one shape.
Dish = DishSnapshot


@dataclass(frozen=True)
class MealEntry:
    """Persisted meal row referencing a dish by id."""

    id: str
    user_id: str
    date: datetime
    meal_type: str
    dish_id: str
    notes: str = ""
    rating: int = 0


@dataclass(frozen=True)
class MealRecord:
    """Meal entry joined with its dish."""

    id: str
    date: datetime
    meal_type: str
    dish: DishSnapshot
    notes: str = ""
    rating: int = 0


@dataclass(frozen=True)
class DishFilter:
    """Optional filters applied to a catalog page."""

    dish_type: str | None = None
    cuisine: str | None = None
    min_calories: int | None = None
    max_calories: int | None = None
