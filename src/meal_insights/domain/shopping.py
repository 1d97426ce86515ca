"""Shopping list models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IngredientItem:
    """Ingredient aggregated across meals."""

    name: str
    quantity: str
    category: str
    count: int


@dataclass(frozen=True)
class ShoppingList:
    """Ingredients needed for a date range."""

    ingredients: list[IngredientItem]
    total_items: int
    date_range: str
