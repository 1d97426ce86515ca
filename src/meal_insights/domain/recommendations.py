"""Recommendation models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecommendedDish:
    """A catalog dish suggested for a meal slot."""

    dish_id: str
    dish_name: str
    cuisine: str
    calories: int
    score: float
    reason: str
    image: str
    prep_time: int
    difficulty: str


@dataclass(frozen=True)
class Recommendations:
    """Recommended dishes with an overall explanation."""

    recommendations: list[RecommendedDish]
    reason: str
