"""Pydantic models for API request bodies."""

from pydantic import BaseModel, ConfigDict, Field

from meal_insights.domain.goals import NutritionGoals


class NutritionGoalsUpdate(BaseModel):
    """Daily goals payload; ``0`` leaves a goal unset."""

    model_config = ConfigDict(populate_by_name=True)

    daily_calories: int = Field(default=0, ge=0, alias="dailyCalories")
    protein: int = Field(default=0, ge=0)
    carbs: int = Field(default=0, ge=0)
    fat: int = Field(default=0, ge=0)
    fiber: int = Field(default=0, ge=0)
    sodium: int = Field(default=0, ge=0)

    def to_goals(self) -> NutritionGoals:
        """Convert the payload into domain goals."""
        return NutritionGoals.from_stored(self.model_dump())
