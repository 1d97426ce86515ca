"""Supabase repository for nutrition goals."""

from dataclasses import dataclass

from supabase import Client

from meal_insights.domain.goals import NutritionGoals
from meal_insights.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Stores goals on the user profile row."""

    client: Client

    def get_goals(self, user_id: str) -> NutritionGoals | None:
        """Return stored goals for a user."""
        response = (
            self.client.table("user_profiles")
            .select("nutrition_goals")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        raw = response.data[0].get("nutrition_goals")
        if not isinstance(raw, dict):
            return None
        return NutritionGoals.from_stored(raw)

    def save_goals(self, user_id: str, goals: NutritionGoals) -> None:
        """Upsert goals for a user."""
        self.client.table("user_profiles").upsert(
            {"user_id": user_id, "nutrition_goals": goals.to_stored()},
            on_conflict="user_id",
        ).execute()
