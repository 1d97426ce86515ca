"""Supabase repository for logged meals."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from meal_insights.domain.meals import MealEntry
from meal_insights.services.meal_records import MealRepository


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meal range queries."""

    client: Client

    def list_meals(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return meals in the time range ordered by date."""
        response = (
            self.client.table("meals")
            .select("id, user_id, date, meal_type, dish_id, notes, rating")
            .eq("user_id", user_id)
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> MealEntry:
    date_raw = row.get("date")
    meal_date = (
        datetime.fromisoformat(date_raw)
        if isinstance(date_raw, str) and date_raw
        else datetime.min.replace(tzinfo=UTC)
    )
    return MealEntry(
        id=str(row["id"]),
        user_id=str(row.get("user_id", "")),
        date=meal_date,
        meal_type=str(row.get("meal_type", "")),
        dish_id=str(row.get("dish_id", "")),
        notes=str(row.get("notes") or ""),
        rating=int(row.get("rating") or 0),
    )
