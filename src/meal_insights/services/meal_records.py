"""Loading meals joined with their dishes."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol

from meal_insights.domain.meals import (
    Dish,
    DishFilter,
    DishSnapshot,
    MealEntry,
    MealRecord,
)

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for logged meals."""

    def list_meals(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return meals logged in ``[start, end)``."""


class DishRepository(Protocol):
    """Persistence interface for the dish catalog."""

    def get_dishes(self, dish_ids: set[str]) -> dict[str, DishSnapshot]:
        """Return dishes keyed by id; unknown ids are absent."""

    def list_dishes(self, dish_filter: DishFilter, page: int, limit: int) -> list[Dish]:
        """Return a page of catalog dishes in catalog order."""


@dataclass(frozen=True)
class JoinResult:
    """Joined meal records and the meals that could not be joined."""

    records: list[MealRecord]
    skipped_meal_ids: list[str]


@dataclass
class MealRecordService:
    """Fetches meals for a range and joins them with the dish catalog."""

    meal_repository: MealRepository
    dish_repository: DishRepository

    def fetch(self, user_id: str, start: datetime, end: datetime) -> list[MealRecord]:
        """Return joined meal records in ``[start, end)``."""
        _, records = self.fetch_history(user_id, start, end)
        return records

    def fetch_history(
        self, user_id: str, start: datetime, end: datetime
    ) -> tuple[list[MealEntry], list[MealRecord]]:
        """Return the logged meals in ``[start, end)`` and those that joined.

        Entries include meals whose dish no longer exists.
        """
        entries = self.meal_repository.list_meals(user_id, start, end)
        if not entries:
            return [], []
        dishes = self.dish_repository.get_dishes({entry.dish_id for entry in entries})
        result = join_meals(entries, dishes)
        skipped = set(result.skipped_meal_ids)
        for entry in entries:
            if entry.id in skipped:
                _logger.warning(
                    "Skipping meal with missing dish",
                    extra={"meal_id": entry.id, "dish_id": entry.dish_id},
                )
        return entries, result.records


def join_meals(
    entries: list[MealEntry], dishes: dict[str, DishSnapshot]
) -> JoinResult:
    """Attach dishes to meal entries, skipping meals whose dish is unknown."""
    records: list[MealRecord] = []
    skipped: list[str] = []
    for entry in entries:
        dish = dishes.get(entry.dish_id)
        if dish is None:
            skipped.append(entry.id)
            continue
        records.append(
            MealRecord(
                id=entry.id,
                date=entry.date,
                meal_type=entry.meal_type,
                dish=dish,
                notes=entry.notes,
                rating=entry.rating,
            )
        )
    return JoinResult(records=records, skipped_meal_ids=skipped)


def day_bounds(first_day: date, last_day: date) -> tuple[datetime, datetime]:
    """Return the UTC ``[start, end)`` covering both days in full."""
    start = datetime.combine(first_day, time.min, tzinfo=UTC)
    end = datetime.combine(last_day + timedelta(days=1), time.min, tzinfo=UTC)
    return start, end


def today_utc() -> date:
    """Return the current UTC calendar date."""
    return datetime.now(tz=UTC).date()
