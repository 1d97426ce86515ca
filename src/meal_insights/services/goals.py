"""Nutrition goals service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_insights.domain.goals import NutritionGoals, ResolvedGoals
from meal_insights.services.errors import UpstreamFetchError

_logger = logging.getLogger(__name__)


class GoalsRepository(Protocol):
    """Persistence interface for user nutrition goals."""

    def get_goals(self, user_id: str) -> NutritionGoals | None:
        """Return the user's stored goals, if any."""

    def save_goals(self, user_id: str, goals: NutritionGoals) -> None:
        """Persist the user's goals."""


@dataclass
class GoalsService:
    """Service for reading and updating daily goals."""

    repository: GoalsRepository

    def get_goals(self, user_id: str) -> ResolvedGoals:
        """Return the user's goals with defaults for unset fields."""
        try:
            stored = self.repository.get_goals(user_id)
        except Exception as exc:
            _logger.exception(
                "Failed to get nutrition goals", extra={"user_id": user_id}
            )
            raise UpstreamFetchError("failed to get nutrition goals") from exc
        return (stored or NutritionGoals()).resolved()

    def update_goals(self, user_id: str, goals: NutritionGoals) -> ResolvedGoals:
        """Store new goals and return them resolved."""
        try:
            self.repository.save_goals(user_id, goals)
        except Exception as exc:
            _logger.exception(
                "Failed to update nutrition goals", extra={"user_id": user_id}
            )
            raise UpstreamFetchError("failed to update nutrition goals") from exc
        return goals.resolved()
