"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from meal_insights.adapters.supabase_dish_repository import SupabaseDishRepository
from meal_insights.adapters.supabase_goals_repository import SupabaseGoalsRepository
from meal_insights.adapters.supabase_meal_repository import SupabaseMealRepository
from meal_insights.config import Settings
from meal_insights.services.analytics import AnalyticsService
from meal_insights.services.goals import GoalsService
from meal_insights.services.meal_records import MealRecordService
from meal_insights.services.progress import ProgressService
from meal_insights.services.recommendations import RecommendationService
from meal_insights.services.shopping import ShoppingListService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    analytics_service: AnalyticsService
    goals_service: GoalsService
    progress_service: ProgressService
    shopping_list_service: ShoppingListService
    recommendation_service: RecommendationService


def build_services(
    settings: Settings,
    records: MealRecordService,
    goals_service: GoalsService,
) -> AppContainer:
    """Wire the engine services around the given data access."""
    return AppContainer(
        settings=settings,
        analytics_service=AnalyticsService(records),
        goals_service=goals_service,
        progress_service=ProgressService(records, goals_service),
        shopping_list_service=ShoppingListService(records),
        recommendation_service=RecommendationService(
            records=records,
            dish_repository=records.dish_repository,
            lookback_days=settings.recommendation_lookback_days,
            catalog_size=settings.recommendation_catalog_size,
            max_results=settings.max_recommendations,
            rank_by_score=settings.rank_recommendations_by_score,
        ),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    records = MealRecordService(
        meal_repository=SupabaseMealRepository(supabase_client),
        dish_repository=SupabaseDishRepository(supabase_client),
    )
    goals_service = GoalsService(SupabaseGoalsRepository(supabase_client))
    return build_services(resolved_settings, records, goals_service)
