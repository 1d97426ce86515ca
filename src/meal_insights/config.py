"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    environment: str = _ENVIRONMENT
    default_analytics_period: int = 30
    default_progress_period: int = 7
    recommendation_lookback_days: int = 30
    recommendation_catalog_size: int = 20
    max_recommendations: int = 5
    rank_recommendations_by_score: bool = False

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
