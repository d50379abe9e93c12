"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    fdc_api_key: str
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    mealdb_api_key: str = "1"
    mealdb_base_url: str = "https://www.themealdb.com/api/json/v1"
    request_timeout_seconds: float = 15.0
    lookup_concurrency: int = 5
    max_meal_suggestions: int = 10
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
