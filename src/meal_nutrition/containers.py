"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from meal_nutrition.adapters.fdc_client import HttpxFdcClient
from meal_nutrition.adapters.mealdb_client import HttpxMealDbClient
from meal_nutrition.config import Settings
from meal_nutrition.services.meals import MealNutritionService, MealSuggestionService
from meal_nutrition.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrition_service: NutritionService
    meal_nutrition_service: MealNutritionService
    meal_suggestion_service: MealSuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    mealdb_client = HttpxMealDbClient.create(
        api_key=resolved_settings.mealdb_api_key,
        base_url=resolved_settings.mealdb_base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    nutrition_service = NutritionService(fdc_client=fdc_client)
    meal_nutrition_service = MealNutritionService(
        nutrition_service=nutrition_service,
        concurrency=resolved_settings.lookup_concurrency,
        timeout_seconds=resolved_settings.request_timeout_seconds,
    )
    meal_suggestion_service = MealSuggestionService(
        mealdb_client=mealdb_client,
        meal_nutrition_service=meal_nutrition_service,
        max_suggestions=resolved_settings.max_meal_suggestions,
    )

    async def close_resources() -> None:
        await fdc_client.close()
        await mealdb_client.close()

    return AppContainer(
        settings=resolved_settings,
        nutrition_service=nutrition_service,
        meal_nutrition_service=meal_nutrition_service,
        meal_suggestion_service=meal_suggestion_service,
        close_resources=close_resources,
    )
