"""Shared test fixtures."""

from dataclasses import dataclass, field

import httpx
import pytest

from meal_nutrition.adapters.fdc_client import FdcClient
from meal_nutrition.adapters.mealdb_client import MealDbClient
from meal_nutrition.config import Settings
from meal_nutrition.containers import AppContainer
from meal_nutrition.services.meals import MealNutritionService, MealSuggestionService
from meal_nutrition.services.nutrition import NutritionService


def fdc_food(
    description: str,
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    fdc_id: int = 1,
) -> dict[str, object]:
    """Build an FDC search result in the foods/search response shape."""
    return {
        "fdcId": fdc_id,
        "description": description,
        "dataType": "Foundation",
        "foodNutrients": [
            {"nutrientId": 1003, "nutrientName": "Protein", "value": protein},
            {"nutrientId": 1004, "nutrientName": "Total lipid (fat)", "value": fat},
            {
                "nutrientId": 1005,
                "nutrientName": "Carbohydrate, by difference",
                "value": carbs,
            },
            {"nutrientId": 1008, "nutrientName": "Energy", "value": calories},
            {"nutrientId": 2000, "nutrientName": "Sugars, total", "value": 10.4},
        ],
    }


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client keyed by lowercased query."""

    foods: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "apple": fdc_food("Apples, raw, with skin", 52, 0.3, 14, 0.2, 171688),
        }
    )
    failing: set[str] = field(default_factory=set)
    queries: list[str] = field(default_factory=list)

    async def search_foods(self, query: str, page_size: int = 1) -> dict[str, object]:
        self.queries.append(query)
        key = query.lower()
        if key in self.failing:
            request = httpx.Request("GET", "https://api.test/foods/search")
            raise httpx.HTTPStatusError(
                "Server error",
                request=request,
                response=httpx.Response(500, request=request),
            )
        food = self.foods.get(key)
        return {"totalHits": 1 if food else 0, "foods": [food] if food else []}


@dataclass
class FakeMealDbClient(MealDbClient):
    """Fake TheMealDB client returning fixed meals."""

    meals: list[dict[str, object]] | None = None
    error: Exception | None = None

    async def search_meals(self, query: str) -> dict[str, object]:
        if self.error is not None:
            raise self.error
        return {"meals": self.meals}


def raw_meal(
    meal_id: str, name: str, ingredients: list[tuple[str, str]]
) -> dict[str, object]:
    """Build a TheMealDB meal with empty trailing ingredient slots."""
    raw: dict[str, object] = {
        "idMeal": meal_id,
        "strMeal": name,
        "strCategory": "Dessert",
        "strArea": "British",
        "strMealThumb": f"https://www.themealdb.com/images/{meal_id}.jpg",
        "strSource": f"https://example.com/{meal_id}",
    }
    for index in range(1, 21):
        if index <= len(ingredients):
            ingredient, measure = ingredients[index - 1]
        else:
            ingredient, measure = "", " "
        raw[f"strIngredient{index}"] = ingredient
        raw[f"strMeasure{index}"] = measure
    return raw


@pytest.fixture
def settings() -> Settings:
    return Settings(fdc_api_key="fdc-key")


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient(
        foods={
            "apple": fdc_food("Apples, raw, with skin", 52, 0.3, 14, 0.2, 171688),
            "sugar": fdc_food("Sugars, granulated", 387, 0, 100, 0, 169655),
            "butter": fdc_food("Butter, salted", 717, 0.85, 0.06, 81.1, 173410),
        }
    )


@pytest.fixture
def mealdb_client() -> FakeMealDbClient:
    return FakeMealDbClient(
        meals=[
            raw_meal(
                "52893",
                "Apple & Blackberry Crumble",
                [("Apple", "2 pieces"), ("Sugar", "1/2 cup"), ("Butter", "2 tbsp")],
            )
        ]
    )


@pytest.fixture
def container(
    settings: Settings,
    fdc_client: FakeFdcClient,
    mealdb_client: FakeMealDbClient,
) -> AppContainer:
    nutrition_service = NutritionService(fdc_client=fdc_client)
    meal_nutrition_service = MealNutritionService(
        nutrition_service=nutrition_service,
        concurrency=settings.lookup_concurrency,
        timeout_seconds=settings.request_timeout_seconds,
    )
    meal_suggestion_service = MealSuggestionService(
        mealdb_client=mealdb_client,
        meal_nutrition_service=meal_nutrition_service,
        max_suggestions=settings.max_meal_suggestions,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        nutrition_service=nutrition_service,
        meal_nutrition_service=meal_nutrition_service,
        meal_suggestion_service=meal_suggestion_service,
        close_resources=close_resources,
    )
