"""Nutrition service integrating USDA FDC."""

import logging
import math
from dataclasses import dataclass

from meal_nutrition.adapters.fdc_client import FdcClient
from meal_nutrition.domain.nutrition import FoodMatch, NutrientProfile, PortionNutrition

_NUTRIENT_NAMES = {
    "Energy": "calories",
    "Protein": "protein",
    "Carbohydrate, by difference": "carbs",
    "Total lipid (fat)": "fat",
}

_logger = logging.getLogger(__name__)


class FoodNotFoundError(LookupError):
    """Raised when FDC returns no match for a food name."""

    def __init__(self, query: str) -> None:
        super().__init__(f"Food not found: {query}")
        self.query = query


class InvalidLookupError(ValueError):
    """Raised when a direct lookup is missing a food name or a positive quantity."""


@dataclass
class NutritionService:
    """Service for single-food nutrition lookups."""

    fdc_client: FdcClient

    async def lookup_food(self, name: str) -> FoodMatch:
        """Return the best FDC match for ``name`` with its per-100 g profile."""
        payload = await self.fdc_client.search_foods(name, page_size=1)
        foods = payload.get("foods") or []
        if not isinstance(foods, list) or not foods:
            raise FoodNotFoundError(name)
        if not isinstance(foods[0], dict):
            raise FoodNotFoundError(name)
        record = foods[0]
        _logger.debug(
            "Nutrition search FDC: query=%s fdc_id=%s", name, record.get("fdcId")
        )
        return FoodMatch(
            fdc_id=record.get("fdcId"),
            description=record.get("description", ""),
            per_100g=extract_nutrients(record),
        )

    async def lookup_portion(self, name: str, grams: float) -> PortionNutrition:
        """Return nutrients for ``grams`` of the best match for ``name``."""
        cleaned = name.strip() if name else ""
        if not cleaned or not math.isfinite(grams) or grams <= 0:
            raise InvalidLookupError("Enter valid food and quantity.")
        match = await self.lookup_food(cleaned)
        return PortionNutrition(
            food=match,
            grams=grams,
            nutrients=match.per_100g.scaled(grams),
        )


def extract_nutrients(food: dict[str, object]) -> NutrientProfile:
    """Extract calories, protein, carbs and fat from an FDC search result."""
    values: dict[str, float] = {
        "calories": 0.0,
        "protein": 0.0,
        "carbs": 0.0,
        "fat": 0.0,
    }
    for nutrient in food.get("foodNutrients") or []:
        if not isinstance(nutrient, dict):
            continue
        field_name = _NUTRIENT_NAMES.get(nutrient.get("nutrientName"))
        value = nutrient.get("value")
        if field_name is None or not _is_number(value):
            continue
        values[field_name] = float(value)

    return NutrientProfile(
        calories=values["calories"],
        protein=values["protein"],
        carbs=values["carbs"],
        fat=values["fat"],
    )


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)
