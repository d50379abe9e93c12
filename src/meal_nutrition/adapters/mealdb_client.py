"""TheMealDB recipe API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

from meal_nutrition.domain.meals import MAX_INGREDIENTS, IngredientLine, MealRecord


class MealDbClient(Protocol):
    """Interface for TheMealDB interactions."""

    async def search_meals(self, query: str) -> dict[str, object]:
        """Search meals by name and return raw API data."""


@dataclass
class HttpxMealDbClient(MealDbClient):
    """HTTPX-backed TheMealDB client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15.0

    @classmethod
    def create(
        cls, api_key: str, base_url: str, timeout_seconds: float = 15.0
    ) -> "HttpxMealDbClient":
        """Create a TheMealDB client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(),
            timeout_seconds=timeout_seconds,
        )

    async def search_meals(self, query: str) -> dict[str, object]:
        """Search meals by name."""
        url = f"{self.base_url}/{self.api_key}/search.php"
        response = await self.http_client.get(
            url,
            params={"s": query},
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def parse_meal(raw: dict[str, object]) -> MealRecord:
    """Build a meal record from TheMealDB's flat ``strIngredientN`` layout."""
    ingredients = [
        IngredientLine(
            index=index,
            ingredient=_optional_str(raw.get(f"strIngredient{index}")),
            measure=_optional_str(raw.get(f"strMeasure{index}")),
        )
        for index in range(1, MAX_INGREDIENTS + 1)
    ]
    return MealRecord(
        meal_id=str(raw.get("idMeal", "")),
        name=str(raw.get("strMeal") or ""),
        thumbnail_url=_optional_str(raw.get("strMealThumb")),
        source_url=_optional_str(raw.get("strSource")),
        category=_optional_str(raw.get("strCategory")),
        area=_optional_str(raw.get("strArea")),
        ingredients=ingredients,
    )


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    return str(value)
