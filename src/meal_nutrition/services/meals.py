"""Meal suggestions and meal-level nutrition estimates."""

import asyncio
import logging
from dataclasses import dataclass

from meal_nutrition.adapters.mealdb_client import MealDbClient, parse_meal
from meal_nutrition.domain.meals import (
    MAX_INGREDIENTS,
    IngredientLine,
    MealEstimate,
    MealRecord,
    MealSuggestion,
)
from meal_nutrition.domain.measures import estimate_grams
from meal_nutrition.domain.nutrition import FoodMatch, MealTotals
from meal_nutrition.services.nutrition import NutritionService

_logger = logging.getLogger(__name__)


@dataclass
class MealNutritionService:
    """Estimate a meal's nutrition from its ingredient list."""

    nutrition_service: NutritionService
    concurrency: int = 5
    timeout_seconds: float = 15.0

    async def estimate(
        self, meal: MealRecord, semaphore: asyncio.Semaphore | None = None
    ) -> MealEstimate:
        """Sum scaled nutrients over the meal's non-blank ingredient slots.

        Ingredients are looked up concurrently, at most ``concurrency`` at a
        time unless a shared ``semaphore`` is given. A failed or timed-out
        lookup contributes nothing and does not affect the other ingredients.
        """
        limiter = semaphore or asyncio.Semaphore(max(1, self.concurrency))
        lines = [
            line
            for line in meal.ingredients
            if line.index <= MAX_INGREDIENTS and not line.is_blank
        ]
        matches = await asyncio.gather(
            *(self._lookup(meal, line, limiter) for line in lines)
        )

        totals = MealTotals()
        matched: list[str] = []
        failed: list[str] = []
        for line, match in zip(lines, matches, strict=True):
            name = (line.ingredient or "").strip()
            if match is None:
                failed.append(name)
                continue
            totals.add(match.per_100g, estimate_grams(line.measure))
            matched.append(name)

        return MealEstimate(
            totals=totals.as_profile(),
            matched_ingredients=matched,
            failed_ingredients=failed,
        )

    async def _lookup(
        self, meal: MealRecord, line: IngredientLine, limiter: asyncio.Semaphore
    ) -> FoodMatch | None:
        name = (line.ingredient or "").strip()
        async with limiter:
            try:
                return await asyncio.wait_for(
                    self.nutrition_service.lookup_food(name),
                    timeout=self.timeout_seconds,
                )
            except Exception as exc:
                _logger.warning(
                    "Ingredient lookup failed: meal=%s ingredient=%s error=%r",
                    meal.meal_id,
                    name,
                    exc,
                )
                return None


@dataclass
class MealSuggestionService:
    """Suggest recipes for a food and attach estimated nutrition."""

    mealdb_client: MealDbClient
    meal_nutrition_service: MealNutritionService
    max_suggestions: int = 10

    async def search(self, query: str, limit: int | None = None) -> list[MealRecord]:
        """Return up to ``limit`` meals matching ``query`` without nutrition."""
        payload = await self.mealdb_client.search_meals(query)
        meals = payload.get("meals") or []
        resolved_limit = limit if limit is not None else self.max_suggestions
        return [parse_meal(meal) for meal in meals[:resolved_limit]]

    async def suggest(
        self,
        query: str,
        limit: int | None = None,
        include_nutrition: bool = True,
    ) -> list[MealSuggestion]:
        """Return meal suggestions, estimated concurrently when requested.

        A recipe provider failure yields no suggestions.
        """
        try:
            meals = await self.search(query, limit)
        except Exception:
            _logger.exception("Error fetching meal suggestions: query=%s", query)
            return []
        if not include_nutrition:
            return [MealSuggestion(meal=meal) for meal in meals]

        shared_limiter = asyncio.Semaphore(
            max(1, self.meal_nutrition_service.concurrency)
        )
        estimates = await asyncio.gather(
            *(
                self.meal_nutrition_service.estimate(meal, semaphore=shared_limiter)
                for meal in meals
            )
        )
        return [
            MealSuggestion(meal=meal, estimate=estimate)
            for meal, estimate in zip(meals, estimates, strict=True)
        ]
