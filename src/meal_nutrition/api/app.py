"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Query, Request, status

from meal_nutrition.api.schemas import (
    FoodNutritionResponse,
    MealCard,
    MealSuggestionsResponse,
)
from meal_nutrition.app_logging import configure_logging
from meal_nutrition.containers import AppContainer
from meal_nutrition.services.nutrition import FoodNotFoundError, InvalidLookupError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/nutrition")
    async def food_nutrition(
        request: Request,
        food: str = Query(default=""),
        quantity: float = Query(default=100.0),
    ) -> FoodNutritionResponse:
        """Return nutrients for ``quantity`` grams of ``food``."""
        state_container: AppContainer = request.app.state.container
        try:
            portion = await state_container.nutrition_service.lookup_portion(
                food, quantity
            )
        except InvalidLookupError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        except FoodNotFoundError as exc:
            logger.info("Food not found: query=%s", food)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
            ) from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.exception("Error fetching nutrition info: query=%s", food)
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail="Error fetching nutrition info",
            ) from exc
        return FoodNutritionResponse.from_portion(food.strip(), portion)

    @app.get("/meals")
    async def meal_suggestions(
        request: Request,
        query: str,
        include_nutrition: bool = True,
        limit: int | None = Query(default=None, ge=1),
    ) -> MealSuggestionsResponse:
        """Return meal suggestions for a food, with estimated nutrition."""
        state_container: AppContainer = request.app.state.container
        suggestions = await state_container.meal_suggestion_service.suggest(
            query.strip(),
            limit=limit,
            include_nutrition=include_nutrition,
        )
        return MealSuggestionsResponse(
            query=query,
            meals=[MealCard.from_suggestion(suggestion) for suggestion in suggestions],
        )

    return app
