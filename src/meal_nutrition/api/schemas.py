"""Pydantic response models for the HTTP API."""

from pydantic import BaseModel

from meal_nutrition.domain.meals import MealEstimate, MealSuggestion
from meal_nutrition.domain.nutrition import NutrientProfile, PortionNutrition


class Nutrients(BaseModel):
    """Calories and macronutrients, rounded for display."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_profile(cls, profile: NutrientProfile) -> "Nutrients":
        return cls(
            calories=round(profile.calories, 2),
            protein=round(profile.protein, 2),
            carbs=round(profile.carbs, 2),
            fat=round(profile.fat, 2),
        )


class FoodNutritionResponse(BaseModel):
    """Nutrition for a portion of a single food."""

    food: str
    description: str
    fdc_id: int | None = None
    quantity_g: float
    nutrients: Nutrients

    @classmethod
    def from_portion(
        cls, food: str, portion: PortionNutrition
    ) -> "FoodNutritionResponse":
        return cls(
            food=food,
            description=portion.food.description,
            fdc_id=portion.food.fdc_id,
            quantity_g=portion.grams,
            nutrients=Nutrients.from_profile(portion.nutrients),
        )


class MealNutrition(BaseModel):
    """Estimated nutrition for a whole meal."""

    totals: Nutrients
    matched_ingredients: list[str]
    failed_ingredients: list[str]

    @classmethod
    def from_estimate(cls, estimate: MealEstimate) -> "MealNutrition":
        return cls(
            totals=Nutrients.from_profile(estimate.totals),
            matched_ingredients=estimate.matched_ingredients,
            failed_ingredients=estimate.failed_ingredients,
        )


class MealCard(BaseModel):
    """Suggested meal with metadata and optional nutrition."""

    id: str
    name: str
    thumbnail_url: str | None = None
    source_url: str | None = None
    category: str | None = None
    area: str | None = None
    nutrition: MealNutrition | None = None

    @classmethod
    def from_suggestion(cls, suggestion: MealSuggestion) -> "MealCard":
        meal = suggestion.meal
        return cls(
            id=meal.meal_id,
            name=meal.name,
            thumbnail_url=meal.thumbnail_url,
            source_url=meal.source_url,
            category=meal.category,
            area=meal.area,
            nutrition=(
                MealNutrition.from_estimate(suggestion.estimate)
                if suggestion.estimate is not None
                else None
            ),
        )


class MealSuggestionsResponse(BaseModel):
    """Meal suggestions for a query."""

    query: str
    meals: list[MealCard]
