"""Nutrition domain models."""

from dataclasses import dataclass

REFERENCE_GRAMS = 100.0


@dataclass(frozen=True)
class NutrientProfile:
    """Calories and macronutrients per 100 g of a food."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def scaled(self, grams: float) -> "NutrientProfile":
        """Return the profile for ``grams`` of the food."""
        factor = grams / REFERENCE_GRAMS
        return NutrientProfile(
            calories=self.calories * factor,
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
        )


@dataclass(frozen=True)
class FoodMatch:
    """Best FDC match for a free-text food name."""

    fdc_id: int | None
    description: str
    per_100g: NutrientProfile


@dataclass(frozen=True)
class PortionNutrition:
    """Nutrients for a specific portion of a matched food."""

    food: FoodMatch
    grams: float
    nutrients: NutrientProfile


@dataclass
class MealTotals:
    """Running totals of nutrients across a meal's ingredients."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0

    def add(self, profile: NutrientProfile, grams: float) -> None:
        """Add the contribution of ``grams`` of a food with ``profile``."""
        portion = profile.scaled(grams)
        self.calories += portion.calories
        self.protein += portion.protein
        self.carbs += portion.carbs
        self.fat += portion.fat

    def as_profile(self) -> NutrientProfile:
        """Freeze the current totals."""
        return NutrientProfile(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
        )
