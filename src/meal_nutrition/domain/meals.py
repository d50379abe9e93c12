"""Domain models for recipe meals."""

from dataclasses import dataclass, field

from meal_nutrition.domain.nutrition import NutrientProfile

MAX_INGREDIENTS = 20


@dataclass(frozen=True)
class IngredientLine:
    """One ingredient slot of a recipe with its free-text measure."""

    index: int
    ingredient: str | None
    measure: str | None

    @property
    def is_blank(self) -> bool:
        return not self.ingredient or not self.ingredient.strip()


@dataclass(frozen=True)
class MealRecord:
    """Recipe metadata and ingredients from TheMealDB."""

    meal_id: str
    name: str
    thumbnail_url: str | None = None
    source_url: str | None = None
    category: str | None = None
    area: str | None = None
    ingredients: list[IngredientLine] = field(default_factory=list)


@dataclass(frozen=True)
class MealEstimate:
    """Estimated nutrition for a whole meal."""

    totals: NutrientProfile
    matched_ingredients: list[str]
    failed_ingredients: list[str]


@dataclass(frozen=True)
class MealSuggestion:
    """A suggested meal with its estimated nutrition, if computed."""

    meal: MealRecord
    estimate: MealEstimate | None = None
