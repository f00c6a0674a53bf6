"""Nutrition facts record and its builder."""
from typing import Any, Dict

from pydantic import Field

from creational.domain.base.builder import Builder
from creational.domain.base.value_object import ValueObject


class NutritionFacts(ValueObject):
    """Nutrition facts as printed on a food label.

    ``serving_size`` and ``servings`` are required; the nutrient amounts are
    optional and default to zero. Construct through ``NutritionFacts.builder``.
    """
    serving_size: int = Field(..., gt=0, description="Serving size in ml")
    servings: int = Field(..., gt=0, description="Servings per container")
    calories: int = Field(0, ge=0, description="Calories per serving")
    fat: int = Field(0, ge=0, description="Fat in g per serving")
    sodium: int = Field(0, ge=0, description="Sodium in mg per serving")
    carbohydrate: int = Field(0, ge=0, description="Carbohydrate in g per serving")

    @classmethod
    def builder(cls, serving_size: int, servings: int) -> "NutritionFactsBuilder":
        """Start building a label with its required values."""
        return NutritionFactsBuilder(serving_size, servings)

    def to_builder(self) -> "NutritionFactsBuilder":
        """Return a builder pre-loaded with this label's values."""
        builder = NutritionFactsBuilder(self.serving_size, self.servings)
        builder._optional.update(self.optional_values())
        return builder

    def optional_values(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in OPTIONAL_FIELDS}

    def total_calories(self) -> int:
        """Calories for the whole container."""
        return self.calories * self.servings


OPTIONAL_FIELDS = ("calories", "fat", "sodium", "carbohydrate")


class NutritionFactsBuilder(Builder[NutritionFacts]):
    """Mutable builder for ``NutritionFacts``.

    Usage:
        >>> cola = (NutritionFacts.builder(240, 8)
        ...         .calories(100).sodium(35).carbohydrate(27).build())
    """

    def __init__(self, serving_size: int, servings: int):
        self._serving_size = serving_size
        self._servings = servings
        self._optional: Dict[str, Any] = {}

    def calories(self, value: int) -> "NutritionFactsBuilder":
        self._optional["calories"] = value
        return self

    def fat(self, value: int) -> "NutritionFactsBuilder":
        self._optional["fat"] = value
        return self

    def sodium(self, value: int) -> "NutritionFactsBuilder":
        self._optional["sodium"] = value
        return self

    def carbohydrate(self, value: int) -> "NutritionFactsBuilder":
        self._optional["carbohydrate"] = value
        return self

    def build(self) -> NutritionFacts:
        """Build the label.

        Raises:
            ValidationError: If any collected value is out of range
        """
        return NutritionFacts(
            serving_size=self._serving_size,
            servings=self._servings,
            **self._optional,
        )
