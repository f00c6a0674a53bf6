"""Nutrition bounded context - the flat builder example."""

from .nutrition_facts import OPTIONAL_FIELDS, NutritionFacts, NutritionFactsBuilder

__all__ = ["NutritionFacts", "NutritionFactsBuilder", "OPTIONAL_FIELDS"]
