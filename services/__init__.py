"""Services package - Business logic layer"""

from services.shopping_service import (
    ShoppingService,
    ShoppingListGenerator,
    AggregatedLine,
    IngredientKey,
    aggregate_ingredients,
    effective_base_servings,
)

__all__ = [
    "ShoppingService",
    "ShoppingListGenerator",
    "AggregatedLine",
    "IngredientKey",
    "aggregate_ingredients",
    "effective_base_servings",
]
