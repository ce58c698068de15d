"""
Repositories package - Data access layer.
"""

from repositories.base import (
    BaseRepository,
    MealPlanStore,
    RecipeStore,
    IngredientStore,
    ShoppingListStore,
)
from repositories.ingredient_repository import IngredientRepository
from repositories.recipe_repository import RecipeRepository
from repositories.meal_plan_repository import MealPlanRepository
from repositories.shopping_repository import (
    ShoppingListRepository,
    ShoppingListItemRepository,
)

__all__ = [
    "BaseRepository",
    "MealPlanStore",
    "RecipeStore",
    "IngredientStore",
    "ShoppingListStore",
    "IngredientRepository",
    "RecipeRepository",
    "MealPlanRepository",
    "ShoppingListRepository",
    "ShoppingListItemRepository",
]
