"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.ingredient import Ingredient
from domain.models.recipe import Recipe, RecipeIngredient
from domain.models.meal_plan import MealPlan, MealPlanEntry
from domain.models.shopping_list import ShoppingList, ShoppingListItem

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Ingredient models
    "Ingredient",
    # Recipe models
    "Recipe",
    "RecipeIngredient",
    # Meal plan models
    "MealPlan",
    "MealPlanEntry",
    # Shopping list models
    "ShoppingList",
    "ShoppingListItem",
]
