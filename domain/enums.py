"""
Domain enums for PantryPlan application.
Contains all enumeration types used across the domain models.
"""

import enum


class Difficulty(str, enum.Enum):
    """Recipe difficulty levels"""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class MealType(str, enum.Enum):
    """Meal slots a recipe can be scheduled into"""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
