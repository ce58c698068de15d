#!/usr/bin/env python3
"""
Initialize the PantryPlan database.
Creates tables and optionally seeds a small demo meal plan.

Usage:
    python scripts/init_db.py           # create tables
    python scripts/init_db.py --seed    # create tables and demo data
"""

import argparse
import logging
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Add parent directory to path to import app modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.orm import Session

from domain.enums import Difficulty, MealType
from domain.models import (
    Ingredient,
    Recipe,
    RecipeIngredient,
    MealPlan,
    MealPlanEntry,
)

logger = logging.getLogger("pantryplan.init_db")

DEMO_INGREDIENTS = {
    "flour": ("Flour", "Baking", "cup"),
    "sugar": ("Sugar", "Baking", "cup"),
    "eggs": ("Eggs", "Dairy", "piece"),
    "milk": ("Milk", "Dairy", "cup"),
    "chicken": ("Chicken breast", "Meat", "lb"),
    "rice": ("Rice", "Grains", "cup"),
    "soy_sauce": ("Soy sauce", "Condiments", "tbsp"),
}

# title, servings, difficulty, [(ingredient key, quantity, unit)]
DEMO_RECIPES = [
    ("Pancakes", 4, Difficulty.EASY, [
        ("flour", 2, "cup"), ("sugar", 0.25, "cup"), ("eggs", 2, "piece"), ("milk", 1.5, "cup"),
    ]),
    ("Chicken Stir Fry", 2, Difficulty.MEDIUM, [
        ("chicken", 1.5, "lb"), ("rice", 1, "cup"), ("soy_sauce", 3, "tbsp"), ("sugar", 1, "tbsp"),
    ]),
    ("Rice Pudding", None, Difficulty.EASY, [
        ("rice", 0.25, "cup"), ("milk", 1, "cup"), ("sugar", 2, "tbsp"),
    ]),
]


def seed_demo_data(db: Session) -> MealPlan:
    """
    Insert demo ingredients, recipes and a one-week meal plan.

    Returns:
        The created MealPlan
    """
    ingredients = {}
    for key, (name, category, unit) in DEMO_INGREDIENTS.items():
        ingredients[key] = Ingredient(name=name, category=category, unit=unit)
        db.add(ingredients[key])
    db.flush()

    recipes = []
    for title, servings, difficulty, lines in DEMO_RECIPES:
        recipe = Recipe(
            title=title,
            instructions="[]",
            servings=servings,
            difficulty=difficulty,
        )
        for key, quantity, unit in lines:
            recipe.ingredients.append(
                RecipeIngredient(
                    ingredient_id=ingredients[key].id, quantity=quantity, unit=unit
                )
            )
        db.add(recipe)
        recipes.append(recipe)
    db.flush()

    start = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    plan = MealPlan(
        name="Demo week", start_date=start, end_date=start + timedelta(days=6)
    )
    pancakes, stir_fry, pudding = recipes
    schedule = [
        (0, MealType.BREAKFAST, pancakes, 2),
        (1, MealType.DINNER, stir_fry, 3),
        (2, MealType.SNACK, pudding, 2),
        (5, MealType.BREAKFAST, pancakes, 4),
    ]
    for day, meal_type, recipe, servings in schedule:
        plan.entries.append(
            MealPlanEntry(
                recipe_id=recipe.id,
                date=start + timedelta(days=day),
                meal_type=meal_type,
                servings=servings,
            )
        )
    db.add(plan)
    db.commit()
    db.refresh(plan)

    logger.info(
        f"Seeded {len(ingredients)} ingredients, {len(recipes)} recipes, "
        f"meal plan {plan.id} with {len(schedule)} entries"
    )
    return plan


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the PantryPlan database")
    parser.add_argument("--seed", action="store_true", help="Insert demo data")
    args = parser.parse_args(argv)

    from app.config import settings
    from domain.models import SessionLocal, init_database

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )

    try:
        init_database()
    except Exception as e:
        logger.error(f"✗ Failed to initialize database: {e}")
        return 1
    logger.info("✓ Database tables created")

    if args.seed:
        with SessionLocal() as db:
            plan = seed_demo_data(db)
        logger.info(f"✓ Demo meal plan ready: id={plan.id}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
