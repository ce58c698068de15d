"""
Unit tests for ingredient aggregation across meal plan entries.

These run against the in-memory store fakes only; no database is involved.

Aggregation rule:
    multiplier = scheduled servings / recipe servings (1 when undeclared)
    total(ingredient, unit) = sum of line.quantity * multiplier
"""

from types import SimpleNamespace

import pytest

from app.exceptions import InvalidReferenceError
from services.shopping_service import (
    AggregatedLine,
    IngredientKey,
    aggregate_ingredients,
    effective_base_servings,
)
from test_fixtures import FakeRecipeStore, FakeIngredientStore

FLOUR, SUGAR, EGGS, SALT, CHICKEN = 1, 2, 3, 4, 5


def entry(recipe_id, servings):
    return SimpleNamespace(recipe_id=recipe_id, servings=servings)


@pytest.fixture
def stores():
    recipes = FakeRecipeStore()
    ingredients = FakeIngredientStore()
    ingredients.add(FLOUR, "Flour", "Baking")
    ingredients.add(SUGAR, "Sugar", "Baking")
    ingredients.add(EGGS, "Eggs", "Dairy")
    ingredients.add(SALT, "Salt", None)
    ingredients.add(CHICKEN, "Chicken breast", "Meat")
    return recipes, ingredients


def by_key(lines):
    return {line.key: line for line in lines}


# =============================================================================
# BASE SERVINGS
# =============================================================================


@pytest.mark.parametrize(
    "servings, expected",
    [(4, 4), (1, 1), (None, 1), (0, 1), (-2, 1), (True, 1), (2.5, 1)],
)
def test_effective_base_servings(servings, expected):
    assert effective_base_servings(servings) == expected


# =============================================================================
# AGGREGATION
# =============================================================================


def test_no_entries_yields_no_lines(stores):
    recipes, ingredients = stores

    assert aggregate_ingredients([], recipes, ingredients) == []
    assert recipes.lookups == []
    assert ingredients.lookups == []


def test_full_servings_keeps_declared_quantities(stores):
    recipes, ingredients = stores
    recipes.add(10, 4, (FLOUR, 2, "cup"))

    lines = aggregate_ingredients([entry(10, 4)], recipes, ingredients)

    assert lines == [
        AggregatedLine(
            ingredient_id=FLOUR,
            ingredient_name="Flour",
            category="Baking",
            total_quantity=2.0,
            unit="cup",
        )
    ]


def test_half_servings_halves_quantities(stores):
    recipes, ingredients = stores
    recipes.add(10, 4, (FLOUR, 2, "cup"), (EGGS, 2, "piece"))

    lines = by_key(aggregate_ingredients([entry(10, 2)], recipes, ingredients))

    assert lines[IngredientKey(FLOUR, "cup")].total_quantity == pytest.approx(1.0)
    assert lines[IngredientKey(EGGS, "piece")].total_quantity == pytest.approx(1.0)


def test_undeclared_servings_uses_scheduled_count_as_multiplier(stores):
    recipes, ingredients = stores
    recipes.add(10, None, (SALT, 1, "tsp"))

    lines = aggregate_ingredients([entry(10, 2)], recipes, ingredients)

    assert len(lines) == 1
    assert lines[0].ingredient_name == "Salt"
    assert lines[0].category is None
    assert lines[0].total_quantity == pytest.approx(2.0)
    assert lines[0].unit == "tsp"


def test_same_ingredient_and_unit_sums_across_recipes(stores):
    recipes, ingredients = stores
    # Stir fry: 1.5 lb for 2 servings, scheduled for 3 -> 2.25 lb
    recipes.add(10, 2, (CHICKEN, 1.5, "lb"))
    # Curry: 1 lb for 4 servings, scheduled for 2 -> 0.5 lb
    recipes.add(11, 4, (CHICKEN, 1, "lb"))

    lines = aggregate_ingredients(
        [entry(10, 3), entry(11, 2)], recipes, ingredients
    )

    assert len(lines) == 1
    assert lines[0].total_quantity == pytest.approx(2.75)


def test_same_recipe_scheduled_twice_sums_both_entries(stores):
    recipes, ingredients = stores
    recipes.add(10, 4, (FLOUR, 2, "cup"))

    lines = aggregate_ingredients(
        [entry(10, 4), entry(10, 2)], recipes, ingredients
    )

    assert lines[0].total_quantity == pytest.approx(3.0)
    # Recipe resolved once and reused
    assert recipes.lookups == [10]


def test_different_units_stay_separate_lines(stores):
    recipes, ingredients = stores
    recipes.add(10, 1, (SUGAR, 1, "cup"))
    recipes.add(11, 1, (SUGAR, 2, "tbsp"))

    lines = by_key(
        aggregate_ingredients([entry(10, 1), entry(11, 1)], recipes, ingredients)
    )

    assert set(lines) == {IngredientKey(SUGAR, "cup"), IngredientKey(SUGAR, "tbsp")}
    assert lines[IngredientKey(SUGAR, "cup")].total_quantity == pytest.approx(1.0)
    assert lines[IngredientKey(SUGAR, "tbsp")].total_quantity == pytest.approx(2.0)
    # Both lines carry the same ingredient metadata
    assert {line.ingredient_name for line in lines.values()} == {"Sugar"}


def test_composite_key_does_not_collide_on_concatenation(stores):
    recipes, ingredients = stores
    ingredients.add(12, "Cream cheese", "Dairy")
    ingredients.add(123, "Olives", "Pantry")
    recipes.add(10, 1, (12, 1, "3oz"), (123, 1, "oz"))

    lines = aggregate_ingredients([entry(10, 1)], recipes, ingredients)

    assert [(line.ingredient_id, line.unit) for line in lines] == [
        (12, "3oz"),
        (123, "oz"),
    ]


def test_only_referenced_ingredients_are_produced(stores):
    recipes, ingredients = stores
    recipes.add(10, 2, (FLOUR, 1, "cup"))

    lines = aggregate_ingredients([entry(10, 2)], recipes, ingredients)

    assert [line.ingredient_id for line in lines] == [FLOUR]
    assert ingredients.lookups == [FLOUR]


def test_lines_keep_first_seen_order(stores):
    recipes, ingredients = stores
    recipes.add(10, 1, (EGGS, 1, "piece"), (FLOUR, 1, "cup"))
    recipes.add(11, 1, (SUGAR, 1, "cup"), (EGGS, 1, "piece"))

    lines = aggregate_ingredients([entry(10, 1), entry(11, 1)], recipes, ingredients)

    assert [line.ingredient_id for line in lines] == [EGGS, FLOUR, SUGAR]


def test_accumulation_is_not_rounded(stores):
    recipes, ingredients = stores
    recipes.add(10, 3, (FLOUR, 1, "cup"))

    lines = aggregate_ingredients([entry(10, 1), entry(10, 1)], recipes, ingredients)

    assert lines[0].total_quantity == pytest.approx(2 / 3)
    assert lines[0].total_quantity != 0.67


def test_precision_rounds_final_sum_only(stores):
    recipes, ingredients = stores
    recipes.add(10, 3, (FLOUR, 1, "cup"))

    # 1/3 + 1/3 + 1/3 rounded once at the end is 1.0; rounding each
    # contribution to 0.33 first would give 0.99
    lines = aggregate_ingredients(
        [entry(10, 1), entry(10, 1), entry(10, 1)], recipes, ingredients, precision=2
    )

    assert lines[0].total_quantity == 1.0


# =============================================================================
# INVALID REFERENCES
# =============================================================================


def test_missing_recipe_raises_invalid_reference(stores):
    recipes, ingredients = stores
    recipes.add(10, 1, (FLOUR, 1, "cup"))

    with pytest.raises(InvalidReferenceError) as exc_info:
        aggregate_ingredients([entry(10, 1), entry(99, 1)], recipes, ingredients)

    assert exc_info.value.details == {"recipe_id": 99}
    assert exc_info.value.code == "RECIPE_NOT_FOUND"


def test_missing_ingredient_raises_invalid_reference(stores):
    recipes, ingredients = stores
    recipes.add(10, 1, (FLOUR, 1, "cup"), (77, 3, "g"))

    with pytest.raises(InvalidReferenceError) as exc_info:
        aggregate_ingredients([entry(10, 1)], recipes, ingredients)

    assert exc_info.value.details == {"recipe_id": 10, "ingredient_id": 77}
    assert exc_info.value.code == "INGREDIENT_NOT_FOUND"
