"""Shopping list service"""

import logging
import numbers
from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Optional, Sequence, Any
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import NotFoundError, InvalidReferenceError, ServiceValidationError
from domain.models import ShoppingList, ShoppingListItem
from domain.schemas.shopping_schemas import (
    ShoppingListItemCreate,
    ShoppingListItemUpdate,
)
from repositories import (
    MealPlanStore,
    RecipeStore,
    IngredientStore,
    ShoppingListStore,
    MealPlanRepository,
    RecipeRepository,
    IngredientRepository,
    ShoppingListRepository,
    ShoppingListItemRepository,
)

logger = logging.getLogger("pantryplan.shopping")

_PRECISION_FROM_SETTINGS = object()


class IngredientKey(NamedTuple):
    """Grouping key for aggregation: same ingredient in the same unit."""

    ingredient_id: int
    unit: str


@dataclass
class AggregatedLine:
    """Summed requirement for one (ingredient, unit) pair across a meal plan."""

    ingredient_id: int
    ingredient_name: str
    category: Optional[str]
    total_quantity: float
    unit: str

    @property
    def key(self) -> IngredientKey:
        return IngredientKey(self.ingredient_id, self.unit)


def require_list_name(name: str) -> None:
    """Reject names that are empty or only whitespace."""
    if not name or not name.strip():
        raise ServiceValidationError(
            "Shopping list name must not be empty", code="EMPTY_LIST_NAME"
        )


def effective_base_servings(servings: Any) -> int:
    """Serving count a recipe's quantities are declared for; 1 when missing or not a positive integer."""
    if servings is None or isinstance(servings, bool):
        return 1
    if isinstance(servings, numbers.Integral) and servings > 0:
        return int(servings)
    return 1


def aggregate_ingredients(
    entries: Sequence[Any],
    recipes: RecipeStore,
    ingredients: IngredientStore,
    precision: Optional[int] = None,
) -> List[AggregatedLine]:
    """
    Aggregate ingredient requirements across scheduled meal plan entries.

    Algorithm:
    1. For each entry, resolve its recipe and compute
       multiplier = scheduled servings / effective base servings
    2. Scale every ingredient line of the recipe by the multiplier
    3. Sum scaled quantities per (ingredient_id, unit); different units of
       the same ingredient stay separate lines (no unit conversion)
    4. Resolve name and category once per ingredient

    Args:
        entries: Meal plan entries exposing `recipe_id` and `servings`
        recipes: Store resolving recipe ids
        ingredients: Store resolving ingredient ids
        precision: Decimal places applied to each final sum, None for exact

    Returns:
        Aggregated lines in the order their key was first seen

    Raises:
        InvalidReferenceError: If a recipe or ingredient cannot be resolved
    """
    recipe_cache: Dict[int, Any] = {}
    ingredient_cache: Dict[int, Any] = {}
    aggregated: Dict[IngredientKey, AggregatedLine] = {}

    for entry in entries:
        recipe_id = entry.recipe_id
        if recipe_id not in recipe_cache:
            recipe = recipes.get(recipe_id)
            if recipe is None:
                raise InvalidReferenceError(
                    f"Recipe {recipe_id} referenced by meal plan entry not found",
                    details={"recipe_id": recipe_id},
                    code="RECIPE_NOT_FOUND",
                )
            recipe_cache[recipe_id] = recipe
        recipe = recipe_cache[recipe_id]

        multiplier = entry.servings / effective_base_servings(recipe.servings)

        for line in recipe.ingredients:
            key = IngredientKey(line.ingredient_id, line.unit)
            scaled_quantity = float(line.quantity) * multiplier

            if key in aggregated:
                aggregated[key].total_quantity += scaled_quantity
                continue

            if line.ingredient_id not in ingredient_cache:
                ingredient = ingredients.get(line.ingredient_id)
                if ingredient is None:
                    raise InvalidReferenceError(
                        f"Ingredient {line.ingredient_id} used by recipe {recipe_id} not found",
                        details={
                            "recipe_id": recipe_id,
                            "ingredient_id": line.ingredient_id,
                        },
                        code="INGREDIENT_NOT_FOUND",
                    )
                ingredient_cache[line.ingredient_id] = ingredient
            ingredient = ingredient_cache[line.ingredient_id]

            aggregated[key] = AggregatedLine(
                ingredient_id=line.ingredient_id,
                ingredient_name=ingredient.name,
                category=ingredient.category,
                total_quantity=scaled_quantity,
                unit=line.unit,
            )

    lines = list(aggregated.values())
    if precision is not None:
        for line in lines:
            line.total_quantity = round(line.total_quantity, precision)

    logger.debug(
        f"Aggregated {len(lines)} ingredient lines from {len(entries)} entries "
        f"({len(recipe_cache)} recipes)"
    )
    return lines


class ShoppingListGenerator:
    """
    Builds a new shopping list from a meal plan.

    All data access goes through the injected stores, so the generator runs
    equally against the SQL repositories and in-memory fakes.
    """

    def __init__(
        self,
        meal_plans: MealPlanStore,
        recipes: RecipeStore,
        ingredients: IngredientStore,
        shopping_lists: ShoppingListStore,
        quantity_precision: Optional[int] = None,
    ):
        self.meal_plans = meal_plans
        self.recipes = recipes
        self.ingredients = ingredients
        self.shopping_lists = shopping_lists
        self.quantity_precision = quantity_precision

    def generate(self, meal_plan_id: int, list_name: str) -> ShoppingList:
        """
        Create a shopping list holding one item per (ingredient, unit) needed by the plan.

        Every call creates a brand-new list; existing lists are never reused
        or reconciled. A plan without entries yields an empty list.

        Raises:
            ServiceValidationError: If the list name is blank
            NotFoundError: If the meal plan does not exist
            InvalidReferenceError: If an entry's recipe or ingredient is gone
            StoreFailureError: If the list and items cannot be committed
        """
        logger.info(f"Generating shopping list '{list_name}' from meal plan {meal_plan_id}")

        require_list_name(list_name)

        if not self.meal_plans.exists(meal_plan_id):
            raise NotFoundError(
                f"Meal plan {meal_plan_id} not found",
                details={"meal_plan_id": meal_plan_id},
                code="MEAL_PLAN_NOT_FOUND",
            )

        entries = self.meal_plans.entries_for(meal_plan_id)
        if not entries:
            logger.warning(f"No meal plan entries found for plan {meal_plan_id}")

        lines = aggregate_ingredients(
            entries, self.recipes, self.ingredients, precision=self.quantity_precision
        )

        shopping_list = ShoppingList(name=list_name, meal_plan_id=meal_plan_id)
        items = [
            ShoppingListItem(
                ingredient_id=line.ingredient_id,
                name=line.ingredient_name,
                quantity=line.total_quantity,
                unit=line.unit,
                category=line.category,
                is_purchased=False,
                notes=None,
            )
            for line in lines
        ]

        created = self.shopping_lists.create_with_items(shopping_list, items)

        logger.info(
            f"Shopping list created: id={created.id}, meal_plan_id={meal_plan_id}, "
            f"items={len(items)}"
        )
        return created


class ShoppingService:
    """
    Business logic for shopping lists backed by a database session.

    `quantity_precision` defaults to `settings.shopping_quantity_precision`;
    pass None explicitly to store exact sums regardless of the setting.
    """

    def __init__(self, db: Session, quantity_precision: Any = _PRECISION_FROM_SETTINGS):
        self.db: Session = db
        self.meal_plans = MealPlanRepository(db)
        self.recipes = RecipeRepository(db)
        self.ingredients = IngredientRepository(db)
        self.lists = ShoppingListRepository(db)
        self.items = ShoppingListItemRepository(db)
        if quantity_precision is _PRECISION_FROM_SETTINGS:
            quantity_precision = settings.shopping_quantity_precision
        self.generator = ShoppingListGenerator(
            meal_plans=self.meal_plans,
            recipes=self.recipes,
            ingredients=self.ingredients,
            shopping_lists=self.lists,
            quantity_precision=quantity_precision,
        )

    def generate_from_meal_plan(self, meal_plan_id: int, name: str) -> ShoppingList:
        """Generate a new shopping list from a meal plan."""
        return self.generator.generate(meal_plan_id, name)

    def create_shopping_list(
        self, name: str, meal_plan_id: Optional[int] = None
    ) -> ShoppingList:
        """
        Create a shopping list.

        With a meal plan the list is populated by the same aggregation as
        generate_from_meal_plan(); without one it starts empty.
        """
        require_list_name(name)
        if meal_plan_id is not None:
            return self.generator.generate(meal_plan_id, name)

        shopping_list = self.lists.create_with_items(ShoppingList(name=name), [])
        logger.info(f"Standalone shopping list created: id={shopping_list.id}")
        return shopping_list

    def get_shopping_list(self, list_id: int) -> ShoppingList:
        """Get a shopping list with its items."""
        shopping_list = self.lists.get_with_items(list_id)
        if not shopping_list:
            raise NotFoundError(
                f"Shopping list {list_id} not found",
                details={"shopping_list_id": list_id},
            )
        return shopping_list

    def get_shopping_lists(self, limit: int = 20) -> List[ShoppingList]:
        """Get shopping lists, newest first."""
        return self.lists.get_recent(limit=limit)

    def add_item(self, list_id: int, payload: ShoppingListItemCreate) -> ShoppingListItem:
        """Add a manually entered item to an existing shopping list."""
        if not self.lists.exists(list_id):
            raise NotFoundError(
                f"Shopping list {list_id} not found",
                details={"shopping_list_id": list_id},
            )

        if payload.ingredient_id is not None and not self.ingredients.exists(
            payload.ingredient_id
        ):
            raise InvalidReferenceError(
                f"Ingredient {payload.ingredient_id} not found",
                details={"ingredient_id": payload.ingredient_id},
                code="INGREDIENT_NOT_FOUND",
            )

        item = ShoppingListItem(
            shopping_list_id=list_id,
            ingredient_id=payload.ingredient_id,
            name=payload.name,
            quantity=payload.quantity,
            unit=payload.unit,
            category=payload.category,
            is_purchased=False,
            notes=payload.notes,
        )
        return self.items.create(item)

    def update_item(self, item_id: int, update: ShoppingListItemUpdate) -> ShoppingListItem:
        """Update a shopping list item (check off, change quantity, add note)."""
        item = self.items.get_by_id(item_id)
        if not item:
            raise NotFoundError(
                f"Shopping list item {item_id} not found",
                details={"item_id": item_id},
            )

        fields = update.model_fields_set

        if "is_purchased" in fields and update.is_purchased is not None:
            item.is_purchased = update.is_purchased

        if "quantity" in fields:
            item.quantity = update.quantity

        if "notes" in fields:
            item.notes = update.notes

        return self.items.update(item)

    def delete_shopping_list(self, list_id: int) -> None:
        """Delete a shopping list and its items."""
        if not self.lists.delete(list_id):
            raise NotFoundError(
                f"Shopping list {list_id} not found",
                details={"shopping_list_id": list_id},
            )
        logger.info(f"Shopping list deleted: {list_id}")
