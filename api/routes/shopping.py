"""API routes for shopping list management."""

from fastapi import APIRouter, Depends, Query, Response, status
from typing import List
import logging

from api.dependencies import get_shopping_service
from domain.mappers import ShoppingMapper
from domain.schemas.shopping_schemas import (
    GenerateShoppingListRequest,
    ShoppingListCreate,
    ShoppingListResponse,
    ShoppingListDetailResponse,
    ShoppingListItemCreate,
    ShoppingListItemResponse,
    ShoppingListItemUpdate,
)
from services.shopping_service import ShoppingService

router = APIRouter(tags=["Shopping Lists"])
logger = logging.getLogger("pantryplan.api.shopping")


@router.post(
    "/meal-plans/{meal_plan_id}/shopping-list",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
)
def generate_shopping_list(
    meal_plan_id: int,
    request: GenerateShoppingListRequest,
    service: ShoppingService = Depends(get_shopping_service),
):
    """
    Generate a new shopping list from a meal plan.

    Ingredient quantities are scaled per entry by scheduled servings over the
    recipe's servings and summed per (ingredient, unit). Items are fetched
    separately through GET /shopping-lists/{list_id}.

    Example request:
    ```json
    {"name": "Week 42 groceries"}
    ```
    """
    shopping_list = service.generate_from_meal_plan(meal_plan_id, request.name)
    return ShoppingMapper.to_response(shopping_list)


@router.post(
    "/shopping-lists",
    response_model=ShoppingListResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_shopping_list(
    request: ShoppingListCreate,
    service: ShoppingService = Depends(get_shopping_service),
):
    """Create a shopping list, populated from `meal_plan_id` when given."""
    shopping_list = service.create_shopping_list(request.name, request.meal_plan_id)
    return ShoppingMapper.to_response(shopping_list)


@router.get("/shopping-lists", response_model=List[ShoppingListResponse])
def get_shopping_lists(
    limit: int = Query(default=20, ge=1, le=100),
    service: ShoppingService = Depends(get_shopping_service),
):
    """
    Get shopping lists.

    Returns lists ordered by creation date (newest first).
    """
    return [ShoppingMapper.to_response(sl) for sl in service.get_shopping_lists(limit)]


@router.get("/shopping-lists/{list_id}", response_model=ShoppingListDetailResponse)
def get_shopping_list(
    list_id: int,
    service: ShoppingService = Depends(get_shopping_service),
):
    """Get a shopping list with all its items."""
    return ShoppingMapper.to_detail_response(service.get_shopping_list(list_id))


@router.delete("/shopping-lists/{list_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shopping_list(
    list_id: int,
    service: ShoppingService = Depends(get_shopping_service),
):
    """Delete a shopping list and its items."""
    service.delete_shopping_list(list_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/shopping-lists/{list_id}/items",
    response_model=ShoppingListItemResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_shopping_list_item(
    list_id: int,
    request: ShoppingListItemCreate,
    service: ShoppingService = Depends(get_shopping_service),
):
    """Add an item to a shopping list by hand."""
    item = service.add_item(list_id, request)
    return ShoppingMapper.item_to_response(item)


@router.patch("/shopping-lists/items/{item_id}", response_model=ShoppingListItemResponse)
def update_shopping_list_item(
    item_id: int,
    update: ShoppingListItemUpdate,
    service: ShoppingService = Depends(get_shopping_service),
):
    """
    Update a shopping list item.

    Only the fields sent are changed:
    - is_purchased: mark as bought / not bought
    - quantity: change or clear (null) the amount
    - notes: set or clear (null) a note
    """
    item = service.update_item(item_id, update)
    logger.info(f"Shopping list item {item_id} updated")
    return ShoppingMapper.item_to_response(item)
