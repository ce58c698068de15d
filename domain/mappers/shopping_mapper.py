"""
Shopping list domain mappers.
Handles transformation between ORM models and DTOs for shopping-related entities.
"""

from domain.models import ShoppingList, ShoppingListItem
from domain.schemas.shopping_schemas import (
    ShoppingListResponse,
    ShoppingListDetailResponse,
    ShoppingListItemResponse,
)


class ShoppingMapper:
    """Mapper for shopping list transformations."""

    @staticmethod
    def item_to_response(item: ShoppingListItem) -> ShoppingListItemResponse:
        return ShoppingListItemResponse(
            id=item.id,
            shopping_list_id=item.shopping_list_id,
            ingredient_id=item.ingredient_id,
            name=item.name,
            quantity=float(item.quantity) if item.quantity is not None else None,
            unit=item.unit,
            category=item.category,
            is_purchased=bool(item.is_purchased),
            notes=item.notes,
        )

    @staticmethod
    def to_response(shopping_list: ShoppingList) -> ShoppingListResponse:
        """Convert ORM ShoppingList to metadata-only ShoppingListResponse DTO."""
        return ShoppingListResponse(
            id=shopping_list.id,
            name=shopping_list.name,
            meal_plan_id=shopping_list.meal_plan_id,
            created_at=shopping_list.created_at,
            updated_at=shopping_list.updated_at,
        )

    @staticmethod
    def to_detail_response(shopping_list: ShoppingList) -> ShoppingListDetailResponse:
        """
        Convert ORM ShoppingList to ShoppingListDetailResponse DTO.

        Args:
            shopping_list: ShoppingList ORM instance with items loaded

        Returns:
            ShoppingListDetailResponse DTO with all list data
        """
        return ShoppingListDetailResponse(
            id=shopping_list.id,
            name=shopping_list.name,
            meal_plan_id=shopping_list.meal_plan_id,
            created_at=shopping_list.created_at,
            updated_at=shopping_list.updated_at,
            items=[ShoppingMapper.item_to_response(item) for item in shopping_list.items],
        )
