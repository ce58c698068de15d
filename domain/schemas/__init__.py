"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.shopping_schemas import (
    GenerateShoppingListRequest,
    ShoppingListCreate,
    ShoppingListItemCreate,
    ShoppingListItemUpdate,
    ShoppingListItemResponse,
    ShoppingListResponse,
    ShoppingListDetailResponse,
)

__all__ = [
    "GenerateShoppingListRequest",
    "ShoppingListCreate",
    "ShoppingListItemCreate",
    "ShoppingListItemUpdate",
    "ShoppingListItemResponse",
    "ShoppingListResponse",
    "ShoppingListDetailResponse",
]
