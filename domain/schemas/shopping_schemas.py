"""Pydantic schemas for shopping list operations."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class GenerateShoppingListRequest(BaseModel):
    """Request to generate a new shopping list from a meal plan."""

    name: str = Field(..., min_length=1, description="Display name for the new list")


class ShoppingListCreate(BaseModel):
    """Request to create a shopping list, optionally populated from a meal plan."""

    name: str = Field(..., min_length=1, description="Display name for the new list")
    meal_plan_id: Optional[int] = Field(
        default=None, description="Populate the list from this meal plan"
    )


class ShoppingListItemCreate(BaseModel):
    """Request to add an item to an existing shopping list by hand."""

    name: str = Field(..., min_length=1)
    ingredient_id: Optional[int] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = None
    category: Optional[str] = None
    notes: Optional[str] = None


class ShoppingListItemUpdate(BaseModel):
    """
    Partial update of a shopping list item.

    Only fields present in the request body are applied; an explicit null
    clears `quantity` or `notes`.
    """

    is_purchased: Optional[bool] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    notes: Optional[str] = None


class ShoppingListItemResponse(BaseModel):
    """Individual item in a shopping list."""

    id: int
    shopping_list_id: int
    ingredient_id: Optional[int] = None
    name: str
    quantity: Optional[float] = None
    unit: Optional[str] = None
    category: Optional[str] = None
    is_purchased: bool = False
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class ShoppingListResponse(BaseModel):
    """Shopping list metadata."""

    id: int
    name: str
    meal_plan_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ShoppingListDetailResponse(ShoppingListResponse):
    """Shopping list with its items."""

    items: List[ShoppingListItemResponse] = Field(default_factory=list)
