"""
Shopping List Repository - Data access layer for shopping list operations
"""

import logging
from typing import List, Optional, Sequence
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.exceptions import StoreFailureError
from repositories.base import BaseRepository
from domain.models import ShoppingList, ShoppingListItem

logger = logging.getLogger("pantryplan.repositories.shopping")


class ShoppingListRepository(BaseRepository[ShoppingList]):
    """Repository for shopping list data access"""

    def __init__(self, db: Session):
        super().__init__(db, ShoppingList)

    def get_by_id(self, list_id: int) -> Optional[ShoppingList]:
        """Get shopping list by ID"""
        return self.db.query(ShoppingList).filter(ShoppingList.id == list_id).first()

    def get_with_items(self, list_id: int) -> Optional[ShoppingList]:
        """Get shopping list by ID with its items loaded"""
        return (
            self.db.query(ShoppingList)
            .options(selectinload(ShoppingList.items))
            .filter(ShoppingList.id == list_id)
            .first()
        )

    def get_recent(self, limit: int = 20) -> List[ShoppingList]:
        """Get shopping lists, newest first"""
        return (
            self.db.query(ShoppingList)
            .order_by(ShoppingList.created_at.desc(), ShoppingList.id.desc())
            .limit(limit)
            .all()
        )

    def create_with_items(
        self, shopping_list: ShoppingList, items: Sequence[ShoppingListItem]
    ) -> ShoppingList:
        """
        Persist a shopping list together with its items in one transaction.

        Either the list and every item are committed, or the session is
        rolled back and nothing is visible.

        Raises:
            StoreFailureError: If the commit fails
        """
        try:
            shopping_list.items.extend(items)
            self.db.add(shopping_list)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to create shopping list '{shopping_list.name}': {exc}")
            raise StoreFailureError(
                "Failed to create shopping list",
                details={"name": shopping_list.name, "error": str(exc)},
            ) from exc

        self.db.refresh(shopping_list)
        return shopping_list


class ShoppingListItemRepository(BaseRepository[ShoppingListItem]):
    """Repository for shopping list item data access"""

    def __init__(self, db: Session):
        super().__init__(db, ShoppingListItem)

    def get_by_id(self, item_id: int) -> Optional[ShoppingListItem]:
        """Get shopping list item by ID"""
        return (
            self.db.query(ShoppingListItem)
            .filter(ShoppingListItem.id == item_id)
            .first()
        )

