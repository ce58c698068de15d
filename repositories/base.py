"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

The Protocol classes describe the narrow store interfaces the shopping list
service consumes. The SQL repositories satisfy them, and so do in-memory
fakes in tests.
"""

import logging
from typing import Generic, TypeVar, Optional, Type, Protocol, Sequence, Any
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from abc import ABC

from app.exceptions import StoreFailureError

ModelType = TypeVar("ModelType")

logger = logging.getLogger("pantryplan.repositories")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.
    All repositories should inherit from this class.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Get entity by primary key"""
        return self.db.get(self.model, entity_id)

    def get(self, entity_id: int) -> Optional[ModelType]:
        """Store-interface alias for get_by_id()"""
        return self.get_by_id(entity_id)

    def create(self, entity: ModelType) -> ModelType:
        """Create new entity"""
        self.db.add(entity)
        self._commit(f"create {self.model.__name__}")
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Update existing entity"""
        self._commit(f"update {self.model.__name__}")
        self.db.refresh(entity)
        return entity

    def delete(self, entity_id: int) -> bool:
        """Delete entity by ID"""
        entity = self.get_by_id(entity_id)
        if entity:
            self.db.delete(entity)
            self._commit(f"delete {self.model.__name__}")
            return True
        return False

    def exists(self, entity_id: int) -> bool:
        """Check if entity exists"""
        return self.get_by_id(entity_id) is not None

    def _commit(self, action: str) -> None:
        """Commit the session, rolling back and raising StoreFailureError on failure."""
        try:
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to {action}: {exc}")
            raise StoreFailureError(
                f"Failed to {action}", details={"error": str(exc)}
            ) from exc


# ============================================================================
# Store interfaces consumed by the shopping list service
# ============================================================================


class MealPlanStore(Protocol):
    def exists(self, meal_plan_id: int) -> bool: ...

    def entries_for(self, meal_plan_id: int) -> Sequence[Any]:
        """Entries expose `recipe_id` and `servings`."""
        ...


class RecipeStore(Protocol):
    def get(self, recipe_id: int) -> Optional[Any]:
        """Recipes expose `servings` (nullable) and `ingredients`, whose lines
        expose `ingredient_id`, `quantity` and `unit`."""
        ...


class IngredientStore(Protocol):
    def get(self, ingredient_id: int) -> Optional[Any]:
        """Ingredients expose `name` and `category`."""
        ...


class ShoppingListStore(Protocol):
    def create_with_items(self, shopping_list: Any, items: Sequence[Any]) -> Any:
        """Persist the list and all its items together, or nothing."""
        ...
