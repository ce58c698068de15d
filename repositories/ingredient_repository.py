"""
Ingredient Repository - Data access layer for the ingredient master table
"""

from typing import Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Ingredient


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient master data"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_by_id(self, ingredient_id: int) -> Optional[Ingredient]:
        """Get ingredient by ID"""
        return self.db.query(Ingredient).filter(Ingredient.id == ingredient_id).first()
