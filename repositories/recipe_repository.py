"""
Recipe Repository - Data access layer for recipe operations
"""

from typing import Optional
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Recipe


class RecipeRepository(BaseRepository[Recipe]):
    """Repository for recipes and their ingredient lines"""

    def __init__(self, db: Session):
        super().__init__(db, Recipe)

    def get_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get recipe by ID with its ingredient lines loaded"""
        return (
            self.db.query(Recipe)
            .options(selectinload(Recipe.ingredients))
            .filter(Recipe.id == recipe_id)
            .first()
        )
