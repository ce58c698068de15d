"""
Meal Plan Repository - Data access layer for meal plan operations
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealPlan, MealPlanEntry


class MealPlanRepository(BaseRepository[MealPlan]):
    """Repository for meal plan data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealPlan)

    def get_by_id(self, plan_id: int) -> Optional[MealPlan]:
        """Get meal plan by ID"""
        return self.db.query(MealPlan).filter(MealPlan.id == plan_id).first()

    def entries_for(self, plan_id: int) -> List[MealPlanEntry]:
        """Get all scheduled entries of a plan, in insertion order"""
        return (
            self.db.query(MealPlanEntry)
            .filter(MealPlanEntry.meal_plan_id == plan_id)
            .order_by(MealPlanEntry.id)
            .all()
        )
