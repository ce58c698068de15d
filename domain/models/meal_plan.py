"""
Meal planning models.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.enums import MealType
from domain.models.database import Base


class MealPlan(Base):
    """Meal plans spanning a date range"""

    __tablename__ = "meal_plan"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    start_date = Column(TIMESTAMP(timezone=True), nullable=False)
    end_date = Column(TIMESTAMP(timezone=True), nullable=False)
    description = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    entries = relationship(
        "MealPlanEntry",
        back_populates="plan",
        cascade="all, delete-orphan",
        order_by="MealPlanEntry.id",
    )


class MealPlanEntry(Base):
    """A recipe scheduled for a date and meal slot at a serving count"""

    __tablename__ = "meal_plan_entry"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_plan_id = Column(
        Integer, ForeignKey("meal_plan.id", ondelete="CASCADE"), nullable=False
    )
    recipe_id = Column(
        Integer, ForeignKey("recipe.id", ondelete="CASCADE"), nullable=False
    )
    date = Column(TIMESTAMP(timezone=True), nullable=False)
    meal_type = Column(
        Enum(MealType, name="meal_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    servings = Column(Integer, nullable=False)
    notes = Column(Text)

    plan = relationship("MealPlan", back_populates="entries")
