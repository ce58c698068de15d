"""
Shopping list models.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Float, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class ShoppingList(Base):
    """Shopping lists, either generated from a meal plan or standalone"""

    __tablename__ = "shopping_list"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    meal_plan_id = Column(
        Integer, ForeignKey("meal_plan.id", ondelete="SET NULL"), nullable=True
    )
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    items = relationship(
        "ShoppingListItem",
        back_populates="shopping_list",
        cascade="all, delete-orphan",
        order_by="ShoppingListItem.id",
    )


class ShoppingListItem(Base):
    """Individual items in a shopping list"""

    __tablename__ = "shopping_list_item"

    id = Column(Integer, primary_key=True, autoincrement=True)
    shopping_list_id = Column(
        Integer, ForeignKey("shopping_list.id", ondelete="CASCADE"), nullable=False
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredient.id", ondelete="SET NULL"), nullable=True
    )
    name = Column(Text, nullable=False)  # free-form for manually added items
    quantity = Column(Float)
    unit = Column(Text)
    category = Column(Text)
    is_purchased = Column(Boolean, nullable=False, default=False)
    notes = Column(Text)

    shopping_list = relationship("ShoppingList", back_populates="items")
