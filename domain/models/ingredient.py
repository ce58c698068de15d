"""
Ingredient model - Master ingredient table.
Single source of truth for ingredient names and categories.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class Ingredient(Base):
    """
    Master ingredient table.

    Recipe lines and shopping list items reference ingredients by id; the
    display name and category shown on a shopping list come from here.
    """

    __tablename__ = "ingredient"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    category = Column(Text)
    unit = Column(Text, nullable=False)  # default unit for this ingredient

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.name}')>"
