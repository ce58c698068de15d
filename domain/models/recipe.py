"""
Recipe models.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP, ForeignKey, Float, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.enums import Difficulty
from domain.models.database import Base


class Recipe(Base):
    """Recipes; ingredient quantities are declared relative to `servings`"""

    __tablename__ = "recipe"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text)
    instructions = Column(Text, nullable=False)  # JSON string of steps
    prep_time = Column(Integer)  # minutes
    cook_time = Column(Integer)  # minutes
    servings = Column(Integer)
    difficulty = Column(Enum(Difficulty, name="difficulty", values_callable=lambda e: [m.value for m in e]))
    cuisine = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    ingredients = relationship(
        "RecipeIngredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="RecipeIngredient.id",
    )

    def __repr__(self):
        return f"<Recipe(id={self.id}, title='{self.title}')>"


class RecipeIngredient(Base):
    """One ingredient requirement of a recipe"""

    __tablename__ = "recipe_ingredient"

    id = Column(Integer, primary_key=True, autoincrement=True)
    recipe_id = Column(
        Integer, ForeignKey("recipe.id", ondelete="CASCADE"), nullable=False
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredient.id", ondelete="CASCADE"), nullable=False
    )
    quantity = Column(Float, nullable=False)
    unit = Column(Text, nullable=False)
    notes = Column(Text)  # e.g. "finely chopped"

    recipe = relationship("Recipe", back_populates="ingredients")
