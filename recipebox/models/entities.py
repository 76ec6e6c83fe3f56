"""
SQLAlchemy ORM Entity Models

These models represent the database tables for the recipe box.

Database Design Rationale:
- Recipes and shopping lists are self-contained documents; structured
  parts (ingredient lists, recipe id lists) are stored as JSON columns
- Every row carries the owning UserId, indexed for per-user listing
- Shopping lists copy their merged ingredients instead of referencing
  recipes, so deleting a recipe never touches a list

Table Relationships:
    Recipe        (no foreign keys)
    ShoppingList  ──> RecipeIds (JSON snapshot, not a foreign key)
"""

import uuid

from sqlalchemy import Boolean, Column, DateTime, Float, JSON, String, Text

from recipebox.database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


class Recipe(Base):
    """
    A user's recipe, the central entity in the domain model.

    Ingredients is a JSON list of {quantity, unit, ingredient, notes?}
    objects kept in the order the user entered them.
    """
    __tablename__ = "Recipes"

    RecipeId = Column(String(32), primary_key=True, default=_new_id)
    Name = Column(String(200), nullable=False)
    Ingredients = Column(JSON, nullable=False, default=list)
    Instructions = Column(Text, nullable=False)
    PrepTime = Column(Float, nullable=False)          # Minutes
    Category = Column(String(100), nullable=False)    # e.g., "Dinner", "Dessert"
    UserId = Column(String(100), nullable=False, index=True)
    CreatedAt = Column(DateTime, nullable=False)
    UpdatedAt = Column(DateTime, nullable=False)
    IsFavorite = Column(Boolean, nullable=True, default=False)

    @property
    def is_favorite(self) -> bool:
        """Favorite flag, treating a missing value as False."""
        return bool(self.IsFavorite)


class ShoppingList(Base):
    """
    A frozen shopping list built from one or more recipes.

    Ingredients holds the merged snapshot taken at creation time;
    RecipeIds records which recipes it was built from.
    """
    __tablename__ = "ShoppingLists"

    ShoppingListId = Column(String(32), primary_key=True, default=_new_id)
    Name = Column(String(200), nullable=False)
    RecipeIds = Column(JSON, nullable=False, default=list)
    Ingredients = Column(JSON, nullable=False, default=list)
    UserId = Column(String(100), nullable=False, index=True)
    CreatedAt = Column(DateTime, nullable=False)
    UpdatedAt = Column(DateTime, nullable=False)
