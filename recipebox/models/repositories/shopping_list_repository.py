"""
Shopping List Repository - Data access for shopping list operations.

Shopping lists are only ever created and deleted; there is no update path.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recipebox.models.entities import Recipe, ShoppingList


class ShoppingListRepository:
    """Repository for shopping list database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    # ==========================================
    # Shopping List CRUD
    # ==========================================

    def create(self, shopping_list: ShoppingList) -> ShoppingList:
        """Insert a fully built shopping list in one commit."""
        self.db.add(shopping_list)
        self._commit()
        self.db.refresh(shopping_list)
        return shopping_list

    def get_by_id(self, shopping_list_id: str) -> Optional[ShoppingList]:
        """Get a shopping list by ID."""
        return self.db.get(ShoppingList, shopping_list_id)

    def get_all_for_user(self, user_id: str) -> list[ShoppingList]:
        """
        Get all shopping lists for a specific user, newest first.

        Args:
            user_id: The identity provider subject of the owner
        """
        return self.db.query(ShoppingList).filter(
            ShoppingList.UserId == user_id
        ).order_by(ShoppingList.CreatedAt.desc()).all()

    def delete(self, shopping_list: ShoppingList) -> None:
        """Delete a shopping list."""
        self.db.delete(shopping_list)
        self._commit()

    # ==========================================
    # Recipe Lookups
    # ==========================================

    def get_recipes(self, recipe_ids: list[str]) -> list[Optional[Recipe]]:
        """
        Fetch recipes for the given IDs, preserving order.

        Missing recipes come back as None in their position.
        """
        found = {}
        if recipe_ids:
            rows = self.db.query(Recipe).filter(
                Recipe.RecipeId.in_(list(dict.fromkeys(recipe_ids)))
            ).all()
            found = {r.RecipeId: r for r in rows}
        return [found.get(recipe_id) for recipe_id in recipe_ids]
