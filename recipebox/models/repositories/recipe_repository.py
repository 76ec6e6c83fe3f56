"""
Recipe Repository - Data access for recipe operations.

This repository handles all database operations related to recipes.
It knows nothing about ownership rules or validation; those live in
the services layer.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recipebox.models.entities import Recipe


class RecipeRepository:
    """Repository for recipe database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def _commit(self) -> None:
        """Commit, rolling back on failure so no partial state remains."""
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def get_by_id(self, recipe_id: str) -> Optional[Recipe]:
        """Get a recipe by primary key."""
        return self.db.get(Recipe, recipe_id)

    def get_all_for_user(
        self,
        user_id: str,
        category: Optional[str] = None,
        favorites_only: bool = False
    ) -> list[Recipe]:
        """
        Get all recipes owned by a user, newest first.

        Args:
            user_id: The identity provider subject of the owner
            category: Optional exact category filter
            favorites_only: Only return recipes marked as favorite
        """
        query = self.db.query(Recipe).filter(Recipe.UserId == user_id)

        if category:
            query = query.filter(Recipe.Category == category)
        if favorites_only:
            query = query.filter(Recipe.IsFavorite.is_(True))

        return query.order_by(Recipe.CreatedAt.desc()).all()

    def add(self, recipe: Recipe) -> Recipe:
        """Insert a new recipe."""
        self.db.add(recipe)
        self._commit()
        self.db.refresh(recipe)
        return recipe

    def save(self, recipe: Recipe) -> Recipe:
        """Persist changes made to a loaded recipe."""
        self._commit()
        self.db.refresh(recipe)
        return recipe

    def delete(self, recipe: Recipe) -> None:
        """Delete a recipe. Shopping lists are not affected."""
        self.db.delete(recipe)
        self._commit()
