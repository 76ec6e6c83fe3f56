"""
Repositories - Data access layer for database operations.
"""

from recipebox.models.repositories.recipe_repository import RecipeRepository
from recipebox.models.repositories.shopping_list_repository import ShoppingListRepository

__all__ = ["RecipeRepository", "ShoppingListRepository"]
