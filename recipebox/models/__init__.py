"""
Models Package - Database Entities and API Schemas
"""

from recipebox.models.entities import Recipe, ShoppingList
from recipebox.models.schemas import (
    StructuredIngredient,
    ScaledIngredientResponse,
    RecipeInput,
    RecipeResponse,
    FavoriteResponse,
    ScaledRecipeResponse,
    ShoppingListCreate,
    ShoppingListResponse,
)

__all__ = [
    # ORM entities
    "Recipe",
    "ShoppingList",
    # Schemas
    "StructuredIngredient",
    "ScaledIngredientResponse",
    "RecipeInput",
    "RecipeResponse",
    "FavoriteResponse",
    "ScaledRecipeResponse",
    "ShoppingListCreate",
    "ShoppingListResponse",
]
