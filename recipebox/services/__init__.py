"""
Services layer - pure business logic, no HTTP dependencies.
"""

from recipebox.services.recipe_service import RECIPE_CATEGORIES, RecipeService
from recipebox.services.shopping_list_service import ShoppingListService, merge_ingredients
from recipebox.services.recipe_scaler import ScaledRecipe, scale_recipe

__all__ = [
    "RECIPE_CATEGORIES",
    "RecipeService",
    "ShoppingListService",
    "merge_ingredients",
    "ScaledRecipe",
    "scale_recipe",
]
