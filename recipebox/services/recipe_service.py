"""
Recipe Service - ownership-checked recipe CRUD.

Every operation takes the caller's user id explicitly. A recipe that does
not exist and a recipe owned by someone else look the same to the caller.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from recipebox.errors import AuthenticationError, NotFoundOrUnauthorized, ValidationError
from recipebox.models import Recipe, RecipeInput
from recipebox.models.repositories import RecipeRepository
from recipebox.services.ingredients import to_document, valid_ingredients

logger = logging.getLogger(__name__)


RECIPE_CATEGORIES = (
    "Breakfast",
    "Lunch",
    "Dinner",
    "Appetizer",
    "Snack",
    "Dessert",
    "Drink",
    "Side Dish",
    "Soup",
    "Salad",
    "Other",
)

# Matches the Name column size on Recipes and ShoppingLists
NAME_MAX_LENGTH = 200


def require_user(user_id: Optional[str]) -> str:
    """Reject calls that carry no authenticated identity."""
    if not user_id:
        raise AuthenticationError()
    return user_id


def validate_recipe_input(data: RecipeInput) -> dict:
    """
    Validate and clean recipe fields.

    Returns the trimmed column values ready to assign to a Recipe.

    Raises:
        ValidationError: listing every invalid field
    """
    errors: dict[str, str] = {}

    name = data.name.strip()
    instructions = data.instructions.strip()
    category = data.category.strip()
    ingredients = valid_ingredients(data.ingredients)

    if not name:
        errors["name"] = "Recipe name is required"
    elif len(name) > NAME_MAX_LENGTH:
        errors["name"] = f"Recipe name must be at most {NAME_MAX_LENGTH} characters"

    if not category:
        errors["category"] = "Category is required"
    elif category not in RECIPE_CATEGORIES:
        errors["category"] = f"Category must be one of: {', '.join(RECIPE_CATEGORIES)}"

    if not math.isfinite(data.prep_time) or data.prep_time <= 0:
        errors["prep_time"] = "Prep time must be greater than 0"

    if not instructions:
        errors["instructions"] = "Instructions are required"

    if not ingredients:
        errors["ingredients"] = "At least one valid ingredient is required"

    if errors:
        raise ValidationError("Invalid recipe", errors)

    return {
        "Name": name,
        "Ingredients": to_document(ingredients),
        "Instructions": instructions,
        "PrepTime": data.prep_time,
        "Category": category,
    }


class RecipeService:
    """Service for the user's recipe collection."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = RecipeRepository(db)

    def list_recipes(
        self,
        user_id: str,
        category: Optional[str] = None,
        favorites_only: bool = False
    ) -> list[Recipe]:
        """
        Get all recipes owned by the user.

        A database failure here is logged and an empty list returned so the
        recipe browser still renders.
        """
        require_user(user_id)
        try:
            return self.repo.get_all_for_user(
                user_id, category=category, favorites_only=favorites_only
            )
        except SQLAlchemyError:
            logger.exception(f"Failed to list recipes for user {user_id}")
            self.db.rollback()
            return []

    def get_recipe(self, user_id: str, recipe_id: str) -> Recipe:
        """Get one of the user's recipes."""
        require_user(user_id)
        recipe = self.repo.get_by_id(recipe_id)
        if recipe is None or recipe.UserId != user_id:
            logger.warning(f"Recipe {recipe_id} not found for user {user_id}")
            raise NotFoundOrUnauthorized("Recipe not found")
        return recipe

    def create_recipe(self, user_id: str, data: RecipeInput) -> str:
        """
        Create a recipe and return its ID.

        Invalid ingredients are dropped before saving; at least one valid
        ingredient must remain.
        """
        require_user(user_id)
        fields = validate_recipe_input(data)

        now = datetime.now(timezone.utc)
        recipe = Recipe(
            **fields,
            UserId=user_id,
            CreatedAt=now,
            UpdatedAt=now,
            IsFavorite=False,
        )
        recipe = self.repo.add(recipe)
        logger.info(f"User {user_id} created recipe {recipe.RecipeId}")
        return recipe.RecipeId

    def update_recipe(self, user_id: str, recipe_id: str, data: RecipeInput) -> Recipe:
        """Replace a recipe's content. CreatedAt and IsFavorite are kept."""
        recipe = self.get_recipe(user_id, recipe_id)
        fields = validate_recipe_input(data)

        for column, value in fields.items():
            setattr(recipe, column, value)
        recipe.UpdatedAt = datetime.now(timezone.utc)

        recipe = self.repo.save(recipe)
        logger.info(f"User {user_id} updated recipe {recipe_id}")
        return recipe

    def toggle_favorite(self, user_id: str, recipe_id: str) -> bool:
        """Flip the favorite flag. Returns the new value."""
        recipe = self.get_recipe(user_id, recipe_id)

        recipe.IsFavorite = not recipe.is_favorite
        recipe.UpdatedAt = datetime.now(timezone.utc)

        recipe = self.repo.save(recipe)
        logger.info(f"User {user_id} set favorite={recipe.IsFavorite} on recipe {recipe_id}")
        return recipe.IsFavorite

    def delete_recipe(self, user_id: str, recipe_id: str) -> None:
        """Delete a recipe. Existing shopping lists keep their snapshot."""
        recipe = self.get_recipe(user_id, recipe_id)
        self.repo.delete(recipe)
        logger.info(f"User {user_id} deleted recipe {recipe_id}")
