"""
Shopping List Service - handles ingredient aggregation and list generation.

This service combines the ingredients of several recipes into a single
shopping list, handling:
- Duplicate ingredient consolidation (same name and unit, ignoring case)
- Quantity aggregation
- Notes concatenation

The resulting list is a snapshot: later edits to the source recipes do
not change it.
"""

import logging
from datetime import datetime, timezone
from typing import Iterable

from sqlalchemy.orm import Session

from recipebox.errors import NotFoundOrUnauthorized, ValidationError
from recipebox.models import ShoppingList, StructuredIngredient
from recipebox.models.repositories import ShoppingListRepository
from recipebox.services.ingredients import (
    from_document,
    merge_key,
    to_document,
    valid_ingredients,
)
from recipebox.services.recipe_service import NAME_MAX_LENGTH, require_user

logger = logging.getLogger(__name__)


def _join_notes(first: str | None, second: str | None) -> str | None:
    if first and second:
        return f"{first}, {second}"
    return first or second or None


def merge_ingredients(
    ingredient_lists: Iterable[list[StructuredIngredient]],
) -> list[StructuredIngredient]:
    """
    Merge several ingredient lists into one.

    Lists are walked in order. Entries sharing a merge key have their
    quantities summed and notes joined with ", ". The result keeps the
    order in which each key was first seen. Invalid entries are skipped.
    """
    combined: dict[tuple[str, str], StructuredIngredient] = {}

    for ingredients in ingredient_lists:
        for ingredient in valid_ingredients(ingredients):
            key = merge_key(ingredient)
            existing = combined.get(key)

            if existing is None:
                combined[key] = ingredient
                continue

            combined[key] = existing.model_copy(update={
                "quantity": existing.quantity + ingredient.quantity,
                "notes": _join_notes(existing.notes, ingredient.notes),
            })

    return list(combined.values())


class ShoppingListService:
    """Service for shopping list generation and management."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ShoppingListRepository(db)

    def create_shopping_list(
        self,
        user_id: str,
        name: str,
        recipe_ids: list[str]
    ) -> ShoppingList:
        """
        Create a shopping list from recipes in one operation.

        All referenced recipes must exist and belong to the user.
        """
        require_user(user_id)

        errors: dict[str, str] = {}
        name = (name or "").strip()
        if not name:
            errors["name"] = "Shopping list name is required"
        elif len(name) > NAME_MAX_LENGTH:
            errors["name"] = f"Shopping list name must be at most {NAME_MAX_LENGTH} characters"
        if not recipe_ids:
            errors["recipe_ids"] = "Select at least one recipe"
        if errors:
            raise ValidationError("Invalid shopping list", errors)

        recipes = self.repo.get_recipes(recipe_ids)
        if any(r is None or r.UserId != user_id for r in recipes):
            logger.warning(
                f"User {user_id} requested a shopping list with missing or foreign recipes"
            )
            raise ValidationError(
                "Some recipes not found or unauthorized",
                {"recipe_ids": "Some recipes not found or unauthorized"},
            )

        merged = merge_ingredients(from_document(r.Ingredients) for r in recipes)

        now = datetime.now(timezone.utc)
        shopping_list = self.repo.create(ShoppingList(
            Name=name,
            RecipeIds=list(recipe_ids),
            Ingredients=to_document(merged),
            UserId=user_id,
            CreatedAt=now,
            UpdatedAt=now,
        ))
        logger.info(
            f"User {user_id} created shopping list {shopping_list.ShoppingListId} "
            f"with {len(merged)} items from {len(recipe_ids)} recipes"
        )
        return shopping_list

    def list_shopping_lists(self, user_id: str) -> list[ShoppingList]:
        """Get the user's shopping lists, newest first."""
        require_user(user_id)
        return self.repo.get_all_for_user(user_id)

    def get_shopping_list(self, user_id: str, shopping_list_id: str) -> ShoppingList:
        """Get one of the user's shopping lists."""
        require_user(user_id)
        shopping_list = self.repo.get_by_id(shopping_list_id)
        if shopping_list is None or shopping_list.UserId != user_id:
            logger.warning(f"Shopping list {shopping_list_id} not found for user {user_id}")
            raise NotFoundOrUnauthorized("Shopping list not found")
        return shopping_list

    def delete_shopping_list(self, user_id: str, shopping_list_id: str) -> None:
        """Delete one of the user's shopping lists."""
        shopping_list = self.get_shopping_list(user_id, shopping_list_id)
        self.repo.delete(shopping_list)
        logger.info(f"User {user_id} deleted shopping list {shopping_list_id}")

    def source_recipe_names(self, user_id: str, shopping_list: ShoppingList) -> list[str]:
        """
        Names of the recipes a list was built from.

        Recipes deleted since, or no longer owned by the user, are skipped.
        """
        recipes = self.repo.get_recipes(shopping_list.RecipeIds or [])
        return [r.Name for r in recipes if r is not None and r.UserId == user_id]
