"""
Structured ingredient helpers shared by the recipe and shopping list services.
"""

import math

from recipebox.models.schemas import StructuredIngredient


def is_valid_ingredient(ingredient: StructuredIngredient) -> bool:
    """An ingredient needs a positive quantity, a unit and a name."""
    return (
        math.isfinite(ingredient.quantity)
        and ingredient.quantity > 0
        and bool(ingredient.unit.strip())
        and bool(ingredient.ingredient.strip())
    )


def clean_ingredient(ingredient: StructuredIngredient) -> StructuredIngredient:
    """Trim text fields; blank notes become absent."""
    notes = (ingredient.notes or "").strip()
    return StructuredIngredient(
        quantity=ingredient.quantity,
        unit=ingredient.unit.strip(),
        ingredient=ingredient.ingredient.strip(),
        notes=notes or None,
    )


def valid_ingredients(
    ingredients: list[StructuredIngredient],
) -> list[StructuredIngredient]:
    """Drop invalid entries and clean the rest, keeping order."""
    return [clean_ingredient(i) for i in ingredients if is_valid_ingredient(i)]


def merge_key(ingredient: StructuredIngredient) -> tuple[str, str]:
    """Case-insensitive, trimmed (name, unit) pair identifying a line item."""
    return (ingredient.ingredient.strip().lower(), ingredient.unit.strip().lower())


def to_document(ingredients: list[StructuredIngredient]) -> list[dict]:
    """Serialize ingredients for a JSON column."""
    return [i.model_dump(exclude_none=True) for i in ingredients]


def from_document(documents: list[dict] | None) -> list[StructuredIngredient]:
    """Load ingredients from a JSON column."""
    return [StructuredIngredient(**doc) for doc in documents or []]
