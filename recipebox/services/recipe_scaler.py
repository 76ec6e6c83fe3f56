"""
Recipe Scaler - recompute a recipe for a different number of servings.

Presentation only: scaling never writes to the database.

Quantities scale linearly and are rounded half-up to 2 decimals. Prep time
scales with the square root of the factor, since doubling a batch does not
double the work.
"""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from recipebox.errors import ValidationError
from recipebox.models import Recipe, StructuredIngredient
from recipebox.services.ingredients import from_document


# Decimal part (rounded to 2 places) -> display fraction
COMMON_FRACTIONS = {
    0.25: "1/4",
    0.33: "1/3",
    0.5: "1/2",
    0.67: "2/3",
    0.75: "3/4",
}


@dataclass
class ScaledRecipe:
    """A recipe view recomputed for target_servings."""
    recipe_id: str
    name: str
    category: str
    instructions: str
    original_servings: float
    target_servings: float
    scaling_factor: float
    prep_time: float
    ingredients: list[StructuredIngredient]


def round_half_up(value: float, places: int = 0) -> float:
    """Round like a person would: 0.125 -> 0.13, 2.5 -> 3."""
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Enough digits for any finite float
        ctx.prec = 330
        return float(Decimal(repr(value)).quantize(exponent, rounding=ROUND_HALF_UP))


def scaling_factor(original_servings: float, target_servings: float) -> float:
    errors = {}
    if not math.isfinite(original_servings) or original_servings <= 0:
        errors["original_servings"] = "Original servings must be a number greater than 0"
    if not math.isfinite(target_servings) or target_servings <= 0:
        errors["target_servings"] = "Target servings must be a number greater than 0"
    if errors:
        raise ValidationError("Invalid serving sizes", errors)

    factor = target_servings / original_servings
    if not math.isfinite(factor) or factor <= 0:
        raise ValidationError(
            "Invalid serving sizes",
            {"target_servings": "Scaling factor is out of range"},
        )
    return factor


def scale_ingredient(ingredient: StructuredIngredient, factor: float) -> StructuredIngredient:
    if factor == 1:
        return ingredient.model_copy()
    quantity = ingredient.quantity * factor
    if not math.isfinite(quantity):
        raise ValidationError(
            "Invalid serving sizes",
            {"target_servings": f"Scaled quantity of {ingredient.ingredient} is out of range"},
        )
    return ingredient.model_copy(update={"quantity": round_half_up(quantity, 2)})


def scale_prep_time(prep_time: float, factor: float) -> float:
    if factor == 1:
        return prep_time
    scaled = prep_time * math.sqrt(factor)
    if not math.isfinite(scaled):
        raise ValidationError(
            "Invalid serving sizes",
            {"target_servings": "Scaled prep time is out of range"},
        )
    return round_half_up(scaled)


def scale_recipe(
    recipe: Recipe,
    original_servings: float,
    target_servings: float
) -> ScaledRecipe:
    """
    Scale a stored recipe.

    Raises:
        ValidationError: if either serving count is not a positive number,
            or the scaled values overflow
    """
    factor = scaling_factor(original_servings, target_servings)

    return ScaledRecipe(
        recipe_id=recipe.RecipeId,
        name=recipe.Name,
        category=recipe.Category,
        instructions=recipe.Instructions,
        original_servings=original_servings,
        target_servings=target_servings,
        scaling_factor=factor,
        prep_time=scale_prep_time(recipe.PrepTime, factor),
        ingredients=[
            scale_ingredient(i, factor) for i in from_document(recipe.Ingredients)
        ],
    )


def format_quantity(quantity: float, fractions: bool = True) -> str:
    """
    Render a quantity for display.

    Whole numbers print without decimals. With fractions enabled, common
    fractions print as 1/2, 1 1/2 and so on. Anything else prints with up
    to 2 decimals.
    """
    if quantity == int(quantity):
        return str(int(quantity))

    if fractions:
        whole = math.floor(quantity)
        fraction = COMMON_FRACTIONS.get(round(quantity - whole, 2))
        if fraction:
            return f"{whole} {fraction}" if whole > 0 else fraction

    return f"{quantity:.2f}".rstrip("0").rstrip(".")


def format_ingredient(ingredient: StructuredIngredient, fractions: bool = True) -> str:
    """e.g. '1 1/2 cup flour (sifted)'"""
    notes = f" ({ingredient.notes})" if ingredient.notes else ""
    quantity = format_quantity(ingredient.quantity, fractions=fractions)
    return f"{quantity} {ingredient.unit} {ingredient.ingredient}{notes}"
