import math

import pytest

from recipebox.errors import ValidationError
from recipebox.models import Recipe
from recipebox.services import scale_recipe
from recipebox.services.ingredients import to_document
from recipebox.services.recipe_scaler import (
    format_ingredient,
    format_quantity,
    round_half_up,
    scale_ingredient,
)

from conftest import ingredient


def make_recipe(prep_time=30, ingredients=None) -> Recipe:
    ingredients = ingredients or [ingredient(2, "cup", "flour")]
    return Recipe(
        RecipeId="abc123",
        Name="Bread",
        Ingredients=to_document(ingredients),
        Instructions="Knead.\nBake.",
        PrepTime=prep_time,
        Category="Other",
        UserId="alice",
    )


def test_scale_ingredient_by_one_and_a_half() -> None:
    got = scale_ingredient(ingredient(2, "cup", "flour"), 1.5)
    assert got.quantity == 3
    assert got.unit == "cup"
    assert got.ingredient == "flour"


def test_scale_recipe_prep_time_is_sub_linear() -> None:
    scaled = scale_recipe(make_recipe(prep_time=30), 2, 4)
    assert scaled.scaling_factor == 2
    assert scaled.prep_time == 42
    assert scaled.ingredients[0].quantity == 4


def test_scale_by_one_is_identity() -> None:
    items = [ingredient(0.333, "cup", "oil"), ingredient(2, "whole", "egg", "large")]
    recipe = make_recipe(prep_time=12.5, ingredients=items)

    scaled = scale_recipe(recipe, 4, 4)

    assert scaled.prep_time == 12.5
    assert scaled.ingredients == items


def test_scale_rounds_half_up_to_two_places() -> None:
    scaled = scale_recipe(make_recipe(ingredients=[ingredient(1, "tsp", "salt")]), 3, 1)
    assert scaled.ingredients[0].quantity == 0.33


def test_scale_does_not_touch_stored_recipe() -> None:
    recipe = make_recipe()
    before = list(recipe.Ingredients)
    scale_recipe(recipe, 1, 10)
    assert recipe.Ingredients == before
    assert recipe.PrepTime == 30


@pytest.mark.parametrize("original,target", ((0, 4), (-2, 4), (2, 0)))
def test_scale_rejects_non_positive_servings(original, target) -> None:
    with pytest.raises(ValidationError):
        scale_recipe(make_recipe(), original, target)


@pytest.mark.parametrize(
    "original,target,field",
    (
        (math.nan, 4, "original_servings"),
        (2, math.nan, "target_servings"),
        (2, math.inf, "target_servings"),
        (-math.inf, 4, "original_servings"),
        (1e-300, 1e300, "target_servings"),
        (1e300, 1e-300, "target_servings"),
    ),
)
def test_scale_rejects_non_finite_servings_and_factors(original, target, field) -> None:
    with pytest.raises(ValidationError) as excinfo:
        scale_recipe(make_recipe(), original, target)
    assert field in excinfo.value.errors


def test_scale_rejects_overflowing_quantities() -> None:
    recipe = make_recipe(ingredients=[ingredient(1e300, "g", "sugar")])
    with pytest.raises(ValidationError):
        scale_recipe(recipe, 1e-10, 1e10)


def test_round_half_up_handles_large_values() -> None:
    assert round_half_up(1e300, 2) == 1e300


@pytest.mark.parametrize(
    "value,places,expected",
    (
        (2.5, 0, 3),
        (3.5, 0, 4),
        (0.125, 2, 0.13),
        (1.005, 2, 1.01),
        (42.426, 0, 42),
    ),
)
def test_round_half_up(value, places, expected) -> None:
    assert round_half_up(value, places) == expected


@pytest.mark.parametrize(
    "quantity,expected",
    (
        (3, "3"),
        (3.0, "3"),
        (0.5, "1/2"),
        (0.25, "1/4"),
        (0.33, "1/3"),
        (0.67, "2/3"),
        (1.5, "1 1/2"),
        (2.75, "2 3/4"),
        (2.33, "2 1/3"),
        (1.2, "1.2"),
        (0.13, "0.13"),
    ),
)
def test_format_quantity(quantity, expected) -> None:
    assert format_quantity(quantity) == expected


def test_format_quantity_without_fractions() -> None:
    assert format_quantity(1.5, fractions=False) == "1.5"


def test_format_ingredient_with_notes() -> None:
    got = format_ingredient(ingredient(1.5, "cup", "flour", "sifted"))
    assert got == "1 1/2 cup flour (sifted)"
