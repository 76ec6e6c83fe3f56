"""
Recipes Controller

Handles all operations on the caller's recipes:
- Listing recipes with optional category / favorite filtering
- Getting, creating, updating and deleting a recipe
- Toggling the favorite flag
- Viewing a recipe scaled to another serving count (JSON or printable)

Every endpoint requires an authenticated user; the services layer checks
ownership and raises domain errors that recipebox.main turns into
responses.
"""

from fastapi import APIRouter, Depends, Query, Response
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from recipebox.auth import UserContext, get_current_user
from recipebox.database import get_db
from recipebox.models import (
    # ORM entities
    Recipe,
    # Schemas
    RecipeInput,
    RecipeResponse,
    FavoriteResponse,
    ScaledIngredientResponse,
    ScaledRecipeResponse,
)
from recipebox.services import RECIPE_CATEGORIES, RecipeService, scale_recipe
from recipebox.services.ingredients import from_document
from recipebox.services.recipe_scaler import format_ingredient
from recipebox.views import render_scaled_recipe

router = APIRouter(prefix="/recipes", tags=["recipes"])


def _to_response(recipe: Recipe) -> RecipeResponse:
    return RecipeResponse(
        id=recipe.RecipeId,
        name=recipe.Name,
        ingredients=from_document(recipe.Ingredients),
        instructions=recipe.Instructions,
        prep_time=recipe.PrepTime,
        category=recipe.Category,
        user_id=recipe.UserId,
        created_at=recipe.CreatedAt,
        updated_at=recipe.UpdatedAt,
        is_favorite=recipe.is_favorite
    )


@router.get("", response_model=list[RecipeResponse])
def list_recipes(
    category: str | None = None,
    favorites_only: bool = False,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    List the caller's recipes, newest first.

    Query Parameters:
    - category: Filter by category (exact match)
    - favorites_only: Only return favorites
    """
    recipes = RecipeService(db).list_recipes(
        user.user_id, category=category, favorites_only=favorites_only
    )
    return [_to_response(r) for r in recipes]


@router.get("/categories", response_model=list[str])
def list_categories():
    """The categories a recipe may be filed under."""
    return list(RECIPE_CATEGORIES)


@router.get("/{recipe_id}", response_model=RecipeResponse)
def get_recipe(
    recipe_id: str,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a single recipe."""
    return _to_response(RecipeService(db).get_recipe(user.user_id, recipe_id))


@router.post("", response_model=RecipeResponse, status_code=201)
def create_recipe(
    recipe_data: RecipeInput,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Create a new recipe.

    Ingredients missing a name or unit, or with a non-positive quantity,
    are dropped. At least one valid ingredient must remain.
    """
    service = RecipeService(db)
    recipe_id = service.create_recipe(user.user_id, recipe_data)
    return _to_response(service.get_recipe(user.user_id, recipe_id))


@router.put("/{recipe_id}", response_model=RecipeResponse)
def update_recipe(
    recipe_id: str,
    recipe_data: RecipeInput,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Replace a recipe's content. Favorite flag and creation time are kept."""
    recipe = RecipeService(db).update_recipe(user.user_id, recipe_id, recipe_data)
    return _to_response(recipe)


@router.post("/{recipe_id}/favorite", response_model=FavoriteResponse)
def toggle_favorite(
    recipe_id: str,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Flip the favorite flag on a recipe."""
    is_favorite = RecipeService(db).toggle_favorite(user.user_id, recipe_id)
    return FavoriteResponse(id=recipe_id, is_favorite=is_favorite)


@router.delete("/{recipe_id}", status_code=204)
def delete_recipe(
    recipe_id: str,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Delete a recipe.

    Shopping lists built from it keep their copied ingredients.
    """
    RecipeService(db).delete_recipe(user.user_id, recipe_id)
    return Response(status_code=204)


@router.get("/{recipe_id}/scaled", response_model=ScaledRecipeResponse)
def get_scaled_recipe(
    recipe_id: str,
    original_servings: float = Query(2, description="Servings the recipe makes"),
    target_servings: float = Query(4, description="Servings wanted"),
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    View a recipe scaled to a different number of servings.

    Nothing is saved; the stored recipe is unchanged.
    """
    recipe = RecipeService(db).get_recipe(user.user_id, recipe_id)
    scaled = scale_recipe(recipe, original_servings, target_servings)

    return ScaledRecipeResponse(
        id=scaled.recipe_id,
        name=scaled.name,
        category=scaled.category,
        instructions=scaled.instructions,
        original_servings=scaled.original_servings,
        target_servings=scaled.target_servings,
        scaling_factor=scaled.scaling_factor,
        prep_time=scaled.prep_time,
        ingredients=[
            ScaledIngredientResponse(**i.model_dump(), display=format_ingredient(i))
            for i in scaled.ingredients
        ]
    )


@router.get("/{recipe_id}/scaled/print", response_class=HTMLResponse)
def print_scaled_recipe(
    recipe_id: str,
    original_servings: float = Query(2, description="Servings the recipe makes"),
    target_servings: float = Query(4, description="Servings wanted"),
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Printable HTML page for a scaled recipe."""
    recipe = RecipeService(db).get_recipe(user.user_id, recipe_id)
    scaled = scale_recipe(recipe, original_servings, target_servings)
    return HTMLResponse(render_scaled_recipe(scaled))
