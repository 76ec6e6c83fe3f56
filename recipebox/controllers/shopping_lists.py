"""
Shopping Lists Controller

Shopping lists are created from a set of the caller's recipes in a
single request and can then be viewed, printed or deleted. There is no
edit endpoint: a list is a snapshot.
"""

from fastapi import APIRouter, Depends, Response
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from recipebox.auth import UserContext, get_current_user
from recipebox.database import get_db
from recipebox.models import ShoppingList, ShoppingListCreate, ShoppingListResponse
from recipebox.services import ShoppingListService
from recipebox.services.ingredients import from_document
from recipebox.views import render_shopping_list

router = APIRouter(prefix="/shopping-lists", tags=["shopping-lists"])


def _to_response(shopping_list: ShoppingList) -> ShoppingListResponse:
    return ShoppingListResponse(
        id=shopping_list.ShoppingListId,
        name=shopping_list.Name,
        recipe_ids=shopping_list.RecipeIds or [],
        ingredients=from_document(shopping_list.Ingredients),
        user_id=shopping_list.UserId,
        created_at=shopping_list.CreatedAt,
        updated_at=shopping_list.UpdatedAt
    )


@router.get("", response_model=list[ShoppingListResponse])
def list_shopping_lists(
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the caller's shopping lists, newest first."""
    lists = ShoppingListService(db).list_shopping_lists(user.user_id)
    return [_to_response(sl) for sl in lists]


@router.post("", response_model=ShoppingListResponse, status_code=201)
def create_shopping_list(
    request: ShoppingListCreate,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Build a shopping list from recipes.

    Ingredients with the same name and unit (ignoring case and
    surrounding spaces) are combined into one line with summed quantity.
    """
    shopping_list = ShoppingListService(db).create_shopping_list(
        user.user_id, request.name, request.recipe_ids
    )
    return _to_response(shopping_list)


@router.get("/{shopping_list_id}", response_model=ShoppingListResponse)
def get_shopping_list(
    shopping_list_id: str,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Get a single shopping list."""
    service = ShoppingListService(db)
    return _to_response(service.get_shopping_list(user.user_id, shopping_list_id))


@router.get("/{shopping_list_id}/print", response_class=HTMLResponse)
def print_shopping_list(
    shopping_list_id: str,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Printable checklist version of a shopping list."""
    service = ShoppingListService(db)
    shopping_list = service.get_shopping_list(user.user_id, shopping_list_id)
    recipe_names = service.source_recipe_names(user.user_id, shopping_list)
    return HTMLResponse(render_shopping_list(shopping_list, recipe_names))


@router.delete("/{shopping_list_id}", status_code=204)
def delete_shopping_list(
    shopping_list_id: str,
    user: UserContext = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a shopping list."""
    ShoppingListService(db).delete_shopping_list(user.user_id, shopping_list_id)
    return Response(status_code=204)
