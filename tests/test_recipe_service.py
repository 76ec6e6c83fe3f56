import pytest
from sqlalchemy.exc import OperationalError

from recipebox.errors import AuthenticationError, NotFoundOrUnauthorized, ValidationError
from recipebox.models import Recipe
from recipebox.services import RecipeService
from recipebox.services.ingredients import from_document

from conftest import ALICE, BOB, ingredient, recipe_input


def test_create_then_list_returns_trimmed_fields(db) -> None:
    service = RecipeService(db)
    data = recipe_input(
        name="  Pancakes ",
        instructions=" Mix and fry. ",
        category=" Breakfast",
        ingredients=[ingredient(2, " cup ", " flour ", "  ")],
    )

    recipe_id = service.create_recipe(ALICE, data)
    recipes = service.list_recipes(ALICE)

    assert [r.RecipeId for r in recipes] == [recipe_id]
    recipe = recipes[0]
    assert recipe.Name == "Pancakes"
    assert recipe.Instructions == "Mix and fry."
    assert recipe.Category == "Breakfast"
    assert recipe.PrepTime == 30
    assert recipe.UserId == ALICE
    assert recipe.is_favorite is False
    assert recipe.CreatedAt == recipe.UpdatedAt
    assert from_document(recipe.Ingredients) == [ingredient(2, "cup", "flour")]


def test_create_filters_invalid_ingredients(db) -> None:
    service = RecipeService(db)
    data = recipe_input(ingredients=[
        ingredient(0, "cup", "sugar"),
        ingredient(1, "tsp", "salt"),
        ingredient(2, "", "eggs"),
    ])

    recipe = service.get_recipe(ALICE, service.create_recipe(ALICE, data))

    assert [i.ingredient for i in from_document(recipe.Ingredients)] == ["salt"]


def test_create_rejects_all_invalid_ingredients(db) -> None:
    data = recipe_input(ingredients=[ingredient(0, "cup", "flour"), ingredient(1, "cup", " ")])

    with pytest.raises(ValidationError) as excinfo:
        RecipeService(db).create_recipe(ALICE, data)

    assert "ingredients" in excinfo.value.errors
    assert db.query(Recipe).count() == 0


@pytest.mark.parametrize(
    "overrides,field",
    (
        ({"name": "   "}, "name"),
        ({"instructions": ""}, "instructions"),
        ({"prep_time": 0}, "prep_time"),
        ({"prep_time": -5}, "prep_time"),
        ({"category": ""}, "category"),
        ({"category": "Brunch"}, "category"),
        ({"name": "x" * 201}, "name"),
        ({"category": "x" * 101}, "category"),
    ),
)
def test_create_rejects_invalid_fields(db, overrides, field) -> None:
    with pytest.raises(ValidationError) as excinfo:
        RecipeService(db).create_recipe(ALICE, recipe_input(**overrides))
    assert field in excinfo.value.errors


def test_operations_require_identity(db) -> None:
    service = RecipeService(db)
    with pytest.raises(AuthenticationError):
        service.create_recipe("", recipe_input())
    with pytest.raises(AuthenticationError):
        service.list_recipes(None)


def test_update_keeps_created_at_and_favorite(db) -> None:
    service = RecipeService(db)
    recipe_id = service.create_recipe(ALICE, recipe_input())
    service.toggle_favorite(ALICE, recipe_id)
    created_at = service.get_recipe(ALICE, recipe_id).CreatedAt

    updated = service.update_recipe(
        ALICE, recipe_id, recipe_input(name="Waffles", prep_time=45, category="Dessert")
    )

    assert updated.Name == "Waffles"
    assert updated.PrepTime == 45
    assert updated.Category == "Dessert"
    assert updated.CreatedAt == created_at
    assert updated.UpdatedAt >= created_at
    assert updated.is_favorite is True


def test_update_revalidates(db) -> None:
    service = RecipeService(db)
    recipe_id = service.create_recipe(ALICE, recipe_input())

    with pytest.raises(ValidationError):
        service.update_recipe(ALICE, recipe_id, recipe_input(ingredients=[]))

    assert service.get_recipe(ALICE, recipe_id).Name == "Pancakes"


def test_toggle_favorite_is_an_involution(db) -> None:
    service = RecipeService(db)
    recipe_id = service.create_recipe(ALICE, recipe_input())

    assert service.toggle_favorite(ALICE, recipe_id) is True
    assert service.toggle_favorite(ALICE, recipe_id) is False
    assert service.get_recipe(ALICE, recipe_id).is_favorite is False


def test_toggle_favorite_treats_missing_flag_as_false(db) -> None:
    service = RecipeService(db)
    recipe_id = service.create_recipe(ALICE, recipe_input())
    recipe = service.get_recipe(ALICE, recipe_id)
    recipe.IsFavorite = None
    db.commit()

    assert service.list_recipes(ALICE)[0].is_favorite is False
    assert service.toggle_favorite(ALICE, recipe_id) is True


@pytest.mark.parametrize("operation", ("update", "toggle", "delete"))
def test_mutations_hide_foreign_and_missing_recipes(db, operation) -> None:
    service = RecipeService(db)
    recipe_id = service.create_recipe(ALICE, recipe_input())

    calls = {
        "update": lambda user, rid: service.update_recipe(user, rid, recipe_input()),
        "toggle": service.toggle_favorite,
        "delete": service.delete_recipe,
    }
    call = calls[operation]

    with pytest.raises(NotFoundOrUnauthorized):
        call(BOB, recipe_id)
    with pytest.raises(NotFoundOrUnauthorized):
        call(ALICE, "does-not-exist")

    # Alice's recipe is untouched
    recipe = service.get_recipe(ALICE, recipe_id)
    assert recipe.is_favorite is False


def test_delete_removes_recipe(db) -> None:
    service = RecipeService(db)
    recipe_id = service.create_recipe(ALICE, recipe_input())

    service.delete_recipe(ALICE, recipe_id)

    assert service.list_recipes(ALICE) == []
    with pytest.raises(NotFoundOrUnauthorized):
        service.get_recipe(ALICE, recipe_id)


def test_list_is_scoped_to_owner_and_filters(db) -> None:
    service = RecipeService(db)
    breakfast = service.create_recipe(ALICE, recipe_input())
    dinner = service.create_recipe(ALICE, recipe_input(name="Stew", category="Dinner"))
    service.create_recipe(BOB, recipe_input(name="Bob's toast"))
    service.toggle_favorite(ALICE, dinner)

    assert {r.RecipeId for r in service.list_recipes(ALICE)} == {breakfast, dinner}
    assert [r.RecipeId for r in service.list_recipes(ALICE, category="Breakfast")] == [breakfast]
    assert [r.RecipeId for r in service.list_recipes(ALICE, favorites_only=True)] == [dinner]


def test_list_returns_empty_on_database_fault(db, monkeypatch) -> None:
    service = RecipeService(db)
    service.create_recipe(ALICE, recipe_input())

    def broken(*args, **kwargs):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(service.repo, "get_all_for_user", broken)

    assert service.list_recipes(ALICE) == []
