from jinja2 import Environment, PackageLoader, select_autoescape

from recipebox.models import ShoppingList
from recipebox.services.ingredients import from_document
from recipebox.services.recipe_scaler import ScaledRecipe, format_ingredient, format_quantity


environment = Environment(
    loader=PackageLoader("recipebox", "views/templates"),
    autoescape=select_autoescape(["html"]),
)


def render_scaled_recipe(
    scaled: ScaledRecipe,
    *,
    env: Environment | None = None,
    template_name: str = "scaled-recipe.html",
) -> str:
    env = environment if env is None else env
    return env.get_template(template_name).render(
        recipe=scaled,
        original_servings=format_quantity(scaled.original_servings),
        target_servings=format_quantity(scaled.target_servings),
        prep_time=format_quantity(scaled.prep_time, fractions=False),
        ingredients=[format_ingredient(i) for i in scaled.ingredients],
        instruction_lines=scaled.instructions.splitlines(),
    )


def render_shopping_list(
    shopping_list: ShoppingList,
    recipe_names: list[str],
    *,
    env: Environment | None = None,
    template_name: str = "shopping-list.html",
) -> str:
    env = environment if env is None else env
    ingredients = from_document(shopping_list.Ingredients)
    return env.get_template(template_name).render(
        name=shopping_list.Name,
        created=shopping_list.CreatedAt.strftime("%Y-%m-%d"),
        recipe_names=recipe_names,
        ingredients=[format_ingredient(i, fractions=False) for i in ingredients],
    )
