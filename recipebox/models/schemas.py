"""
Pydantic Schemas (Data Transfer Objects)

These schemas define the structure of data flowing in and out of the API.

Naming Convention:
- *Input: Data received from clients (create/update operations)
- *Create: Specific input for creating new resources
- *Response: Data returned to clients

Input schemas are deliberately permissive about content: blank names,
zero quantities and the like are accepted here and rejected (or filtered)
by the services layer, which reports every problem field at once.
"""

from pydantic import BaseModel, Field
from datetime import datetime


# ============================================
# Ingredient Schemas
# ============================================

class StructuredIngredient(BaseModel):
    """
    One recipe component: quantity, unit, item name and optional notes.

    Used both for input and output, and as the stored JSON shape.
    """
    quantity: float = Field(0, description="Amount needed, e.g. 1.5")
    unit: str = Field("", description="Unit of measure (e.g., 'cup', 'tbsp')")
    ingredient: str = Field("", description="Name of the ingredient")
    notes: str | None = Field(None, description="Optional notes like 'finely chopped'")


class ScaledIngredientResponse(StructuredIngredient):
    """Scaled ingredient with a human friendly rendering."""
    display: str


# ============================================
# Recipe Schemas
# ============================================

class RecipeInput(BaseModel):
    """Request body for creating or updating a recipe."""
    name: str = Field("", description="Recipe title")
    ingredients: list[StructuredIngredient] = Field(
        default_factory=list, description="Ordered list of ingredients"
    )
    instructions: str = Field("", description="Preparation instructions")
    prep_time: float = Field(0, description="Prep time in minutes")
    category: str = Field("", description="Meal category")


class RecipeResponse(BaseModel):
    """A stored recipe."""
    id: str
    name: str
    ingredients: list[StructuredIngredient]
    instructions: str
    prep_time: float
    category: str
    user_id: str
    created_at: datetime
    updated_at: datetime
    is_favorite: bool


class FavoriteResponse(BaseModel):
    """Result of toggling the favorite flag."""
    id: str
    is_favorite: bool


class ScaledRecipeResponse(BaseModel):
    """
    A recipe recomputed for a different number of servings.

    Presentation only: nothing here is persisted.
    """
    id: str
    name: str
    category: str
    instructions: str
    original_servings: float
    target_servings: float
    scaling_factor: float
    prep_time: float
    ingredients: list[ScaledIngredientResponse]


# ============================================
# Shopping List Schemas
# ============================================

class ShoppingListCreate(BaseModel):
    """Request body for building a shopping list from recipes."""
    name: str = Field("", description="Name of the list")
    recipe_ids: list[str] = Field(
        default_factory=list, description="Recipes to combine, in order"
    )


class ShoppingListResponse(BaseModel):
    """A stored shopping list snapshot."""
    id: str
    name: str
    recipe_ids: list[str]
    ingredients: list[StructuredIngredient]
    user_id: str
    created_at: datetime
    updated_at: datetime
