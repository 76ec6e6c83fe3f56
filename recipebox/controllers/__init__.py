"""
Controllers Package - The 'C' in MVC

Controllers handle HTTP requests and coordinate between:
- Models (data access and validation)
- Services (business logic)
- Views (printable pages)

Each controller is a FastAPI APIRouter that defines endpoints
for a specific resource.
"""

from recipebox.controllers.recipes import router as recipes_router
from recipebox.controllers.shopping_lists import router as shopping_lists_router

__all__ = ["recipes_router", "shopping_lists_router"]
