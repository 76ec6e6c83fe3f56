"""
Recipe Box API - Application Entry Point

This is the main FastAPI application for the personal recipe box. It
follows the MVC (Model-View-Controller) architectural pattern.

Architecture Overview:
=====================
- Models (recipebox/models/): Data structures and database access
  - entities.py: SQLAlchemy ORM models for database tables
  - schemas.py: Pydantic schemas for API request/response validation
  - repositories/: Per-entity data access

- Views (recipebox/views/): Printable HTML pages (Jinja2 templates)

- Controllers (recipebox/controllers/): Request handlers
  - recipes.py: Recipe CRUD, favorites and scaling
  - shopping_lists.py: Shopping list creation and management

- Services (recipebox/services/): Business logic layer
  - recipe_service.py: Ownership-checked recipe operations
  - shopping_list_service.py: Ingredient merging across recipes
  - recipe_scaler.py: Serving size scaling

Request Flow:
============
1. Request arrives at a Controller endpoint
2. The auth dependency resolves the caller from identity provider headers
3. Controller validates input using Pydantic Schemas (Models)
4. Controller calls Services with the caller's user id and a DB session
5. Services check ownership and use Repositories to read/write
6. Domain errors are turned into HTTP responses by the handlers below
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recipebox.config import get_settings
from recipebox.controllers import recipes_router, shopping_lists_router
from recipebox.database import init_db
from recipebox.errors import RecipeBoxError, ValidationError

logger = logging.getLogger(__name__)

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database tables ready")
    yield


# Create FastAPI application
app = FastAPI(
    title=settings.app_title,
    description="""
    Personal recipe box.

    ## Features
    - Recipe management (CRUD operations, favorites)
    - Serving size scaling with printable output
    - Shopping lists that combine ingredients across recipes

    ## Authentication
    The identity provider in front of the API injects the caller's
    identity headers; every endpoint except the health checks needs them.
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register controllers (routers)
app.include_router(recipes_router)         # /recipes endpoints
app.include_router(shopping_lists_router)  # /shopping-lists endpoints


# ============================================
# Error Handlers
# ============================================

@app.exception_handler(RecipeBoxError)
async def recipe_box_error_handler(request: Request, exc: RecipeBoxError):
    """Translate domain errors into JSON responses."""
    content = {"detail": exc.message}
    if isinstance(exc, ValidationError) and exc.errors:
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


# ============================================
# Health Check Endpoints
# ============================================

@app.get("/", tags=["health"])
def root():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_title,
        "version": "1.0.0"
    }


@app.get("/health", tags=["health"])
def health_check():
    """Health check used by load balancers and monitoring."""
    return {"status": "healthy"}
