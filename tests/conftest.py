import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from recipebox.config import Settings, get_settings
from recipebox.database import get_db, init_db
from recipebox.main import app
from recipebox.models import RecipeInput, StructuredIngredient


ALICE = "alice-subject-id"
BOB = "bob-subject-id"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: Settings(dev_user_id="")
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(user_id: str) -> dict[str, str]:
    return {
        "X-MS-CLIENT-PRINCIPAL-ID": user_id,
        "X-MS-CLIENT-PRINCIPAL-NAME": f"{user_id}@example.com",
    }


def ingredient(quantity, unit, name, notes=None) -> StructuredIngredient:
    return StructuredIngredient(quantity=quantity, unit=unit, ingredient=name, notes=notes)


def recipe_input(**overrides) -> RecipeInput:
    fields = {
        "name": "Pancakes",
        "ingredients": [
            ingredient(2, "cup", "flour"),
            ingredient(1, "cup", "milk", "whole"),
        ],
        "instructions": "Mix and fry.",
        "prep_time": 30,
        "category": "Breakfast",
    }
    fields.update(overrides)
    return RecipeInput(**fields)


def recipe_payload(**overrides) -> dict:
    payload = {
        "name": "Pancakes",
        "ingredients": [
            {"quantity": 2, "unit": "cup", "ingredient": "flour"},
            {"quantity": 1, "unit": "cup", "ingredient": "milk", "notes": "whole"},
        ],
        "instructions": "Mix and fry.",
        "prep_time": 30,
        "category": "Breakfast",
    }
    payload.update(overrides)
    return payload
