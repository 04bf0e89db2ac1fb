"""
Configuración de pytest para tests
"""
import os

# Antes de importar la app: sin rate limiting y con la colección por defecto
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from petbook.db import get_store
from petbook.store import PetStore


@pytest.fixture
def collection():
    """Colección Pets en memoria (mongomock), limpia en cada test"""
    mock_client = AsyncMongoMockClient()
    return mock_client["PetBook"]["Pets"]


@pytest.fixture
def app(collection):
    from petbook.main import app
    app.dependency_overrides[get_store] = lambda: PetStore(collection)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Cliente de test sin lifespan: no abre conexión real a Mongo"""
    return TestClient(app)


@pytest.fixture
def pet_data():
    """Mascota válida (perro sin raza)"""
    return {
        "name": "Luna",
        "dob": "2019-05-01T00:00:00Z",
        "owner_name": "Ana",
        "species": "dog",
        "height": 45,
        "weight": 20,
        "favorite_toy": "ball",
    }
