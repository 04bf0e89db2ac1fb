"""
Fallos del almacén -> 500 con el texto del error
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from petbook.db import get_store
from petbook.store import PetStore


@pytest.fixture
def broken():
    """Colección falsa: cada test configura qué falla"""
    return MagicMock()


@pytest.fixture
def client(broken):
    from petbook.main import app
    app.dependency_overrides[get_store] = lambda: PetStore(broken)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_read_query_error_is_500(client, broken):
    broken.find.side_effect = OperationFailure("unknown operator: $bogus")
    r = client.request("GET", "/pets", json={"name": {"$bogus": 1}})
    assert r.status_code == 500
    assert "unknown operator: $bogus" in r.text


def test_read_undecodable_record_is_500(client, broken):
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[{"_id": ObjectId(), "height": "tall"}])
    broken.find.return_value = cursor
    r = client.get("/pets")
    assert r.status_code == 500
    assert "cannot decode stored record" in r.text


def test_create_insert_error_is_500(client, broken, pet_data):
    broken.insert_one = AsyncMock(side_effect=ServerSelectionTimeoutError("no servers available"))
    r = client.post("/pets", json=pet_data)
    assert r.status_code == 500
    assert r.text == "no servers available"


def test_create_returns_candidate_when_reread_finds_nothing(client, broken, pet_data):
    broken.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    broken.find_one = AsyncMock(return_value=None)
    r = client.post("/pets", json=pet_data)
    assert r.status_code == 200
    body = r.json()
    assert "_id" not in body
    assert body["name"] == "Luna"
    assert body["breed"] == "unknown"


def test_create_returns_candidate_when_reread_fails(client, broken, pet_data):
    broken.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    broken.find_one = AsyncMock(side_effect=OperationFailure("read failed"))
    r = client.post("/pets", json=pet_data)
    assert r.status_code == 200
    assert "_id" not in r.json()


def test_update_without_operators_is_500(client, broken):
    broken.update_many = AsyncMock(side_effect=ValueError("update only works with $ operators"))
    r = client.patch("/pets", json=[{"name": "Luna"}, {"name": "Toby"}])
    assert r.status_code == 500
    assert r.text == "update only works with $ operators"


def test_delete_error_is_500(client, broken):
    broken.delete_many = AsyncMock(side_effect=OperationFailure("not authorized"))
    r = client.request("DELETE", "/pets", json={})
    assert r.status_code == 500
    assert r.text == "not authorized"
