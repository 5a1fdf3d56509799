import pytest
from fastapi.testclient import TestClient

from cooking import kitchen
from inventory import InsufficientStock
from models import Ingredient
from pizza_api import app


@pytest.fixture()
def client():
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_hello_endpoint(client):
    resp = client.get("/cook")
    assert resp.status_code == 200
    assert resp.text == "Hello from Cooking Agent"
    assert resp.headers["content-type"].startswith("text/plain")


def test_cook_pizza_endpoint(client, fresh_inventory):
    resp = client.post("/cook", json={"pizzas": ["Margherita"]})
    assert resp.status_code == 200
    assert resp.json() == {
        "cookedPizzas": ["Margherita"],
        "failedPizzas": [],
        "message": "Successfully cooked 1 pizza(s)",
    }
    assert fresh_inventory.quantity_of(Ingredient.DOUGH) == 19


def test_cook_multiple_pizzas_endpoint(client):
    resp = client.post("/cook", json={"pizzas": ["Margherita", "Pepperoni", "Veggie"]})
    body = resp.json()
    assert resp.status_code == 200
    assert len(body["cookedPizzas"]) == 3
    assert body["failedPizzas"] == []


def test_cook_unknown_pizza_endpoint(client):
    resp = client.post("/cook", json={"pizzas": ["SuperSpecial"]})
    body = resp.json()
    assert resp.status_code == 200
    assert body["cookedPizzas"] == []
    assert body["failedPizzas"] == ["SuperSpecial"]
    assert body["message"].startswith("Could not cook any pizzas")


def test_missing_pizzas_is_an_empty_request(client):
    resp = client.post("/cook", json={})
    assert resp.status_code == 200
    assert resp.json()["message"] == "Successfully cooked 0 pizza(s)"


def test_non_array_pizzas_is_rejected(client):
    resp = client.post("/cook", json={"pizzas": "Margherita"})
    assert resp.status_code == 400
    assert "detail" in resp.json()


def test_inventory_and_reset_endpoints(client):
    client.post("/cook", json={"pizzas": ["Pepperoni"]})

    resp = client.get("/cook/inventory")
    assert resp.status_code == 200
    assert resp.json()["PEPPERONI"] == 7

    resp = client.post("/cook/inventory/reset")
    assert resp.status_code == 200
    assert resp.json()["PEPPERONI"] == 10
    assert client.get("/cook/inventory").json()["DOUGH"] == 20


def test_invariant_violation_maps_to_500(client, monkeypatch):
    def broken_cook(pizza_names):
        raise InsufficientStock(Ingredient.DOUGH, 1, 0)

    monkeypatch.setattr(kitchen, "cook_pizzas", broken_cook)
    resp = client.post("/cook", json={"pizzas": ["Margherita"]})
    assert resp.status_code == 500
    assert "DOUGH" in resp.json()["detail"]
