"""
HTTP tests for the shopping list API.

Requests go through the FastAPI TestClient with the database dependency
bound to the test's SQLite session.
"""

import pytest
from sqlalchemy.orm import Session

from domain.models import ShoppingList
from test_fixtures import (
    client,
    db_session,
    make_ingredient,
    make_recipe,
    make_meal_plan,
    add_entry,
)


@pytest.fixture
def plan_id(db_session: Session):
    flour = make_ingredient(db_session, "Flour", "Baking", "cup")
    sugar = make_ingredient(db_session, "Sugar", "Baking", "cup")
    pancakes = make_recipe(
        db_session, "Pancakes", 4, [(flour, 2, "cup"), (sugar, 0.5, "cup")]
    )
    cookies = make_recipe(db_session, "Cookies", 12, [(flour, 3, "cup"), (sugar, 2, "tbsp")])
    plan = make_meal_plan(db_session)
    add_entry(db_session, plan, pancakes, 2)
    add_entry(db_session, plan, cookies, 6)
    return plan.id


def test_health_check(client):
    response = client.get("/health-check")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "X-Request-ID" in response.headers


def test_generate_shopping_list_endpoint(client, plan_id):
    response = client.post(
        f"/meal-plans/{plan_id}/shopping-list", json={"name": "Weekend groceries"}
    )

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Weekend groceries"
    assert body["meal_plan_id"] == plan_id
    assert "items" not in body

    detail = client.get(f"/shopping-lists/{body['id']}").json()
    items = {(item["name"], item["unit"]): item["quantity"] for item in detail["items"]}
    assert items == {
        ("Flour", "cup"): pytest.approx(2.5),
        ("Sugar", "cup"): pytest.approx(0.25),
        ("Sugar", "tbsp"): pytest.approx(1.0),
    }
    assert all(item["is_purchased"] is False for item in detail["items"])


def test_generate_for_missing_plan_returns_404(client, db_session: Session):
    response = client.post("/meal-plans/9999/shopping-list", json={"name": "Ghost"})

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "NOT_FOUND"
    assert body["error"]["details"] == {"meal_plan_id": 9999}
    assert db_session.query(ShoppingList).count() == 0


def test_generate_requires_name(client, plan_id):
    response = client.post(f"/meal-plans/{plan_id}/shopping-list", json={"name": ""})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_and_list_shopping_lists(client, plan_id):
    standalone = client.post("/shopping-lists", json={"name": "Hardware store"})
    from_plan = client.post(
        "/shopping-lists", json={"name": "From plan", "meal_plan_id": plan_id}
    )

    assert standalone.status_code == 201
    assert standalone.json()["meal_plan_id"] is None
    assert from_plan.status_code == 201

    listed = client.get("/shopping-lists").json()
    assert [sl["name"] for sl in listed] == ["From plan", "Hardware store"]

    detail = client.get(f"/shopping-lists/{from_plan.json()['id']}").json()
    assert len(detail["items"]) == 3


def test_add_and_update_item(client):
    list_id = client.post("/shopping-lists", json={"name": "Manual"}).json()["id"]

    created = client.post(
        f"/shopping-lists/{list_id}/items",
        json={"name": "Coffee", "quantity": 1, "unit": "bag", "notes": "whole bean"},
    )
    assert created.status_code == 201
    item_id = created.json()["id"]

    checked = client.patch(f"/shopping-lists/items/{item_id}", json={"is_purchased": True})
    assert checked.status_code == 200
    assert checked.json()["is_purchased"] is True
    assert checked.json()["notes"] == "whole bean"

    cleared = client.patch(f"/shopping-lists/items/{item_id}", json={"notes": None})
    assert cleared.json()["notes"] is None
    assert cleared.json()["quantity"] == 1.0


def test_add_item_with_unknown_ingredient_returns_422(client):
    list_id = client.post("/shopping-lists", json={"name": "Manual"}).json()["id"]

    response = client.post(
        f"/shopping-lists/{list_id}/items", json={"name": "Mystery", "ingredient_id": 404}
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "INVALID_REFERENCE"


def test_update_missing_item_returns_404(client):
    response = client.patch("/shopping-lists/items/12345", json={"is_purchased": True})

    assert response.status_code == 404


def test_delete_shopping_list(client):
    list_id = client.post("/shopping-lists", json={"name": "Temporary"}).json()["id"]

    assert client.delete(f"/shopping-lists/{list_id}").status_code == 204
    assert client.get(f"/shopping-lists/{list_id}").status_code == 404
    assert client.delete(f"/shopping-lists/{list_id}").status_code == 404


def test_generate_with_blank_name_returns_400(client, plan_id):
    response = client.post(f"/meal-plans/{plan_id}/shopping-list", json={"name": "   "})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "SERVICE_VALIDATION_ERROR"
    assert response.json()["error"]["reason"] == "EMPTY_LIST_NAME"


def test_standalone_list_with_blank_name_returns_400(client, db_session: Session):
    response = client.post("/shopping-lists", json={"name": "   "})

    assert response.status_code == 400
    assert response.json()["error"]["reason"] == "EMPTY_LIST_NAME"
    assert db_session.query(ShoppingList).count() == 0


def test_error_envelope_carries_request_id(client):
    response = client.get("/shopping-lists/4242", headers={"X-Request-ID": "req-abc"})

    assert response.status_code == 404
    assert response.headers["X-Request-ID"] == "req-abc"
    body = response.json()
    assert body["request_id"] == "req-abc"
    assert body["timestamp"].endswith("+00:00")


def test_validation_error_details_are_serializable(client):
    response = client.post("/shopping-lists", json={"name": "Groceries", "meal_plan_id": "abc"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["details"][0]["loc"] == ["body", "meal_plan_id"]
    assert body["request_id"] == response.headers["X-Request-ID"]
