"""Tests for API endpoints"""
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from api.index import app
from ecommerce.cart import CartService
from ecommerce.routers.deps import get_cart_service, get_item_repository, get_user_repository
from tests.factories import PASSWORD, USER_NAME


@pytest.fixture
def client(memory_repositories):
    """Test client wired to in-memory repositories"""
    users, items, carts = memory_repositories
    app.dependency_overrides[get_user_repository] = lambda: users
    app.dependency_overrides[get_item_repository] = lambda: items
    app.dependency_overrides[get_cart_service] = lambda: CartService(users, items, carts)
    yield TestClient(app)
    app.dependency_overrides.clear()


def modify_cart_request(username=USER_NAME, item_id=1, quantity=1):
    return {"username": username, "itemId": item_id, "quantity": quantity}


def test_health_check(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestCartEndpoints:

    def test_add_to_cart_no_user(self, client):
        response = client.post("/api/cart/addToCart", json=modify_cart_request(username=""))
        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"

    def test_add_to_cart_no_item(self, client):
        response = client.post("/api/cart/addToCart", json=modify_cart_request(item_id=99))
        assert response.status_code == 404
        assert response.json()["detail"] == "Item not found"

    def test_add_to_cart(self, client):
        response = client.post("/api/cart/addToCart", json=modify_cart_request(quantity=2))

        assert response.status_code == 200
        data = response.json()
        assert len(data["items"]) == 2
        assert data["items"][0]["price"] == 10.0
        assert data["total"] == 20.0
        assert data["user"] == {"id": 1, "username": USER_NAME}
        assert data["id"] == 1
        assert PASSWORD not in response.text

    def test_add_accepts_snake_case_item_id(self, client):
        response = client.post(
            "/api/cart/addToCart",
            json={"username": USER_NAME, "item_id": 2, "quantity": 1},
        )
        assert response.status_code == 200
        assert response.json()["total"] == 1.99

    def test_remove_from_cart(self, client):
        client.post("/api/cart/addToCart", json=modify_cart_request())

        response = client.post("/api/cart/removeFromCart", json=modify_cart_request())

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert data["total"] == 0.0
        assert data["user"]["username"] == USER_NAME

    def test_remove_from_cart_no_user(self, client):
        response = client.post("/api/cart/removeFromCart", json=modify_cart_request(username="nobody"))
        assert response.status_code == 404

    def test_remove_from_cart_no_item(self, client):
        response = client.post("/api/cart/removeFromCart", json=modify_cart_request(item_id=99))
        assert response.status_code == 404

    def test_zero_quantity_leaves_cart_unchanged(self, client):
        client.post("/api/cart/addToCart", json=modify_cart_request())

        response = client.post("/api/cart/addToCart", json=modify_cart_request(quantity=0))

        assert response.status_code == 200
        assert len(response.json()["items"]) == 1
        assert response.json()["total"] == 10.0

        response = client.post("/api/cart/removeFromCart", json=modify_cart_request(quantity=0))

        assert response.status_code == 200
        assert response.json()["total"] == 10.0

    def test_zero_quantity_unknown_user_is_404(self, client):
        response = client.post("/api/cart/addToCart", json=modify_cart_request(username="ghost", quantity=0))
        assert response.status_code == 404

    def test_quantity_is_required(self, client):
        response = client.post("/api/cart/addToCart", json={"username": USER_NAME, "itemId": 1})
        assert response.status_code == 422

    def test_missing_fields_rejected(self, client):
        response = client.post("/api/cart/addToCart", json={"username": USER_NAME})
        assert response.status_code == 422

    def test_repository_failure_is_500(self, client):
        service = Mock()
        service.add_to_cart = AsyncMock(side_effect=ConnectionError("db down"))
        app.dependency_overrides[get_cart_service] = lambda: service

        response = client.post("/api/cart/addToCart", json=modify_cart_request())

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestItemEndpoints:

    def test_get_items(self, client):
        response = client.get("/api/item")
        assert response.status_code == 200
        assert [item["id"] for item in response.json()] == [1, 2]

    def test_get_item_by_id(self, client):
        response = client.get("/api/item/2")
        assert response.status_code == 200
        assert response.json()["name"] == "Square Widget"

    def test_get_item_by_id_not_found(self, client):
        assert client.get("/api/item/99").status_code == 404

    def test_get_items_by_name(self, client):
        response = client.get("/api/item/name/Round Widget")
        assert response.status_code == 200
        assert response.json()[0]["id"] == 1

    def test_get_items_by_name_not_found(self, client):
        assert client.get("/api/item/name/Triangle Widget").status_code == 404


class TestUserEndpoints:

    def test_get_user_by_username(self, client):
        response = client.get(f"/api/user/{USER_NAME}")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": USER_NAME}

    def test_get_user_by_id(self, client):
        response = client.get("/api/user/id/1")
        assert response.status_code == 200
        assert response.json()["username"] == USER_NAME

    def test_get_user_not_found(self, client):
        assert client.get("/api/user/nobody").status_code == 404
        assert client.get("/api/user/id/42").status_code == 404
