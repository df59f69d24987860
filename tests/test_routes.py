"""Tests for API endpoints"""
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from winestock import create_app
from winestock.dependencies import get_service_registry
from winestock.schemas import CustomerCreateSchema, UserUpdateSchema
from winestock.services import (
    CustomerService, UserService, WineService, ConflictError, NotFoundError, ValidationError,
)


@pytest.fixture
def services():
    """Service registry double"""
    return SimpleNamespace(
        customer_service=AsyncMock(spec=CustomerService),
        user_service=AsyncMock(spec=UserService),
        wine_service=AsyncMock(spec=WineService),
    )


@pytest.fixture
def client(services):
    """Test client with the registry dependency overridden"""
    app = create_app()
    app.dependency_overrides[get_service_registry] = lambda: services
    return TestClient(app, raise_server_exceptions=False)


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Request-ID" in response.headers


def test_create_customer(client, services, sample_customer):
    services.customer_service.create_customer.return_value = {"customer_id": "customer-1"}

    response = client.post("/api/customers", json=sample_customer)

    assert response.status_code == 201
    assert response.json()["data"] == {"customer_id": "customer-1"}
    payload = services.customer_service.create_customer.call_args.args[0]
    assert isinstance(payload, CustomerCreateSchema)
    assert payload.document == "12345678000195"


def test_create_customer_conflict(client, services, sample_customer):
    """Test ConflictError maps to 409"""
    services.customer_service.create_customer.side_effect = ConflictError(
        "Data already registered for another customer: document: 12345678000195", "Customer",
        details={"fields": ["document"]},
    )

    response = client.post("/api/customers", json=sample_customer)

    assert response.status_code == 409
    body = response.json()
    assert body["success"] is False
    assert body["error_code"] == "CONFLICT_ERROR"
    assert body["details"] == {"fields": ["document"]}


def test_create_customer_invalid_document(client, services, sample_customer):
    response = client.post("/api/customers", json={**sample_customer, "document": "123"})

    assert response.status_code == 422
    services.customer_service.create_customer.assert_not_awaited()


def test_customers_summary_route(client, services):
    """Test /summary is not captured by the id route"""
    services.customer_service.list_customers_summary.return_value = []

    response = client.get("/api/customers/summary")

    assert response.status_code == 200
    services.customer_service.list_customers_summary.assert_awaited_once()
    services.customer_service.get_customer_details.assert_not_awaited()


def test_delete_customer_not_found(client, services):
    services.customer_service.delete_customer.side_effect = NotFoundError("Customer", "missing")

    response = client.delete("/api/customers/missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Customer with ID missing not found"


def test_update_user(client, services):
    services.user_service.update_user.return_value = {"updated_user_id": "user-1"}

    response = client.put("/api/users/user-1", json={"name": "Carlos S."})

    assert response.status_code == 200
    assert response.json()["data"] == {"updated_user_id": "user-1"}
    payload, user_id = services.user_service.update_user.call_args.args
    assert isinstance(payload, UserUpdateSchema)
    assert user_id == "user-1"


def test_get_wine_not_found(client, services):
    services.wine_service.get_wine.side_effect = NotFoundError("Wine", "missing")

    response = client.get("/api/wines/missing")

    assert response.status_code == 404
    assert response.json()["error_code"] == "NOT_FOUND"


def test_create_wine_validation_error(client, services, sample_wine):
    """Test ValidationError maps to 400"""
    services.wine_service.create_wine.side_effect = ValidationError("Invalid price", field="price")

    response = client.post("/api/wines", json=sample_wine)

    assert response.status_code == 400
    assert response.json()["error_code"] == "VALIDATION_ERROR"


def test_wine_metrics_pagination(client, services):
    services.wine_service.list_wine_metrics.return_value = {"items": [
        {"wine_name": "Malbec", "wine_id": "wine-1", "updated_at": None,
         "customer_name": "Adega", "total": 3, "total_balance": 15},
    ]}

    response = client.get("/api/wines/metrics", params={"page": 2, "page_size": 1, "search": "adega"})

    assert response.status_code == 200
    body = response.json()
    assert body["pagination"] == {"total": 3, "page": 2, "per_page": 1, "total_pages": 3}
    services.wine_service.list_wine_metrics.assert_awaited_once_with(page=2, page_size=1, search_term="adega")


def test_delete_wine(client, services):
    services.wine_service.delete_wine.return_value = None

    response = client.delete("/api/wines/wine-1")

    assert response.status_code == 200
    services.wine_service.delete_wine.assert_awaited_once_with("wine-1")


def test_unexpected_error(client, services):
    """Test unhandled errors become a generic 500"""
    services.user_service.list_users.side_effect = RuntimeError("database is down")

    response = client.get("/api/users")

    assert response.status_code == 500
    assert response.json()["error_code"] == "INTERNAL_ERROR"
    assert "database is down" not in response.text


def test_get_wine_serializes_price(client, services):
    services.wine_service.get_wine.return_value = {
        "id": "wine-1", "name": "Reserva Malbec", "harvest": 2019, "type": "Tinto",
        "price": Decimal("59.90"), "producer": "Bodega Andina", "country": "Argentina",
        "size": "750ml", "created_at": None, "updated_at": None,
    }

    response = client.get("/api/wines/wine-1")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Reserva Malbec"
    assert data["price"] == 59.9
    assert isinstance(data["price"], float)


def test_get_user_hides_password(client, services):
    services.user_service.get_user.return_value = {
        "id": "user-1", "name": "Carlos Souza", "email": "carlos@example.com",
        "password": "$2b$06$hashedvalue",
        "roles": [{"id": "role-1", "name": "admin"}],
        "customer": None,
    }

    response = client.get("/api/users/user-1")

    assert response.status_code == 200
    data = response.json()["data"]
    assert "password" not in data
    assert data["roles"] == [{"id": "role-1", "name": "admin"}]
    assert data["customer"] is None


def test_list_wines_prices_are_numbers(client, services):
    services.wine_service.list_wines.return_value = {"wines": [{
        "id": "wine-1", "name": "Rosé", "harvest": None, "type": "Rosé",
        "price": Decimal("0.29"), "producer": "Casa", "country": "Brasil", "size": "375ml",
    }]}

    response = client.get("/api/wines")

    assert response.status_code == 200
    assert response.json()["data"]["wines"][0]["price"] == 0.29


@pytest.mark.parametrize("path, body", [
    ("/api/customers/customer-1", {"name": None}),
    ("/api/wines/wine-1", {"price": None}),
    ("/api/users/user-1", {"email": None}),
])
def test_update_rejects_null_required_field(client, services, path, body):
    response = client.put(path, json=body)

    assert response.status_code == 422
    services.customer_service.update_customer.assert_not_awaited()
    services.wine_service.update_wine.assert_not_awaited()
    services.user_service.update_user.assert_not_awaited()
