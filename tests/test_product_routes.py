from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from product_api.exceptions import StoreIOError
from product_api.main import create_app
from product_api.models.schemas.product import NIL_UUID
from product_api.services.memory import InMemoryProductStore

NIL = str(NIL_UUID)


def create(client, name="Widget", price=9.99):
    response = client.post("/products", json={"name": name, "price": price})
    assert response.status_code == 200
    return response.json()


def test_list_starts_empty(client):
    response = client.get("/products")

    assert response.status_code == 200
    assert response.json() == []


def test_create_assigns_id_and_round_trips(client):
    body = create(client)

    assert body["name"] == "Widget"
    assert body["price"] == 9.99
    assert UUID(body["id"]) != NIL_UUID
    assert client.get("/products").json() == [body]


def test_create_ignores_client_id(client):
    response = client.post("/products", json={"id": NIL, "name": "Widget", "price": 1.0})

    assert response.status_code == 200
    assert response.json()["id"] != NIL


def test_get_product(client):
    body = create(client)

    response = client.get(f"/products/{body['id']}")

    assert response.status_code == 200
    assert response.json() == body


def test_update_product(client):
    body = create(client)

    response = client.put(f"/products/{body['id']}", json={"name": "New", "price": 1.0})

    assert response.status_code == 200
    assert response.json() == {"id": body["id"], "name": "New", "price": 1.0}
    assert client.get("/products").json() == [response.json()]


def test_update_unknown_product_is_a_server_error(client):
    response = client.put(f"/products/{uuid4()}", json={"name": "New", "price": 1.0})

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to update product"}
    assert client.get("/products").json() == []


def test_get_unknown_product_is_a_server_error(client):
    response = client.get(f"/products/{uuid4()}")

    assert response.status_code == 500


def test_delete_returns_placeholder(client):
    body = create(client)

    response = client.delete(f"/products/{body['id']}")

    assert response.status_code == 200
    assert response.json() == {"id": body["id"], "name": "Deleted", "price": 0.0}
    assert client.get("/products").json() == []


def test_delete_unknown_product_succeeds(client):
    product_id = str(uuid4())

    first = client.delete(f"/products/{product_id}")
    second = client.delete(f"/products/{product_id}")

    assert first.status_code == 200
    assert second.status_code == 200
    assert second.json()["id"] == product_id


def test_delete_nil_id_is_a_server_error(client):
    response = client.delete(f"/products/{NIL}")

    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to delete product"}


@pytest.mark.parametrize(
    "body",
    [
        {"name": "Widget"},
        {"price": 1.0},
        {"name": "Widget", "price": "cheap"},
        {"name": "Widget", "price": 1e39},
        {"name": "Widget", "price": 3.5e38},
        {"name": "Widget", "price": -3.5e38},
        {"name": "Widget", "price": True},
        {"name": "Widget", "price": "12.5"},
    ],
)
def test_malformed_body_is_rejected(client, body):
    response = client.post("/products", json=body)

    assert response.status_code == 422


@pytest.mark.parametrize("price", [3.4028235e38, -3.4028235e38, 3.4028234663852886e38, 7])
def test_single_precision_limits_are_accepted(client, price):
    body = create(client, price=price)

    assert body["price"] == price


def test_malformed_id_is_rejected(client):
    response = client.put("/products/not-a-uuid", json={"name": "New", "price": 1.0})

    assert response.status_code == 422


def test_distinct_errors_when_enabled(client, monkeypatch):
    monkeypatch.setattr("product_api.config.DISTINCT_ERRORS", True)

    missing = client.put(f"/products/{uuid4()}", json={"name": "New", "price": 1.0})
    nil = client.delete(f"/products/{NIL}")

    assert missing.status_code == 404
    assert nil.status_code == 400


STORAGE_FAULTS = [
    ("_list", "get", "/products", None, "Failed to list products"),
    ("_insert", "post", "/products", {"name": "Widget", "price": 1.0}, "Failed to create product"),
    ("_replace", "put", f"/products/{uuid4()}", {"name": "New", "price": 1.0}, "Failed to update product"),
    ("_remove", "delete", f"/products/{uuid4()}", None, "Failed to delete product"),
]


@pytest.mark.parametrize("hook, method, path, body, detail", STORAGE_FAULTS)
def test_storage_fault_is_a_server_error(monkeypatch, hook, method, path, body, detail):
    store = InMemoryProductStore()

    def broken(*args):
        raise StoreIOError("disk gone")

    monkeypatch.setattr(store, hook, broken)
    with TestClient(create_app(store)) as client:
        kwargs = {"json": body} if body is not None else {}
        response = client.request(method.upper(), path, **kwargs)

    assert response.status_code == 500
    assert response.json() == {"detail": detail}
    assert store._products == {}


def test_api_documentation_is_served(client):
    spec = client.get("/api-doc/openapi.json")

    assert spec.status_code == 200
    paths = spec.json()["paths"]
    assert set(paths["/products"]) == {"get", "post"}
    assert set(paths["/products/{product_id}"]) == {"get", "put", "delete"}
    assert "Product" in spec.json()["components"]["schemas"]
    assert client.get("/swagger-ui").status_code == 200
