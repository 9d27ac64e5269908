from fastapi.testclient import TestClient

from main import app
from services.product_service.errors import StorageError
from services.product_service.repository import ProductRepository
from services.product_service.validation import PLACEHOLDER_IMAGE_URL


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"
    assert client.get("/api/health").json() == {"service": "product", "status": "running"}


def test_startup_seeds_twenty_products_newest_first(client):
    products = client.get("/api/products").json()["products"]
    assert len(products) == 20
    assert [p["id"] for p in products] == list(range(20, 0, -1))
    assert products[0]["name"] == "Cable Management"


def test_restarting_does_not_duplicate_seed(client):
    with TestClient(app) as again:
        assert len(again.get("/api/products").json()["products"]) == 20


def test_create_returns_new_id_listed_first(client, valid_payload):
    r = client.post("/api/products", json=valid_payload)
    assert r.status_code == 201
    body = r.json()
    assert body["message"] == "Product created successfully"

    products = client.get("/api/products").json()["products"]
    assert products[0]["id"] == body["id"]
    assert body["id"] not in [p["id"] for p in products[1:]]


def test_create_accepts_form_strings_and_defaults(client):
    r = client.post("/api/products", json={"name": "Tape", "price": "2.25", "quantity": "8"})
    product = client.get(f"/api/products/{r.json()['id']}").json()["product"]
    assert product["price"] == 2.25
    assert product["quantity"] == 8
    assert product["category"] == "General"
    assert product["image_url"] == PLACEHOLDER_IMAGE_URL


def test_invalid_create_is_a_client_error_naming_the_field(client, valid_payload):
    cases = [
        (dict(valid_payload, name=" "), "name"),
        (dict(valid_payload, price=-1), "price"),
        (dict(valid_payload, price="abc"), "price"),
        (dict(valid_payload, quantity=-5), "quantity"),
        (dict(valid_payload, quantity=10 ** 20), "quantity"),
        (dict(valid_payload, price=10 ** 400), "price"),
    ]
    for payload, field in cases:
        r = client.post("/api/products", json=payload)
        assert r.status_code == 400
        assert r.json()["field"] == field
        assert field in r.json()["detail"]

    assert len(client.get("/api/products").json()["products"]) == 20


def test_non_object_body_is_rejected(client):
    r = client.post("/api/products", json=["not", "an", "object"])
    assert r.status_code == 422


def test_get_missing_product(client):
    r = client.get("/api/products/9999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Product not found"


def test_update_overwrites_all_fields(client, valid_payload):
    r = client.put("/api/products/1", json=valid_payload)
    assert r.status_code == 200
    assert r.json()["message"] == "Product updated successfully"

    product = client.get("/api/products/1").json()["product"]
    assert product == dict(valid_payload, id=1)


def test_update_requires_every_field(client, valid_payload):
    payload = dict(valid_payload)
    del payload["category"]
    r = client.put("/api/products/1", json=payload)
    assert r.status_code == 400
    assert r.json()["field"] == "category"


def test_update_missing_product_creates_nothing(client, valid_payload):
    r = client.put("/api/products/9999", json=valid_payload)
    assert r.status_code == 404
    assert len(client.get("/api/products").json()["products"]) == 20


def test_delete_then_delete_again(client):
    assert client.delete("/api/products/5").status_code == 200
    assert client.get("/api/products/5").status_code == 404
    assert client.delete("/api/products/5").status_code == 404


def test_storage_fault_is_a_server_error(client, monkeypatch):
    async def broken(db):
        raise StorageError(RuntimeError("disk on fire"))

    monkeypatch.setattr(ProductRepository, "list_all", staticmethod(broken))
    r = client.get("/api/products")
    assert r.status_code == 500
    assert r.json()["detail"] == "Internal storage error"
    assert "disk on fire" not in r.text


def test_metrics_are_exposed(client, valid_payload):
    client.post("/api/products", json=valid_payload)
    r = client.get("/api/metrics")
    assert r.status_code == 200
    assert "inventory_product_mutations_total" in r.text


def test_oversized_quantity_on_update_is_a_client_error(client, valid_payload):
    r = client.put("/api/products/1", json=dict(valid_payload, quantity=10 ** 20))
    assert r.status_code == 400
    assert r.json()["field"] == "quantity"
    assert client.get("/api/products/1").json()["product"]["quantity"] == 45
