# tests/test_routing.py
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from invoicing.db import queries
from invoicing.main import app


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/unknown"),
        ("GET", "/"),
        ("DELETE", "/api/customers"),
        ("PUT", "/api/invoices"),
        ("POST", "/api/invoices/abc"),
        ("GET", "/api/invoices/abc/items"),
        ("GET", "/api/invoices/abc/items/extra"),
    ],
)
def test_unmatched_routes_are_404(client, method, path):
    resp = client.request(method, path)

    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}
    assert resp.headers["content-type"].startswith("application/json")


def test_items_route_is_not_mistaken_for_invoice_lookup(client):
    customer_id = client.post("/api/customers", json={"name": "Acme"}).json()["id"]
    invoice_id = client.post("/api/invoices", json={"customer_id": customer_id}).json()["id"]

    resp = client.post(f"/api/invoices/{invoice_id}/items", json={"description": "Widget"})

    assert resp.status_code == 200
    assert set(resp.json()) == {"id"}
    assert resp.json()["id"] != invoice_id


def test_store_failure_is_generic_500(client, monkeypatch):
    def broken(conn):
        raise OperationalError("SELECT 1", {}, Exception("disk I/O error"))

    monkeypatch.setattr(queries, "list_invoices", broken)

    resp = client.get("/api/invoices")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_unexpected_error_is_json_500(engine, monkeypatch):
    def broken(conn, invoice_id):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(queries, "get_invoice", broken)

    with TestClient(app, raise_server_exceptions=False) as client:
        resp = client.get("/api/invoices/I1")

    assert resp.status_code == 500
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"error": "Internal server error"}
