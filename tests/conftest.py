# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from invoicing.core.config import get_settings
from invoicing.db.engine import get_engine
from invoicing.db.schema import create_schema, customers, invoices, invoice_items
from invoicing.main import app


@pytest.fixture
def engine(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'test.sqlite'}")
    get_settings.cache_clear()
    get_engine.cache_clear()

    engine = get_engine()
    create_schema(engine)

    yield engine

    engine.dispose()
    get_settings.cache_clear()
    get_engine.cache_clear()


@pytest.fixture
def client(engine):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_customer(engine):
    def _make(id="C1", name="Acme", created_at="2024-01-01T00:00:00.000000Z", **fields):
        row = {"id": id, "name": name, "created_at": created_at}
        row.update(fields)
        with engine.begin() as conn:
            conn.execute(customers.insert().values(**row))
        return id

    return _make


@pytest.fixture
def make_invoice(engine):
    def _make(id="I1", customer_id="C1", tax_cents=0, created_at="2024-01-01T00:00:00.000000Z", **fields):
        row = {
            "id": id,
            "customer_id": customer_id,
            "invoice_number": f"INV-2024-{id}",
            "invoice_date": "2024-01-01",
            "due_date": "2024-01-15",
            "status": "Draft",
            "tax_cents": tax_cents,
            "created_at": created_at,
        }
        row.update(fields)
        with engine.begin() as conn:
            conn.execute(invoices.insert().values(**row))
        return id

    return _make


@pytest.fixture
def make_item(engine):
    def _make(id, invoice_id="I1", qty=1, unit_price_cents=0, created_at="2024-01-01T00:00:00.000000Z", description="Item"):
        with engine.begin() as conn:
            conn.execute(
                invoice_items.insert().values(
                    id=id,
                    invoice_id=invoice_id,
                    description=description,
                    qty=qty,
                    unit_price_cents=unit_price_cents,
                    created_at=created_at,
                )
            )
        return id

    return _make


@pytest.fixture
def row_count(engine):
    def _count(table) -> int:
        with engine.connect() as conn:
            return len(conn.execute(table.select()).all())

    return _count
