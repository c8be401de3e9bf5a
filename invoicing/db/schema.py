# invoicing/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    Float, ForeignKey, CheckConstraint, Text
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", Text, nullable=False),
    Column("phone", Text, nullable=False, default=""),
    Column("email", Text, nullable=False, default=""),
    Column("service_address", Text, nullable=False, default=""),
    Column("notes", Text, nullable=False, default=""),
    Column("created_at", String, nullable=False, index=True),
)

invoices = Table(
    "invoices",
    metadata,
    Column("id", String, primary_key=True),
    Column("customer_id", String, ForeignKey("customers.id"), nullable=False),
    Column("invoice_number", Text, nullable=False),
    Column("invoice_date", String, nullable=False),
    Column("due_date", String, nullable=False),
    Column("status", Text, nullable=False),
    Column("tax_cents", Integer, nullable=False, default=0),
    Column("created_at", String, nullable=False, index=True),
    CheckConstraint("tax_cents >= 0", name="ck_invoices_tax_cents_nonneg"),
)

invoice_items = Table(
    "invoice_items",
    metadata,
    Column("id", String, primary_key=True),
    Column("invoice_id", String, ForeignKey("invoices.id"), nullable=False, index=True),
    Column("description", Text, nullable=False),
    Column("qty", Float, nullable=False),
    Column("unit_price_cents", Integer, nullable=False),
    Column("created_at", String, nullable=False),
)


def create_schema(engine) -> None:
    metadata.create_all(engine)
