# invoicing/db/queries.py
"""
Data access for customers, invoices and invoice items.

Every function takes an open SQLAlchemy connection and builds its statement from
Core expressions, so request values only ever reach the store as bound parameters.
Reads return plain dicts; writes return nothing and leave committing to the caller
(``engine.begin()``).
"""

from typing import Any, Dict, List, Optional

from sqlalchemy import insert, or_, select
from sqlalchemy.engine import Connection

from invoicing.core.config import ROW_LIMIT
from invoicing.db.schema import customers, invoices, invoice_items

Row = Dict[str, Any]


# ---- Customers ----

def list_customers(conn: Connection, q: str = "") -> List[Row]:
    """
    Newest customers first. A non-empty q is a substring match against
    name, phone, email and service_address.
    """
    stmt = select(customers)

    if q:
        stmt = stmt.where(
            or_(
                customers.c.name.contains(q, autoescape=True),
                customers.c.phone.contains(q, autoescape=True),
                customers.c.email.contains(q, autoescape=True),
                customers.c.service_address.contains(q, autoescape=True),
            )
        )

    stmt = stmt.order_by(customers.c.created_at.desc()).limit(ROW_LIMIT)

    return [dict(row) for row in conn.execute(stmt).mappings().all()]


def insert_customer(conn: Connection, fields: Row) -> None:
    conn.execute(insert(customers).values(**fields))


# ---- Invoices ----

def list_invoices(conn: Connection) -> List[Row]:
    stmt = (
        select(invoices, customers.c.name.label("customer_name"))
        .select_from(invoices.join(customers))
        .order_by(invoices.c.created_at.desc())
        .limit(ROW_LIMIT)
    )

    return [dict(row) for row in conn.execute(stmt).mappings().all()]


def insert_invoice(conn: Connection, fields: Row) -> None:
    conn.execute(insert(invoices).values(**fields))


def get_invoice(conn: Connection, invoice_id: str) -> Optional[Row]:
    """Invoice joined with its customer's name and email, or None."""
    stmt = (
        select(
            invoices,
            customers.c.name.label("customer_name"),
            customers.c.email.label("customer_email"),
        )
        .select_from(invoices.join(customers))
        .where(invoices.c.id == invoice_id)
    )

    row = conn.execute(stmt).mappings().first()
    return dict(row) if row is not None else None


def get_invoice_tax(conn: Connection, invoice_id: str) -> Optional[int]:
    stmt = select(invoices.c.tax_cents).where(invoices.c.id == invoice_id)
    row = conn.execute(stmt).first()

    if row is None:
        return None
    return int(row.tax_cents)


# ---- Invoice items ----

def insert_invoice_item(conn: Connection, fields: Row) -> None:
    conn.execute(insert(invoice_items).values(**fields))


def list_invoice_items(conn: Connection, invoice_id: str) -> List[Row]:
    stmt = (
        select(invoice_items)
        .where(invoice_items.c.invoice_id == invoice_id)
        .order_by(invoice_items.c.created_at.asc())
    )

    return [dict(row) for row in conn.execute(stmt).mappings().all()]
