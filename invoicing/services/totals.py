# invoicing/services/totals.py

from dataclasses import dataclass

from sqlalchemy.engine import Connection

from invoicing.core.money import line_total_cents
from invoicing.db.queries import get_invoice_tax, list_invoice_items


@dataclass(frozen=True)
class Totals:
    subtotal_cents: int
    tax_cents: int
    total_cents: int


def compute_totals(conn: Connection, invoice_id: str) -> Totals:
    """
    Recompute an invoice's totals from its current items and stored tax.

    Nothing is cached; every call reads the items and the tax again. An invoice
    that does not exist yields tax 0 rather than an error, so callers that need
    to distinguish a missing invoice must check for it first.
    """
    items = list_invoice_items(conn, invoice_id)
    subtotal_cents = sum(
        line_total_cents(item["qty"] or 0, item["unit_price_cents"] or 0)
        for item in items
    )

    tax_cents = get_invoice_tax(conn, invoice_id) or 0

    return Totals(
        subtotal_cents=subtotal_cents,
        tax_cents=tax_cents,
        total_cents=subtotal_cents + tax_cents,
    )
