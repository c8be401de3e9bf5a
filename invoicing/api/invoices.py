# invoicing/api/invoices.py

import logging
from typing import List

from fastapi import APIRouter, Depends

from invoicing.api.validators import (
    Body,
    json_body,
    validate_invoice,
    validate_invoice_item,
)
from invoicing.core.config import DRAFT_STATUS
from invoicing.core.exceptions import NotFoundError
from invoicing.core.ids import new_id, now_iso
from invoicing.core.money import format_money, line_total_cents
from invoicing.db import queries
from invoicing.db.engine import get_engine
from invoicing.models.common import CreatedOut
from invoicing.models.invoices import (
    InvoiceDetailHeader,
    InvoiceDetailOut,
    InvoiceItemOut,
    InvoiceOut,
    TotalsOut,
)
from invoicing.services.totals import compute_totals

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/invoices", tags=["invoices"])


def _row_to_item(row) -> InvoiceItemOut:
    return InvoiceItemOut(
        id=row["id"],
        invoice_id=row["invoice_id"],
        description=row["description"],
        qty=row["qty"],
        unit_price_cents=row["unit_price_cents"],
        line_total_cents=line_total_cents(row["qty"], row["unit_price_cents"]),
        created_at=row["created_at"],
    )


@router.get("", response_model=List[InvoiceOut])
def list_invoices() -> List[InvoiceOut]:
    """
    Return up to 200 invoices, newest first, with the customer's name.
    """
    engine = get_engine()
    with engine.connect() as conn:
        rows = queries.list_invoices(conn)

    return [InvoiceOut(**row) for row in rows]


@router.post("", response_model=CreatedOut)
def create_invoice(body: Body = Depends(json_body)) -> CreatedOut:
    payload = validate_invoice(body)
    invoice_id = new_id()

    engine = get_engine()
    with engine.begin() as conn:
        queries.insert_invoice(
            conn,
            {
                "id": invoice_id,
                "customer_id": payload.customer_id,
                "invoice_number": payload.invoice_number,
                "invoice_date": payload.invoice_date,
                "due_date": payload.due_date,
                "status": DRAFT_STATUS,
                "tax_cents": 0,
                "created_at": now_iso(),
            },
        )

    logger.info("Created invoice %s (%s)", invoice_id, payload.invoice_number)
    return CreatedOut(id=invoice_id)


# Registered ahead of GET /{invoice_id} so that the more specific
# ".../items" path is always matched first.
@router.post("/{invoice_id}/items", response_model=CreatedOut)
def add_invoice_item(invoice_id: str, body: Body = Depends(json_body)) -> CreatedOut:
    payload = validate_invoice_item(body)
    item_id = new_id()

    engine = get_engine()
    with engine.begin() as conn:
        queries.insert_invoice_item(
            conn,
            {
                "id": item_id,
                "invoice_id": invoice_id,
                "description": payload.description,
                "qty": payload.qty,
                "unit_price_cents": payload.unit_price_cents,
                "created_at": now_iso(),
            },
        )

    logger.info(
        "Added item %s to invoice %s: %s x %s",
        item_id,
        invoice_id,
        payload.qty,
        format_money(payload.unit_price_cents),
    )
    return CreatedOut(id=item_id)


@router.get("/{invoice_id}", response_model=InvoiceDetailOut)
def get_invoice(invoice_id: str) -> InvoiceDetailOut:
    """
    Look up a single invoice with its items (oldest first) and freshly
    computed totals.
    """
    engine = get_engine()

    with engine.connect() as conn:
        invoice = queries.get_invoice(conn, invoice_id)

        if invoice is None:
            raise NotFoundError()

        items = queries.list_invoice_items(conn, invoice_id)
        totals = compute_totals(conn, invoice_id)

    logger.debug("Invoice %s total %s", invoice_id, format_money(totals.total_cents))

    return InvoiceDetailOut(
        invoice=InvoiceDetailHeader(**invoice),
        items=[_row_to_item(row) for row in items],
        totals=TotalsOut(
            subtotal_cents=totals.subtotal_cents,
            tax_cents=totals.tax_cents,
            total_cents=totals.total_cents,
        ),
    )
