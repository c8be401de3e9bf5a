# invoicing/models/invoices.py

from typing import List, Optional

from pydantic import BaseModel, Field


class InvoiceCreate(BaseModel):
    customer_id: str
    invoice_number: str
    invoice_date: str
    due_date: str


class InvoiceItemCreate(BaseModel):
    description: str
    qty: float = 1
    unit_price_cents: int = 0


class InvoiceOut(BaseModel):
    id: str
    customer_id: str
    invoice_number: str
    invoice_date: str
    due_date: str
    status: str
    tax_cents: int
    created_at: str
    customer_name: str

    class Config:
        from_attributes = True


class InvoiceDetailHeader(InvoiceOut):
    customer_email: Optional[str] = None


class InvoiceItemOut(BaseModel):
    id: str
    invoice_id: str
    description: str
    qty: float
    unit_price_cents: int
    line_total_cents: int
    created_at: str


class TotalsOut(BaseModel):
    subtotal_cents: int = Field(alias="subtotalCents")
    tax_cents: int = Field(alias="taxCents")
    total_cents: int = Field(alias="totalCents")

    class Config:
        populate_by_name = True
        from_attributes = True


class InvoiceDetailOut(BaseModel):
    invoice: InvoiceDetailHeader
    items: List[InvoiceItemOut]
    totals: TotalsOut
