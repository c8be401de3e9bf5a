# invoicing/api/validators.py
"""
Request body parsing and validation for the write endpoints.

Bodies are read leniently: anything that is not a JSON object (including
malformed JSON) becomes {}, and the required-field checks below then report
the missing field as a 400.
"""

import json
import math
import re
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Union

from fastapi import Request
from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as SchemaError

from invoicing.core import ids
from invoicing.core.config import DUE_DAYS
from invoicing.core.exceptions import ValidationError
from invoicing.core.money import fits_cents, to_cents
from invoicing.models.customers import CustomerCreate
from invoicing.models.invoices import InvoiceCreate, InvoiceItemCreate

Body = Dict[str, Any]

_email_adapter = TypeAdapter(EmailStr)

# JSON number syntax, e.g. "12", "-0.5", "1.5e3"
_NUMERIC_TEXT = re.compile(r"-?(0|[1-9]\d*)(\.\d+)?([eE][+-]?\d+)?")


async def json_body(request: Request) -> Body:
    """FastAPI dependency: the request body as a dict, {} when unusable."""
    raw = await request.body()
    if not raw:
        return {}

    try:
        data = json.loads(raw)
    except ValueError:
        return {}

    return data if isinstance(data, dict) else {}


# ---- Field helpers ----

def _text(body: Body, key: str) -> str:
    value = body.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _number(body: Body, key: str, default: Union[int, float]) -> Union[int, float]:
    value = body.get(key)

    if value is None or (isinstance(value, str) and not value.strip()):
        return default

    if isinstance(value, bool):
        raise ValidationError(f"{key} must be a number")

    if isinstance(value, (int, float)):
        number = value
    elif isinstance(value, str) and _NUMERIC_TEXT.fullmatch(value.strip()):
        number = float(value.strip())
    else:
        raise ValidationError(f"{key} must be a number")

    if isinstance(number, float) and not math.isfinite(number):
        raise ValidationError(f"{key} must be a number")

    return number


def _calendar_date(body: Body, key: str, default: str) -> str:
    value = _text(body, key)
    if not value:
        return default

    try:
        return datetime.strptime(value, "%Y-%m-%d").date().isoformat()
    except ValueError:
        raise ValidationError(f"{key} must be YYYY-MM-DD")


def _email(value: str) -> str:
    if not value:
        return ""
    try:
        return str(_email_adapter.validate_python(value))
    except SchemaError:
        raise ValidationError("Invalid email")


# ---- Payload validators ----

def validate_customer(body: Body) -> CustomerCreate:
    name = _text(body, "name")
    if not name:
        raise ValidationError("Name required")

    return CustomerCreate(
        name=name,
        phone=_text(body, "phone"),
        email=_email(_text(body, "email")),
        service_address=_text(body, "service_address"),
        notes=_text(body, "notes"),
    )


def validate_invoice(body: Body) -> InvoiceCreate:
    customer_id = _text(body, "customer_id")
    if not customer_id:
        raise ValidationError("customer_id required")

    return InvoiceCreate(
        customer_id=customer_id,
        invoice_number=_text(body, "invoice_number") or ids.new_invoice_number(),
        invoice_date=_calendar_date(body, "invoice_date", ids.today()),
        due_date=_calendar_date(body, "due_date", ids.date_offset(DUE_DAYS)),
    )


def validate_invoice_item(body: Body) -> InvoiceItemCreate:
    description = _text(body, "description")
    if not description:
        raise ValidationError("description required")

    qty = _number(body, "qty", 1)
    unit_price = _number(body, "unit_price", 0)

    if not fits_cents(Decimal(str(unit_price)) * 100):
        raise ValidationError("unit_price out of range")
    unit_price_cents = to_cents(unit_price)

    if not fits_cents(qty) or not fits_cents(Decimal(str(qty)) * unit_price_cents):
        raise ValidationError("qty out of range")

    return InvoiceItemCreate(
        description=description,
        qty=qty,
        unit_price_cents=unit_price_cents,
    )
