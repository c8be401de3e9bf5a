# invoicing/api/customers.py

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from invoicing.api.validators import Body, json_body, validate_customer
from invoicing.core.ids import new_id, now_iso
from invoicing.db import queries
from invoicing.db.engine import get_engine
from invoicing.models.common import CreatedOut
from invoicing.models.customers import CustomerOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=List[CustomerOut])
def list_customers(
    q: Optional[str] = Query(
        default=None,
        description="Substring matched against name, phone, email and service address",
    ),
) -> List[CustomerOut]:
    """
    Return up to 200 customers, newest first, optionally filtered by q.
    """
    q = (q or "").strip()

    engine = get_engine()
    with engine.connect() as conn:
        rows = queries.list_customers(conn, q)

    return [CustomerOut(**row) for row in rows]


@router.post("", response_model=CreatedOut)
def create_customer(body: Body = Depends(json_body)) -> CreatedOut:
    payload = validate_customer(body)
    customer_id = new_id()

    engine = get_engine()
    with engine.begin() as conn:
        queries.insert_customer(
            conn,
            {
                "id": customer_id,
                "name": payload.name,
                "phone": payload.phone,
                "email": payload.email,
                "service_address": payload.service_address,
                "notes": payload.notes,
                "created_at": now_iso(),
            },
        )

    logger.info("Created customer %s (%s)", customer_id, payload.name)
    return CreatedOut(id=customer_id)
