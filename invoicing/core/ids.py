# invoicing/core/ids.py

import random
import uuid
from datetime import date, datetime, timedelta, timezone
from typing import Optional


def new_id() -> str:
    return str(uuid.uuid4())


def now_iso() -> str:
    """Current UTC instant, e.g. 2024-03-01T09:30:00.123456Z."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def today() -> str:
    return _utc_today().isoformat()


def date_offset(days: int) -> str:
    return (_utc_today() + timedelta(days=days)).isoformat()


def new_invoice_number(year: Optional[int] = None) -> str:
    if year is None:
        year = _utc_today().year
    return f"INV-{year}-{random.randint(1000, 9999)}"
