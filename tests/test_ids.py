# tests/test_ids.py
import re
import uuid
from datetime import date, datetime, timedelta, timezone

from invoicing.core.ids import date_offset, new_id, new_invoice_number, now_iso, today


def test_new_id_is_unique_uuid():
    a, b = new_id(), new_id()
    assert a != b
    assert str(uuid.UUID(a)) == a


def test_now_iso_format():
    value = now_iso()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{6}Z", value)


def test_now_iso_sorts_chronologically():
    first = now_iso()
    second = now_iso()
    assert first <= second


def test_today_and_offset():
    utc_today = datetime.now(timezone.utc).date()
    assert today() == utc_today.isoformat()
    assert date_offset(14) == (utc_today + timedelta(days=14)).isoformat()
    assert date.fromisoformat(date_offset(0)) == utc_today


def test_new_invoice_number():
    assert re.fullmatch(r"INV-2024-\d{4}", new_invoice_number(2024))

    number = int(new_invoice_number(2024).rsplit("-", 1)[1])
    assert 1000 <= number <= 9999

    year = datetime.now(timezone.utc).year
    assert new_invoice_number().startswith(f"INV-{year}-")
