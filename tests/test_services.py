"""Tests for the invoice services and the mock dataset"""

import json
import random
from collections import Counter
from datetime import date

import pytest

from invoice_dashboard.data.mock_invoices import (
    MAX_AMOUNT,
    MAX_PER_MONTH,
    MIN_AMOUNT,
    MIN_PER_MONTH,
    generate_mock_invoices,
)
from invoice_dashboard.lib import dates
from invoice_dashboard.models.invoice import INVOICE_STATUSES, serialize_invoice
from invoice_dashboard.services import (
    DemoInvoiceService,
    JsonInvoiceService,
    get_invoice_service,
)

NOW = date(2024, 2, 20)


def test_mock_invoices_cover_twelve_months():
    invoices = generate_mock_invoices(NOW, random.Random(7))
    per_month = Counter((inv.date.year, inv.date.month) for inv in invoices)

    assert len(per_month) == 12
    assert max(per_month) == (2024, 2)
    assert min(per_month) == (2023, 3)
    assert all(MIN_PER_MONTH <= count <= MAX_PER_MONTH for count in per_month.values())


def test_mock_invoices_shape():
    invoices = generate_mock_invoices(NOW, random.Random(7))

    assert [inv.date for inv in invoices] == sorted((inv.date for inv in invoices), reverse=True)
    assert len({inv.id for inv in invoices}) == len(invoices)
    for inv in invoices:
        assert MIN_AMOUNT <= inv.amount <= MAX_AMOUNT
        assert 1 <= inv.date.day <= 28
        assert inv.due_date == dates.add_months(inv.date, 1)
        assert inv.status in INVOICE_STATUSES
        month_offset = int(inv.id.split("-")[0])
        assert (inv.date.year, inv.date.month) == dates.shift_month(2024, 2, -month_offset)


def test_demo_service_is_repeatable_with_seed():
    service = DemoInvoiceService(seed=11)
    assert service.list_invoices(NOW) == service.list_invoices(NOW)
    assert DemoInvoiceService(seed=11).list_invoices(NOW) == service.list_invoices(NOW)


def test_json_service_reads_array(tmp_path, make_invoice):
    older = make_invoice(date(2023, 12, 1), invoice_id="old")
    newer = make_invoice(date(2024, 2, 1), invoice_id="new")
    path = tmp_path / "invoices.json"
    path.write_text(json.dumps([serialize_invoice(older), serialize_invoice(newer)]))

    invoices = JsonInvoiceService(path).list_invoices(NOW)

    assert [inv.id for inv in invoices] == ["new", "old"]
    assert invoices[0] == newer


def test_json_service_reads_invoices_key(tmp_path, make_invoice):
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps({"invoices": [serialize_invoice(make_invoice(date(2024, 1, 1)))]}))

    assert len(JsonInvoiceService(path).list_invoices(NOW)) == 1


def test_json_service_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        JsonInvoiceService(tmp_path / "nope.json").list_invoices(NOW)


def test_service_factory():
    assert isinstance(get_invoice_service("demo"), DemoInvoiceService)
    assert get_invoice_service("demo") is get_invoice_service("demo")
    with pytest.raises(ValueError, match="Unknown invoice service kind"):
        get_invoice_service("spark")


def test_json_service_rejects_malformed_invoice(tmp_path, make_invoice):
    payload = serialize_invoice(make_invoice(date(2024, 1, 1), invoice_id="bad"))
    payload["date"] = 20240101
    path = tmp_path / "invoices.json"
    path.write_text(json.dumps([payload]))

    with pytest.raises(ValueError, match="Invoice bad has an invalid date"):
        JsonInvoiceService(path).list_invoices(NOW)
