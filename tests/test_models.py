"""Unit tests for invoice serialization and period selectors"""

from datetime import date

import pytest

from invoice_dashboard.engine import build_dashboard, zero_first_growth
from invoice_dashboard.models.invoice import deserialize_invoice, serialize_invoice
from invoice_dashboard.models.period import CUSTOM, THREE_MONTHS, PeriodSelector


def test_deserialize_camel_case_payload():
    invoice = deserialize_invoice(
        {
            "id": "3-7",
            "clientName": "StartupXYZ",
            "amount": 48000,
            "date": "2023-11-04",
            "dueDate": "2023-12-04",
            "status": "partially-paid",
            "description": "API Development",
        }
    )

    assert invoice.id == "3-7"
    assert invoice.client_name == "StartupXYZ"
    assert invoice.date == date(2023, 11, 4)
    assert invoice.due_date == date(2023, 12, 4)
    assert invoice.is_settled


def test_deserialize_snake_case_and_missing_description():
    invoice = deserialize_invoice(
        {
            "id": 12,
            "client_name": "Media Company",
            "amount": "3000",
            "date": "2024-01-01",
            "due_date": "2024-02-01",
            "status": "draft",
        }
    )
    assert invoice.id == "12"
    assert invoice.amount == 3000
    assert invoice.description == ""
    assert not invoice.is_settled


@pytest.mark.parametrize(
    "override,message",
    [
        ({"id": ""}, "missing an id"),
        ({"status": "cancelled"}, "unknown status"),
        ({"date": "soon"}, "invalid date"),
        ({"amount": "lots"}, "invalid amount"),
        ({"amount": None}, "invalid amount"),
        ({"amount": float("nan")}, "invalid amount"),
        ({"date": 20240115}, "invalid date"),
        ({"dueDate": 20240215}, "invalid date"),
        ({"date": ["2024-01-15"]}, "invalid date"),
    ],
)
def test_deserialize_rejects_invalid_payloads(override, message):
    payload = {
        "id": "x",
        "clientName": "Acme",
        "amount": 1,
        "date": "2024-01-01",
        "dueDate": "2024-01-02",
        "status": "paid",
        **override,
    }
    with pytest.raises(ValueError, match=message):
        deserialize_invoice(payload)


@pytest.mark.parametrize("amount,expected", [(99.9, 100), ("1250.4", 1250), (300.0, 300)])
def test_deserialize_rounds_fractional_amounts(amount, expected):
    """Payload amounts are rounded to whole units like form input"""
    invoice = deserialize_invoice(
        {
            "id": "x",
            "clientName": "Acme",
            "amount": amount,
            "date": "2024-01-01",
            "dueDate": "2024-01-02",
            "status": "paid",
        }
    )
    assert invoice.amount == expected
    assert isinstance(invoice.amount, int)


def test_serialize_uses_camel_case(make_invoice):
    invoice = make_invoice(date(2024, 1, 15), amount=100, invoice_id="a")
    data = serialize_invoice(invoice)

    assert data["clientName"] == "Acme Corporation"
    assert data["date"] == "2024-01-15"
    assert data["dueDate"] == "2024-01-15"
    assert deserialize_invoice(data) == invoice


def test_selector_from_ui_values():
    assert PeriodSelector.from_value("1Year") == PeriodSelector.one_year()
    assert PeriodSelector.from_value(None) == PeriodSelector(THREE_MONTHS)
    custom = PeriodSelector.from_value(CUSTOM, "2024-01-01", "2024-01-31")
    assert custom.has_custom_bounds
    assert (custom.start, custom.end) == (date(2024, 1, 1), date(2024, 1, 31))
    assert not PeriodSelector.from_value(CUSTOM, "2024-01-01", "").has_custom_bounds


def test_selector_labels():
    assert PeriodSelector.one_month().label == "Last Month"
    assert PeriodSelector("bogus").label == "Last 3 Months"


def test_snapshot_to_dict(two_month_invoices, now):
    snapshot = build_dashboard(
        two_month_invoices, PeriodSelector.three_months(), now, zero_first_growth
    )
    data = snapshot.to_dict()

    assert data["date_range"] == {"start": "20/11/2023", "end": "20/02/2024"}
    assert data["chart"][-1] == {"month": "Feb", "year": 2024, "income": 150, "growth": 50}
    assert data["earnings"]["total"] == 250
    assert len(data["invoices"]) == 2
