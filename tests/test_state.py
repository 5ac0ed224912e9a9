"""Tests for the dashboard state's search and status filtering"""

from datetime import date
from types import SimpleNamespace

import pytest

from invoice_dashboard import state as state_module
from invoice_dashboard.models.invoice import serialize_invoice
from invoice_dashboard.models.reflex_models import visible_rows
from invoice_dashboard.state import DashboardState
from invoice_dashboard.utils import STATUS_ALL


@pytest.fixture
def period_invoices(make_invoice):
    return [
        serialize_invoice(make_invoice(date(2024, 2, 10), status="paid", client_name="Acme")),
        serialize_invoice(make_invoice(date(2024, 1, 15), status="overdue", client_name="Globex")),
        serialize_invoice(make_invoice(date(2024, 1, 2), status="paid", client_name="Globex")),
    ]


def test_visible_rows_applies_both_filters(period_invoices):
    assert len(visible_rows(period_invoices, "", STATUS_ALL)) == 3
    assert [row.client_name for row in visible_rows(period_invoices, "acme", STATUS_ALL)] == ["Acme"]

    rows = visible_rows(period_invoices, "globex", "paid")
    assert [row.date for row in rows] == ["2024-01-02"]
    assert rows[0].status_class == "status-paid"


def test_search_and_status_events_skip_the_engine(monkeypatch, period_invoices):
    def fail(*args, **kwargs):
        raise AssertionError("filter events must not re-run the engine")

    monkeypatch.setattr(state_module, "build_dashboard", fail)
    stub = SimpleNamespace(
        period_invoices=period_invoices,
        search_term="",
        status_filter=STATUS_ALL,
        rows=[],
    )
    stub._apply_filters = lambda: DashboardState._apply_filters(stub)

    DashboardState.set_search_term.fn(stub, "globex")
    assert len(stub.rows) == 2

    DashboardState.set_status_filter.fn(stub, "overdue")
    assert [row.status for row in stub.rows] == ["overdue"]
