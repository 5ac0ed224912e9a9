"""Shared fixtures for invoice dashboard tests"""

from datetime import date

import pytest

from invoice_dashboard.models.invoice import Invoice


@pytest.fixture
def make_invoice():
    """Factory for invoices with sensible defaults"""
    counter = {"next": 0}

    def _make(
        issued: date,
        amount: int = 100,
        status: str = "paid",
        invoice_id: str | None = None,
        client_name: str = "Acme Corporation",
        description: str = "Web Development Services",
    ) -> Invoice:
        counter["next"] += 1
        return Invoice(
            id=invoice_id or f"inv-{counter['next']}",
            client_name=client_name,
            amount=amount,
            date=issued,
            due_date=issued.replace(day=min(issued.day, 28)),
            status=status,
            description=description,
        )

    return _make


@pytest.fixture
def now() -> date:
    return date(2024, 2, 20)


@pytest.fixture
def two_month_invoices(make_invoice):
    """January and February settled invoices from the reference scenario"""
    return [
        make_invoice(date(2024, 1, 15), amount=100, status="paid"),
        make_invoice(date(2024, 2, 10), amount=150, status="paid"),
    ]
