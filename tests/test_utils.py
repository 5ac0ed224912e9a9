"""Unit tests for formatting and presentation-side filtering"""

from datetime import date

import pytest

from invoice_dashboard.utils import (
    filter_invoices,
    format_currency,
    format_display_date,
    parse_date,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("2024-12-25", date(2024, 12, 25)),
        (" 2024-01-05 ", date(2024, 1, 5)),
        ("2024-12-25T10:30:00", date(2024, 12, 25)),
        ("12/25/2024", date(2024, 12, 25)),
        ("", None),
        (None, None),
        ("not a date", None),
        (20240115, None),
        (date(2024, 1, 15), None),
    ],
)
def test_parse_date(value, expected):
    assert parse_date(value) == expected


def test_format_currency():
    assert format_currency(0) == "$0"
    assert format_currency(125000) == "$125,000"
    assert format_currency(-42) == "-$42"
    assert format_currency(1000, "EUR") == "EUR 1,000"


def test_format_display_date():
    assert format_display_date(date(2024, 2, 5)) == "05/02/2024"
    assert format_display_date(None) == "N/A"


@pytest.fixture
def listed(make_invoice):
    return [
        make_invoice(date(2024, 2, 1), status="paid", client_name="Acme Corporation", description="SEO Optimization"),
        make_invoice(date(2024, 2, 2), status="overdue", client_name="Retail Chain", description="Inventory System"),
        make_invoice(date(2024, 2, 3), status="paid", client_name="Design Studio", description="UI/UX Design"),
    ]


def test_search_matches_client_or_description_case_insensitive(listed):
    assert filter_invoices(listed, "acme") == [listed[0]]
    assert filter_invoices(listed, "INVENTORY") == [listed[1]]
    assert filter_invoices(listed, "design") == [listed[2]]


def test_status_filter(listed):
    assert filter_invoices(listed, status="paid") == [listed[0], listed[2]]
    assert filter_invoices(listed, status="all") == listed
    assert filter_invoices(listed, status="draft") == []


def test_search_and_status_combine(listed):
    assert filter_invoices(listed, "  design ", "overdue") == []
    assert filter_invoices(listed, "", None) == listed
