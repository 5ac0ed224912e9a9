"""
Utility functions for invoice formatting and presentation-side filtering.

Provides helpers for:
- Date parsing (ISO and m/d/y formats)
- Currency and date formatting for display
- Search term and status matching over the period-filtered invoices
"""

from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from invoice_dashboard.models.invoice import Invoice

STATUS_ALL = "all"


def parse_date(date_str: Any) -> date | None:
    """
    Parse a date string into a calendar date.

    Args:
        date_str: Date string in ISO format (e.g., "2024-12-25", the form
            produced by HTML date inputs) or m/d/y format (e.g., "12/25/2024").

    Returns:
        date object if parsing succeeds, None otherwise (including for
        values that are not strings)
    """
    if not isinstance(date_str, str):
        return None
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    # Full ISO timestamps (e.g., "2024-12-25T10:00:00")
    try:
        return datetime.fromisoformat(date_str).date()
    except ValueError:
        pass

    try:
        return datetime.strptime(date_str, "%m/%d/%Y").date()
    except ValueError:
        pass

    return None


def format_currency(amount: float, currency: str = "USD") -> str:
    """
    Format an amount as whole currency units.

    Args:
        amount: Numeric amount to format.
        currency: Currency code, only USD gets a symbol.

    Returns:
        Formatted string like '$1,235' or 'EUR 1,235'.
    """
    prefix = "$" if currency == "USD" else f"{currency} "
    sign = "-" if amount < 0 else ""
    return f"{sign}{prefix}{abs(amount):,.0f}"


def format_display_date(value: date | None) -> str:
    """Format a date as dd/mm/yyyy for the period banner."""
    if not value:
        return "N/A"
    return value.strftime("%d/%m/%Y")


def matches_query(invoice: "Invoice", query: str) -> bool:
    """
    Check if an invoice matches the search term.

    Performs case-insensitive substring matching against the client name
    and description.

    Returns:
        True if the term matches any searchable field, or if it is empty.
    """
    normalized = query.strip().lower()
    if not normalized:
        return True
    return any(normalized in value for value in invoice.searchable_terms())


def matches_status(invoice: "Invoice", status: str | None) -> bool:
    """Check the status filter; ``all`` or an empty value matches everything."""
    if not status or status == STATUS_ALL:
        return True
    return invoice.status == status


def filter_invoices(
    invoices: Iterable["Invoice"],
    query: str | None = None,
    status: str | None = None,
) -> list["Invoice"]:
    """Apply the search and status filters, preserving order."""
    return [
        invoice
        for invoice in invoices
        if matches_query(invoice, query or "") and matches_status(invoice, status)
    ]
