"""
Reflex-compatible models for the dashboard.

These extend rx.Base so they can be used with rx.foreach and other Reflex
reactive components. Values are pre-formatted for display; the engine
types stay free of any Reflex dependency.
"""

import reflex as rx

from invoice_dashboard.engine.chart import ChartScale
from invoice_dashboard.models.dashboard import MonthBucket
from invoice_dashboard.models.invoice import Invoice, deserialize_invoice
from invoice_dashboard.utils import filter_invoices, format_currency

# Bar height in pixels for the tallest month
CHART_BAR_MAX_PX = 180

STATUS_STYLES: dict[str, str] = {
    "paid": "status-paid",
    "overdue": "status-overdue",
    "disputed": "status-disputed",
    "partially-paid": "status-partial",
    "awaited": "status-awaited",
    "unpaid": "status-unpaid",
    "draft": "status-draft",
}


class InvoiceRowModel(rx.Base):
    """One line of the invoice list."""

    id: str = ""
    client_name: str = ""
    description: str = ""
    amount: str = ""
    date: str = ""
    due_date: str = ""
    status: str = ""
    status_class: str = "status-unpaid"


class ChartBarModel(rx.Base):
    """One month of the trend chart."""

    month: str = ""
    income: str = ""
    growth: int = 0
    growth_label: str = "0%"
    is_growth: bool = True
    bar_height: str = "0px"
    title: str = ""


def invoice_to_row(invoice: Invoice) -> InvoiceRowModel:
    return InvoiceRowModel(
        id=invoice.id,
        client_name=invoice.client_name,
        description=invoice.description,
        amount=format_currency(invoice.amount),
        date=invoice.date.isoformat(),
        due_date=invoice.due_date.isoformat(),
        status=invoice.status,
        status_class=STATUS_STYLES.get(invoice.status, "status-unpaid"),
    )


def visible_rows(
    period_invoices: list[dict], query: str | None, status: str | None
) -> list[InvoiceRowModel]:
    """
    Apply the search term and status filter to the period-filtered invoices.

    Args:
        period_invoices: Serialized invoices inside the selected period.
        query: Search term typed by the user.
        status: Selected status filter, or "all".

    Returns:
        Rows for the invoices that match both filters, in the given order.
    """
    invoices = [deserialize_invoice(payload) for payload in period_invoices]
    return [invoice_to_row(inv) for inv in filter_invoices(invoices, query, status)]


def buckets_to_bars(buckets: list[MonthBucket], scale: ChartScale) -> list[ChartBarModel]:
    """Convert a bucket series and its scale into chart bar models."""
    return [
        ChartBarModel(
            month=bucket.label,
            income=format_currency(bucket.income),
            growth=bucket.growth_percent,
            growth_label=f"{bucket.growth_percent}%",
            is_growth=bucket.growth_percent >= 0,
            bar_height=f"{round(height * CHART_BAR_MAX_PX)}px",
            title=(
                f"{bucket.label}: {format_currency(bucket.income)} income, "
                f"{bucket.growth_percent}% growth"
            ),
        )
        for bucket, height in zip(buckets, scale.bar_heights)
    ]
