"""
Earnings summary cards: total, awaited and overdue for the selected period.
"""

import reflex as rx

from invoice_dashboard.state import DashboardState


def earnings_cards() -> rx.Component:
    """Build the row of earnings cards."""
    return rx.box(
        _card(
            "dollar-sign",
            "Total Earnings",
            DashboardState.earnings_total,
            rx.text(DashboardState.period_invoice_count, " invoices", class_name="muted"),
        ),
        _card(
            "clock",
            "Awaited",
            DashboardState.earnings_awaited,
            rx.text(DashboardState.awaited_count, " invoices awaited", class_name="muted"),
        ),
        _card(
            "triangle-alert",
            "Overdue",
            DashboardState.earnings_overdue,
            rx.text(DashboardState.overdue_count, " invoices overdue", class_name="muted"),
        ),
        class_name="earnings-grid",
    )


def _card(icon: str, title: str, value, subtitle: rx.Component) -> rx.Component:
    return rx.box(
        rx.box(
            rx.icon(icon, class_name="card-icon"),
            rx.text(title, class_name="card-title"),
            class_name="card-header",
        ),
        rx.heading(value, size="6", as_="h2"),
        subtitle,
        class_name="card earnings-card",
    )
