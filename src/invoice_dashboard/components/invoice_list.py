"""
Invoice list component for the dashboard.

Shows the invoices of the selected period after the search and status
filters, each with a status selector and an actions menu.
"""

import reflex as rx

from invoice_dashboard.models.invoice import INVOICE_STATUSES
from invoice_dashboard.models.reflex_models import InvoiceRowModel
from invoice_dashboard.state import STATUS_FILTER_OPTIONS, DashboardState


def invoice_list() -> rx.Component:
    """
    Build the invoice list card.

    Returns:
        The list card with its toolbar, rows and empty state.
    """
    return rx.box(
        _toolbar(),
        rx.cond(
            DashboardState.is_empty,
            _empty(),
            rx.box(rx.foreach(DashboardState.rows, _row), class_name="invoice-rows"),
        ),
        class_name="card invoice-list",
    )


def _toolbar() -> rx.Component:
    return rx.box(
        rx.heading(DashboardState.list_title, size="4", as_="h3"),
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Search by client or description...",
                value=DashboardState.search_term,
                on_change=DashboardState.set_search_term,
                class_name="search-input",
                debounce=300,
            ),
            class_name="input-with-icon",
        ),
        rx.select(
            STATUS_FILTER_OPTIONS,
            value=DashboardState.status_filter,
            on_change=DashboardState.set_status_filter,
        ),
        rx.button(
            rx.icon("plus", size=16),
            "New Invoice",
            on_click=DashboardState.open_create_modal,
        ),
        class_name="list-toolbar",
    )


def _row(row: InvoiceRowModel) -> rx.Component:
    """Build a single invoice row."""
    return rx.box(
        rx.box(
            rx.text(row.client_name, class_name="client-name"),
            rx.text(row.description, class_name="muted"),
            rx.text("Issued: ", row.date, "  Due: ", row.due_date, class_name="muted small"),
            class_name="row-main",
        ),
        rx.text(row.amount, class_name="row-amount"),
        rx.select(
            list(INVOICE_STATUSES),
            value=row.status,
            on_change=lambda status: DashboardState.update_status(row.id, status),
            class_name=row.status_class,
        ),
        rx.menu.root(
            rx.menu.trigger(rx.button(rx.icon("ellipsis-vertical", size=16), variant="ghost")),
            rx.menu.content(
                rx.menu.item("Edit", on_click=DashboardState.open_edit_modal(row.id)),
                rx.menu.item(
                    "Delete",
                    color="red",
                    on_click=DashboardState.delete_invoice(row.id),
                ),
            ),
        ),
        class_name="invoice-row",
    )


def _empty() -> rx.Component:
    """Build the empty state when no invoices match."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("No invoices found", size="3", as_="h3"),
        rx.cond(
            DashboardState.search_term != "",
            rx.text("No results match your search. Try a different term.", class_name="muted"),
            rx.text("No invoices in this period.", class_name="muted"),
        ),
        class_name="empty-state",
    )
