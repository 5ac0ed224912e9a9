"""
Reflex application entry point for the invoice dashboard.

This module initializes the Reflex app and defines the main page layout.
"""

import os

import reflex as rx

from invoice_dashboard.components import (
    earnings_cards,
    invoice_list,
    invoice_modals,
    period_picker,
    trend_chart,
)
from invoice_dashboard.lib import logs
from invoice_dashboard.state import APP_TITLE, DashboardState

LOG = logs.logger(__file__)

APP_PORT = int(os.getenv("INVOICE_DASHBOARD_PORT", "8000"))
LOG.info("INVOICE_DASHBOARD_PORT: %s", APP_PORT)

_FONT_URL = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap"


def page_header() -> rx.Component:
    """Build the header bar with the title and period picker."""
    return rx.box(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        period_picker(),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page with earnings, chart, invoice list and modals.
    """
    return rx.box(
        rx.box(
            page_header(),
            earnings_cards(),
            trend_chart(),
            invoice_list(),
            invoice_modals(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    index,
    title=APP_TITLE,
    on_load=DashboardState.on_load,
)


def main() -> None:
    """Entrypoint used by `uv run invoice_dashboard`; delegates to `reflex run`."""
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)])


if __name__ == "__main__":
    main()
