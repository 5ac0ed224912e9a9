"""Reflex configuration for the invoice dashboard."""

import os

import reflex as rx

APP_PORT = int(os.getenv("INVOICE_DASHBOARD_PORT", "8000"))

config = rx.Config(
    app_name="invoice_dashboard",
    # Use the src directory structure
    app_module_import="invoice_dashboard.app",
    backend_port=APP_PORT,
)
