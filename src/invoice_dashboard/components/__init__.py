"""
Reflex UI components for the invoice dashboard.

This package provides the page sections:
- earnings: Total / awaited / overdue cards
- invoice_list: Filterable invoice list with status and actions
- invoice_modal: Create and edit invoice dialogs
- period_picker: Preset and custom reporting windows
- trend_chart: Monthly income bars with the growth line

Components only read DashboardState; all logic lives in the engine.
"""

from invoice_dashboard.components.earnings import earnings_cards
from invoice_dashboard.components.invoice_list import invoice_list
from invoice_dashboard.components.invoice_modal import invoice_modals
from invoice_dashboard.components.period_picker import period_picker
from invoice_dashboard.components.trend_chart import trend_chart

__all__ = [
    "earnings_cards",
    "invoice_list",
    "invoice_modals",
    "period_picker",
    "trend_chart",
]
