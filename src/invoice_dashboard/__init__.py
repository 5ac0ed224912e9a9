"""
Invoice Dashboard: a Reflex application summarising invoices over a
reporting period.

This package provides the invoice list, earnings cards and monthly trend
chart on top of a pure time-window aggregation engine.

Subpackages:
- engine: Period resolution, trend aggregation, collection edits, chart scaling
- models: Invoice, period, dashboard and form models
- services: Data access layer (generated demo data or JSON fixture)
- components: Reflex UI components
- data: Mock invoice generator
- lib: Logging and calendar helpers

Main entry points:
- engine.build_dashboard(): Run the full pipeline for one render
- app.main(): Start the development server
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
