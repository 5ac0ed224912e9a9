"""
Demo data for the invoice dashboard.

Modules:
- mock_invoices: Random year-long invoice dataset used by DemoInvoiceService
"""
