"""
Abstract base class defining the invoice data access contract.

A service supplies the full invoice collection the dashboard starts from.
All period filtering, aggregation and edits happen in the engine on the
caller's copy; services never see those changes.

Implementations:
- DemoInvoiceService: Randomly generated year of invoices
- JsonInvoiceService: Invoices loaded from a JSON fixture file
"""

from abc import ABC, abstractmethod
from datetime import date, datetime

from invoice_dashboard.models.invoice import Invoice


class InvoiceService(ABC):
    """Abstract base class for invoice data access."""

    @abstractmethod
    def list_invoices(self, now: date | datetime) -> list[Invoice]:
        """
        Return the full invoice collection, newest first.

        Args:
            now: Reference time for services that generate data.
        """

    @property
    def name(self) -> str:
        """Short identifier used in log lines."""
        return type(self).__name__
