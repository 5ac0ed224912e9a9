"""
Demo implementation of InvoiceService using generated mock data.

Useful for local development and for showing the dashboard without any
data source. Pass a seed for a dataset that is the same on every load.
"""

import random
from datetime import date, datetime

from invoice_dashboard.data.mock_invoices import generate_mock_invoices
from invoice_dashboard.lib import logs
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)


class DemoInvoiceService(InvoiceService):
    """
    In-memory invoice service backed by the mock generator.

    Attributes:
        seed: Random seed for the generator, None for a fresh dataset each load.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed

    def list_invoices(self, now: date | datetime) -> list[Invoice]:
        """Generate a year of invoices ending at ``now``."""
        invoices = generate_mock_invoices(now, random.Random(self.seed))
        LOG.info("list_invoices - seed:%s count:%s", self.seed, len(invoices))
        return invoices
