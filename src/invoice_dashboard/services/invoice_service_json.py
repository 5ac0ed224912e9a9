"""
JSON fixture implementation of InvoiceService.

Reads a file holding a list of serialized invoices (see
invoice_dashboard.models.invoice for the shape), either as a bare JSON
array or under an "invoices" key. The file is read on every call and
never written.
"""

from datetime import date, datetime
from pathlib import Path

from benedict import benedict

from invoice_dashboard.lib import logs
from invoice_dashboard.models.invoice import Invoice, deserialize_invoice
from invoice_dashboard.services.invoice_service import InvoiceService

LOG = logs.logger(__file__)


class JsonInvoiceService(InvoiceService):
    """
    Invoice service reading a JSON fixture.

    Attributes:
        path: Location of the fixture file.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def list_invoices(self, now: date | datetime) -> list[Invoice]:
        """
        Load and parse every invoice in the fixture.

        Raises:
            FileNotFoundError: If the fixture does not exist.
            ValueError: If an invoice payload is invalid.
        """
        if not self.path.is_file():
            raise FileNotFoundError(f"Invoice fixture not found: {self.path}")

        data = benedict.from_json(self.path.read_text(encoding="utf-8"))
        # benedict wraps a top-level array under "values"
        payloads = data.get("invoices", data.get("values", []))
        invoices = [deserialize_invoice(payload) for payload in payloads]
        LOG.info("list_invoices - path:%s count:%s", self.path, len(invoices))
        return sorted(invoices, key=lambda invoice: invoice.date, reverse=True)
