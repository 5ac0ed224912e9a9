"""
Invoice domain model and serialization helpers.

Invoices are immutable records. Every edit produces a new instance via
``dataclasses.replace`` so collections can be rebuilt without touching the
caller's data.

The serialized form mirrors the JSON shape the dashboard exchanges with
its fixtures and the browser:

    {
        "id": "0-3",
        "clientName": "Acme Corporation",
        "amount": 125000,
        "date": "2024-01-15",
        "dueDate": "2024-02-15",
        "status": "paid",
        "description": "Web Development Services"
    }
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Literal, Mapping

from benedict import benedict

from invoice_dashboard.utils import parse_date

InvoiceStatus = Literal[
    "paid",
    "partially-paid",
    "awaited",
    "overdue",
    "disputed",
    "unpaid",
    "draft",
]

INVOICE_STATUSES: tuple[str, ...] = (
    "paid",
    "awaited",
    "overdue",
    "disputed",
    "partially-paid",
    "unpaid",
    "draft",
)

# Statuses whose amount counts towards monthly income
SETTLED_STATUSES: frozenset[str] = frozenset({"paid", "partially-paid"})


@dataclass(frozen=True, slots=True)
class Invoice:
    """A single invoice as shown on the dashboard."""

    id: str
    client_name: str
    amount: int
    date: date
    due_date: date
    status: InvoiceStatus
    description: str = ""

    @property
    def is_settled(self) -> bool:
        """Return True when the invoice contributes to income."""
        return self.status in SETTLED_STATUSES

    def searchable_terms(self) -> List[str]:
        """Return the lowercase terms matched by the search box."""
        return [value.lower() for value in (self.client_name, self.description) if value]


def is_valid_status(status: str) -> bool:
    return status in INVOICE_STATUSES


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice into a JSON serializable dictionary."""
    return {
        "id": invoice.id,
        "clientName": invoice.client_name,
        "amount": invoice.amount,
        "date": invoice.date.isoformat(),
        "dueDate": invoice.due_date.isoformat(),
        "status": invoice.status,
        "description": invoice.description,
    }


def deserialize_invoice(payload: Mapping[str, Any]) -> Invoice:
    """
    Convert a serialized invoice back into an Invoice.

    Uses benedict so both the camelCase keys written by serialize_invoice
    and snake_case keys are accepted, and missing optional text fields
    default to empty strings.

    Args:
        payload: Invoice dictionary.

    Returns:
        Invoice instance.

    Raises:
        ValueError: If the id, dates, amount or status are missing or invalid.
            Fractional amounts are rounded to whole units, like form input.
    """
    b = benedict(dict(payload))
    invoice_id = str(b.get("id", "") or "")
    if not invoice_id:
        raise ValueError("Invoice payload is missing an id")

    issue_date = parse_date(b.get("date"))
    due_date = parse_date(b.get("dueDate", b.get("due_date")))
    if issue_date is None or due_date is None:
        raise ValueError(f"Invoice {invoice_id} has an invalid date or due date")

    status = b.get("status", "")
    if not is_valid_status(status):
        raise ValueError(f"Invoice {invoice_id} has unknown status: {status}")

    raw_amount = b.get("amount")
    try:
        amount = float(raw_amount)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invoice {invoice_id} has an invalid amount") from exc
    if isinstance(raw_amount, bool) or not math.isfinite(amount):
        raise ValueError(f"Invoice {invoice_id} has an invalid amount")
    amount = round(amount)

    return Invoice(
        id=invoice_id,
        client_name=b.get("clientName", b.get("client_name", "")) or "",
        amount=amount,
        date=issue_date,
        due_date=due_date,
        status=status,
        description=b.get("description", "") or "",
    )
