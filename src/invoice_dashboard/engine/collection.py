"""
Pure edits over the full invoice collection.

Each function returns a new list and leaves its input untouched, so the
period and trend pipeline can simply be re-run on the result.
"""

from dataclasses import replace
from typing import Sequence

from invoice_dashboard.models.invoice import Invoice, is_valid_status


def set_status(invoices: Sequence[Invoice], invoice_id: str, status: str) -> list[Invoice]:
    """
    Change the status of one invoice.

    Only the first invoice with a matching id changes; an unknown id
    returns an unchanged copy.

    Raises:
        ValueError: If ``status`` is not a known invoice status.
    """
    if not is_valid_status(status):
        raise ValueError(f"Unknown invoice status: {status}")

    result = list(invoices)
    for index, invoice in enumerate(result):
        if invoice.id == invoice_id:
            result[index] = replace(invoice, status=status)
            break
    return result


def upsert(invoices: Sequence[Invoice], invoice: Invoice) -> list[Invoice]:
    """Replace the invoice with the same id in place, or prepend it as the newest."""
    result = list(invoices)
    for index, existing in enumerate(result):
        if existing.id == invoice.id:
            result[index] = invoice
            return result
    return [invoice, *result]


def remove(invoices: Sequence[Invoice], invoice_id: str) -> list[Invoice]:
    """Drop the first invoice with the given id, if any."""
    result = list(invoices)
    for index, invoice in enumerate(result):
        if invoice.id == invoice_id:
            del result[index]
            break
    return result


def find(invoices: Sequence[Invoice], invoice_id: str) -> Invoice | None:
    return next((invoice for invoice in invoices if invoice.id == invoice_id), None)
