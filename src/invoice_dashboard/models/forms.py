"""
Create and edit forms for invoices.

Form values arrive as raw strings from the inputs. Validation never
raises: it returns a FormErrors record with one optional message per
field, and a form with errors simply blocks the create or update.
"""

from dataclasses import dataclass, fields, replace
from datetime import date

from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.utils import parse_date


@dataclass(frozen=True, slots=True)
class InvoiceForm:
    """Raw input values of the invoice modal."""

    client_name: str = ""
    amount: str = ""
    description: str = ""
    due_date: str = ""

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceForm":
        """Pre-fill the edit modal from an existing invoice."""
        return cls(
            client_name=invoice.client_name,
            amount=str(invoice.amount),
            description=invoice.description,
            due_date=invoice.due_date.isoformat(),
        )

    def with_value(self, field_name: str, value: str) -> "InvoiceForm":
        """Return a copy with one field changed."""
        if field_name not in _FORM_FIELDS:
            raise ValueError(f"Unknown form field: {field_name}")
        return replace(self, **{field_name: value})


@dataclass(frozen=True, slots=True)
class FormErrors:
    """Validation messages keyed by form field."""

    client_name: str | None = None
    amount: str | None = None
    description: str | None = None
    due_date: str | None = None

    @property
    def has_errors(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    def clear(self, field_name: str) -> "FormErrors":
        """Drop the message for a field once the user edits it."""
        if field_name not in _FORM_FIELDS:
            return self
        return replace(self, **{field_name: None})

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) or "" for f in fields(self)}


_FORM_FIELDS = frozenset(f.name for f in fields(InvoiceForm))


def parse_amount(value: str) -> float | None:
    """Parse the amount input, returning None when it is not a number."""
    if "_" in value:
        return None
    try:
        amount = float(value.strip())
    except ValueError:
        return None
    if amount != amount or amount in (float("inf"), float("-inf")):
        return None
    return amount


def validate_invoice_form(form: InvoiceForm, today: date) -> FormErrors:
    """
    Validate the invoice modal inputs.

    Args:
        form: Raw form values.
        today: Current calendar date; due dates before it are rejected.

    Returns:
        FormErrors, empty when the form can be submitted.
    """
    client_name = None
    if not form.client_name.strip():
        client_name = "Client name is required"

    amount = None
    if not form.amount.strip():
        amount = "Amount is required"
    else:
        parsed = parse_amount(form.amount)
        if parsed is None or round(parsed) <= 0:
            amount = "Amount must be a valid positive number"

    description = None
    if not form.description.strip():
        description = "Description is required"

    due_date = None
    if not form.due_date.strip():
        due_date = "Due date is required"
    else:
        parsed_due = parse_date(form.due_date)
        if parsed_due is None:
            due_date = "Due date must be a valid date"
        elif parsed_due < today:
            due_date = "Due date cannot be in the past"

    return FormErrors(
        client_name=client_name,
        amount=amount,
        description=description,
        due_date=due_date,
    )


def create_invoice(form: InvoiceForm, today: date, invoice_id: str) -> Invoice:
    """
    Build a new draft invoice issued today from a validated form.

    Raises:
        ValueError: If the form does not pass validation.
    """
    if validate_invoice_form(form, today).has_errors:
        raise ValueError("Cannot create an invoice from an invalid form")
    return Invoice(
        id=invoice_id,
        client_name=form.client_name.strip(),
        amount=round(parse_amount(form.amount)),
        date=today,
        due_date=parse_date(form.due_date),
        status="draft",
        description=form.description.strip(),
    )


def apply_edit(invoice: Invoice, form: InvoiceForm, today: date) -> Invoice:
    """
    Return a copy of ``invoice`` with the edited fields.

    The id, issue date and status are kept.

    Raises:
        ValueError: If the form does not pass validation.
    """
    if validate_invoice_form(form, today).has_errors:
        raise ValueError(f"Cannot update invoice {invoice.id} from an invalid form")
    return replace(
        invoice,
        client_name=form.client_name.strip(),
        amount=round(parse_amount(form.amount)),
        description=form.description.strip(),
        due_date=parse_date(form.due_date),
    )
