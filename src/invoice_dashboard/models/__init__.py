"""
Data models for the invoice dashboard.

This package provides:
- The Invoice record and its JSON serialization
- Period selection (PeriodSelector, DateRange)
- Derived dashboard results (MonthBucket, EarningsSummary, DashboardSnapshot)
- Invoice create/edit forms with fixed-shape validation errors

All models are frozen dataclasses; changes always produce new instances.
"""

from invoice_dashboard.models.dashboard import (
    DashboardSnapshot,
    EarningsSummary,
    MonthBucket,
)
from invoice_dashboard.models.forms import (
    FormErrors,
    InvoiceForm,
    apply_edit,
    create_invoice,
    validate_invoice_form,
)
from invoice_dashboard.models.invoice import (
    INVOICE_STATUSES,
    SETTLED_STATUSES,
    Invoice,
    InvoiceStatus,
    deserialize_invoice,
    serialize_invoice,
)
from invoice_dashboard.models.period import (
    CUSTOM,
    ONE_MONTH,
    ONE_YEAR,
    PERIOD_KINDS,
    THREE_MONTHS,
    DateRange,
    PeriodSelector,
)

__all__ = [
    "CUSTOM",
    "DashboardSnapshot",
    "DateRange",
    "EarningsSummary",
    "FormErrors",
    "INVOICE_STATUSES",
    "Invoice",
    "InvoiceForm",
    "InvoiceStatus",
    "MonthBucket",
    "ONE_MONTH",
    "ONE_YEAR",
    "PERIOD_KINDS",
    "PeriodSelector",
    "SETTLED_STATUSES",
    "THREE_MONTHS",
    "apply_edit",
    "create_invoice",
    "deserialize_invoice",
    "serialize_invoice",
    "validate_invoice_form",
]
