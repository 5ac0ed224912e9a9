"""
Derived dashboard structures.

These are rebuilt from scratch on every aggregation call and never
mutated afterwards. Each carries a to_dict for handing results to the
Reflex state, following the serialization style of the invoice model.
"""

from dataclasses import dataclass, field
from typing import Sequence

from invoice_dashboard.models.invoice import Invoice, serialize_invoice
from invoice_dashboard.models.period import DateRange


@dataclass(frozen=True, slots=True)
class MonthBucket:
    """
    One calendar month of the trend series.

    Attributes:
        label: Short month name, e.g. "Jan".
        month: Month number, 1-12.
        year: Four digit year.
        income: Settled income for the month.
        growth_percent: Change from the previous bucket, in whole percent.
    """

    label: str
    month: int
    year: int
    income: int = 0
    growth_percent: int = 0

    def to_dict(self) -> dict:
        return {
            "month": self.label,
            "year": self.year,
            "income": self.income,
            "growth": self.growth_percent,
        }


@dataclass(frozen=True, slots=True)
class EarningsSummary:
    """Totals over the period-filtered invoices."""

    total: int = 0
    awaited: int = 0
    overdue: int = 0
    awaited_count: int = 0
    overdue_count: int = 0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "awaited": self.awaited,
            "overdue": self.overdue,
            "awaited_count": self.awaited_count,
            "overdue_count": self.overdue_count,
        }


@dataclass(frozen=True, slots=True)
class DashboardSnapshot:
    """
    Everything the presentation layer needs for one render.

    Attributes:
        invoices: Invoices inside the reporting period, in input order.
        display_range: The resolved reporting interval.
        buckets: Monthly trend series, oldest first.
        earnings: Earnings cards totals.
    """

    invoices: Sequence[Invoice]
    display_range: DateRange
    buckets: Sequence[MonthBucket] = field(default_factory=tuple)
    earnings: EarningsSummary = field(default_factory=EarningsSummary)

    @property
    def formatted_range(self) -> tuple[str, str]:
        return self.display_range.formatted()

    def to_dict(self) -> dict:
        start, end = self.formatted_range
        return {
            "invoices": [serialize_invoice(inv) for inv in self.invoices],
            "date_range": {"start": start, "end": end},
            "chart": [bucket.to_dict() for bucket in self.buckets],
            "earnings": self.earnings.to_dict(),
        }
