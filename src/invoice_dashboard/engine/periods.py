"""
Period resolution: turn a PeriodSelector into a date range and the
invoices that fall inside it.
"""

from datetime import date, datetime
from typing import Sequence

from invoice_dashboard.lib import dates, logs
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.models.period import (
    ONE_MONTH,
    ONE_YEAR,
    DateRange,
    PeriodSelector,
)

LOG = logs.logger(__file__)

# Months to look back for each preset; anything unrecognized uses the default
_LOOKBACK_MONTHS = {
    ONE_MONTH: 1,
    ONE_YEAR: 12,
}
_DEFAULT_LOOKBACK_MONTHS = 3


def resolve_range(selector: PeriodSelector, now: date | datetime) -> DateRange:
    """
    Compute the inclusive reporting interval for a selector.

    Custom ranges are used as given, even when start is after end. A
    custom selector missing either bound, or an unknown kind, falls back
    to the last three months.

    Args:
        selector: The reporting period choice.
        now: Reference point; only its calendar date is used.

    Returns:
        The resolved DateRange.
    """
    today = dates.as_date(now)
    if selector.has_custom_bounds:
        return DateRange(start=selector.start, end=selector.end)

    months = _LOOKBACK_MONTHS.get(selector.kind, _DEFAULT_LOOKBACK_MONTHS)
    return DateRange(start=dates.subtract_months(today, months), end=today)


def filter_by_range(invoices: Sequence[Invoice], date_range: DateRange) -> list[Invoice]:
    """Return invoices issued within the range, preserving input order."""
    return [invoice for invoice in invoices if date_range.contains(invoice.date)]


def resolve(
    selector: PeriodSelector,
    now: date | datetime,
    invoices: Sequence[Invoice],
) -> tuple[list[Invoice], DateRange]:
    """
    Resolve a selector and filter the full invoice set into its window.

    Returns:
        Tuple of (in-scope invoices, resolved DateRange).
    """
    date_range = resolve_range(selector, now)
    filtered = filter_by_range(invoices, date_range)
    LOG.debug(
        "resolve - kind:%s start:%s end:%s matched:%s/%s",
        selector.kind,
        date_range.start,
        date_range.end,
        len(filtered),
        len(invoices),
    )
    return filtered, date_range
