"""
Trend aggregation: monthly settled income, month-over-month growth and the
earnings card totals for a period-filtered invoice set.

The first bucket has no previous month to compare against, so its growth
comes from a FirstGrowth policy supplied by the caller. The default draws
a random whole percentage in [-20, 20); zero_first_growth gives a fully
deterministic series.
"""

import math
import random
from datetime import date, datetime
from typing import Callable, Iterable, Sequence

from invoice_dashboard.lib import dates, logs
from invoice_dashboard.models.dashboard import EarningsSummary, MonthBucket
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.models.period import ONE_MONTH, ONE_YEAR, THREE_MONTHS, PeriodSelector

LOG = logs.logger(__file__)

FirstGrowth = Callable[[], int]

_BUCKET_COUNTS = {
    ONE_MONTH: 4,
    THREE_MONTHS: 3,
    ONE_YEAR: 12,
}
_DEFAULT_BUCKET_COUNT = 6

_FIRST_GROWTH_LOW = -20
_FIRST_GROWTH_HIGH = 20


def random_first_growth(rng: random.Random | None = None) -> FirstGrowth:
    """Return a policy drawing a whole percentage in [-20, 20) from ``rng``."""
    source = rng or random.Random()
    return lambda: source.randrange(_FIRST_GROWTH_LOW, _FIRST_GROWTH_HIGH)


def zero_first_growth() -> int:
    return 0


FIRST_GROWTH_POLICIES = ("random", "zero")


def first_growth_policy(kind: str, rng: random.Random | None = None) -> FirstGrowth:
    """
    Look up a first-bucket growth policy by name.

    Raises:
        ValueError: If kind is not one of FIRST_GROWTH_POLICIES.
    """
    if kind == "zero":
        return zero_first_growth
    if kind == "random":
        return random_first_growth(rng)
    raise ValueError(f"Unknown first growth policy: {kind}")


def bucket_count(selector: PeriodSelector) -> int:
    """Number of monthly buckets shown for a selector (custom ranges get 6)."""
    return _BUCKET_COUNTS.get(selector.kind, _DEFAULT_BUCKET_COUNT)


def month_anchors(count: int, now: date | datetime) -> list[tuple[int, int]]:
    """Return ``count`` (year, month) pairs ending at now's month, oldest first."""
    today = dates.as_date(now)
    return [dates.shift_month(today.year, today.month, -offset) for offset in range(count - 1, -1, -1)]


def growth_percent(income: int, previous: int) -> int:
    """
    Month-over-month growth in whole percent.

    A zero previous month gives 100 when there is any income now and 0
    otherwise. Halves round up.
    """
    if previous > 0:
        return math.floor((income - previous) / previous * 100 + 0.5)
    return 100 if income > 0 else 0


def monthly_income(invoices: Iterable[Invoice]) -> dict[tuple[int, int], int]:
    """Sum settled invoice amounts per (year, month)."""
    totals: dict[tuple[int, int], int] = {}
    for invoice in invoices:
        if not invoice.is_settled:
            continue
        key = (invoice.date.year, invoice.date.month)
        totals[key] = totals.get(key, 0) + invoice.amount
    return totals


def build_buckets(
    invoices: Sequence[Invoice],
    count: int,
    now: date | datetime,
    first_growth: FirstGrowth,
) -> list[MonthBucket]:
    """
    Build the monthly trend series.

    Args:
        invoices: Period-filtered invoices.
        count: Number of months to produce.
        now: The last bucket is this month.
        first_growth: Policy for the first bucket's growth value.

    Returns:
        A new list of MonthBucket, oldest first, exactly ``count`` long.
    """
    income_by_month = monthly_income(invoices)
    buckets: list[MonthBucket] = []
    previous = 0
    for index, (year, month) in enumerate(month_anchors(count, now)):
        income = income_by_month.get((year, month), 0)
        growth = first_growth() if index == 0 else growth_percent(income, previous)
        buckets.append(
            MonthBucket(
                label=date(year, month, 1).strftime("%b"),
                month=month,
                year=year,
                income=income,
                growth_percent=growth,
            )
        )
        previous = income
    return buckets


def summarize_earnings(invoices: Iterable[Invoice]) -> EarningsSummary:
    """Total, awaited and overdue sums over the given invoices."""
    total = awaited = overdue = awaited_count = overdue_count = 0
    for invoice in invoices:
        total += invoice.amount
        # Status is trusted as stored; due dates are not consulted
        if invoice.status == "awaited":
            awaited += invoice.amount
            awaited_count += 1
        elif invoice.status == "overdue":
            overdue += invoice.amount
            overdue_count += 1
    return EarningsSummary(
        total=total,
        awaited=awaited,
        overdue=overdue,
        awaited_count=awaited_count,
        overdue_count=overdue_count,
    )


def aggregate(
    invoices: Sequence[Invoice],
    selector: PeriodSelector,
    now: date | datetime,
    first_growth: FirstGrowth | None = None,
) -> tuple[list[MonthBucket], EarningsSummary]:
    """
    Produce the chart series and earnings totals for filtered invoices.

    The number of buckets depends only on the selector, not on the span
    of the invoices.

    Args:
        invoices: Invoices already filtered to the reporting period.
        selector: The reporting period choice.
        now: Reference point for the bucket months.
        first_growth: Growth policy for the first bucket. Defaults to a
            random value in [-20, 20).

    Returns:
        Tuple of (buckets, earnings).
    """
    policy = first_growth or random_first_growth()
    count = bucket_count(selector)
    buckets = build_buckets(invoices, count, now, policy)
    earnings = summarize_earnings(invoices)
    LOG.debug(
        "aggregate - kind:%s buckets:%s invoices:%s total:%s",
        selector.kind,
        count,
        len(invoices),
        earnings.total,
    )
    return buckets, earnings
