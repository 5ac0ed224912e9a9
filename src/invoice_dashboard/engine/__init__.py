"""
Time-window aggregation engine.

The engine is a set of pure functions over an invoice collection:

- periods: resolve a PeriodSelector to a date range and filter invoices
- trends: monthly settled income, growth and earnings totals
- collection: set_status / upsert / remove returning new collections
- chart: bar and growth-line scaling for the trend chart

build_dashboard() runs the resolver and the aggregator in order and
bundles the result for the presentation layer.
"""

from datetime import date, datetime
from typing import Sequence

from invoice_dashboard.engine.chart import ChartScale, chart_scale
from invoice_dashboard.engine.collection import find, remove, set_status, upsert
from invoice_dashboard.engine.periods import filter_by_range, resolve, resolve_range
from invoice_dashboard.engine.trends import (
    FIRST_GROWTH_POLICIES,
    FirstGrowth,
    aggregate,
    bucket_count,
    first_growth_policy,
    growth_percent,
    random_first_growth,
    summarize_earnings,
    zero_first_growth,
)
from invoice_dashboard.models.dashboard import DashboardSnapshot
from invoice_dashboard.models.invoice import Invoice
from invoice_dashboard.models.period import PeriodSelector


def build_dashboard(
    invoices: Sequence[Invoice],
    selector: PeriodSelector,
    now: date | datetime,
    first_growth: FirstGrowth | None = None,
) -> DashboardSnapshot:
    """
    Run the full pipeline for one render.

    Args:
        invoices: The full invoice collection.
        selector: The reporting period choice.
        now: Injected current time.
        first_growth: Growth policy for the first chart bucket.

    Returns:
        DashboardSnapshot with the filtered invoices, range, chart and earnings.
    """
    filtered, date_range = resolve(selector, now, invoices)
    buckets, earnings = aggregate(filtered, selector, now, first_growth)
    return DashboardSnapshot(
        invoices=filtered,
        display_range=date_range,
        buckets=buckets,
        earnings=earnings,
    )


__all__ = [
    "ChartScale",
    "FIRST_GROWTH_POLICIES",
    "FirstGrowth",
    "aggregate",
    "bucket_count",
    "build_dashboard",
    "chart_scale",
    "filter_by_range",
    "find",
    "first_growth_policy",
    "growth_percent",
    "random_first_growth",
    "remove",
    "resolve",
    "resolve_range",
    "set_status",
    "summarize_earnings",
    "upsert",
    "zero_first_growth",
]
