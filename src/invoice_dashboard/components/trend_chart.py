"""
Income and growth trend chart.

Bars show settled income per month; an SVG line overlays month-over-month
growth. Geometry comes precomputed from the engine's chart scale.
"""

import reflex as rx

from invoice_dashboard.models.reflex_models import ChartBarModel
from invoice_dashboard.state import CHART_SUBTITLE, DashboardState


def trend_chart() -> rx.Component:
    """Build the chart card."""
    return rx.box(
        rx.heading("Income Trend", size="4", as_="h3"),
        rx.text(CHART_SUBTITLE, class_name="muted"),
        rx.box(
            _axis(DashboardState.income_ticks, "chart-axis left"),
            rx.box(
                rx.el.svg(
                    rx.el.path(
                        d=DashboardState.growth_line,
                        fill="none",
                        stroke="#f87171",
                        stroke_width="2",
                        vector_effect="non-scaling-stroke",
                    ),
                    view_box="0 0 100 100",
                    preserve_aspect_ratio="none",
                    class_name="growth-line",
                ),
                rx.foreach(DashboardState.chart, _bar),
                class_name="chart-bars",
            ),
            _axis(DashboardState.growth_ticks, "chart-axis right"),
            class_name="chart",
        ),
        class_name="card chart-card",
    )


def _axis(ticks, class_name: str) -> rx.Component:
    return rx.box(
        rx.foreach(ticks, lambda tick: rx.text(tick, as_="span")),
        class_name=class_name,
    )


def _bar(bar: ChartBarModel) -> rx.Component:
    return rx.box(
        rx.box(
            rx.cond(
                bar.is_growth,
                rx.icon("trending-up", size=16),
                rx.icon("trending-down", size=16),
            ),
            rx.text(bar.growth_label, as_="span"),
            class_name=rx.cond(bar.is_growth, "growth positive", "growth negative"),
        ),
        rx.box(
            class_name="income-bar",
            style={"height": bar.bar_height},
            title=bar.title,
        ),
        rx.text(bar.month, class_name="chart-label"),
        class_name="chart-column",
    )
