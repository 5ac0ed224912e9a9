"""
Period picker component.

Offers the preset reporting windows and a custom date range. The custom
range is only applied once both dates are filled in.
"""

import reflex as rx

from invoice_dashboard.models.period import PERIOD_KINDS, PERIOD_LABELS
from invoice_dashboard.state import DashboardState


def period_picker() -> rx.Component:
    """Build the period selector with its custom range panel."""
    return rx.box(
        rx.box(
            *[_period_button(kind) for kind in PERIOD_KINDS],
            class_name="period-buttons",
        ),
        rx.cond(DashboardState.show_custom_range, _custom_range()),
        rx.text(
            DashboardState.date_range_start,
            " - ",
            DashboardState.date_range_end,
            class_name="muted period-range",
        ),
        class_name="period-picker",
    )


def _period_button(kind: str) -> rx.Component:
    return rx.button(
        PERIOD_LABELS[kind],
        on_click=DashboardState.set_period(kind),
        class_name=rx.cond(
            DashboardState.selected_period == kind,
            "period-button active",
            "period-button",
        ),
    )


def _custom_range() -> rx.Component:
    """Build the start/end inputs for a custom range."""
    return rx.box(
        rx.box(
            rx.text("Start Date", as_="label"),
            rx.input(
                type="date",
                value=DashboardState.custom_start,
                on_change=DashboardState.set_custom_start,
            ),
        ),
        rx.box(
            rx.text("End Date", as_="label"),
            rx.input(
                type="date",
                value=DashboardState.custom_end,
                on_change=DashboardState.set_custom_end,
            ),
        ),
        rx.button(
            "Apply",
            on_click=DashboardState.apply_custom_range,
            disabled=(DashboardState.custom_start == "")
            | (DashboardState.custom_end == ""),
        ),
        rx.button("Clear", on_click=DashboardState.clear_custom_range, variant="soft"),
        class_name="card custom-range",
    )
