"""
Reflex state management for the invoice dashboard.

All view state (selected period, custom bounds, search term, status
filter, modal and form values) lives on DashboardState and is threaded
into the engine when the period or the collection changes. The search
term and status filter only narrow the period-filtered invoices kept on
the state, so the chart stays put while the user types. The full invoice
collection is kept in its serialized form and every edit replaces it with
the engine's new copy.
"""

import os
import time
from datetime import datetime

import reflex as rx

from invoice_dashboard.engine import (
    FirstGrowth,
    build_dashboard,
    chart_scale,
    find,
    first_growth_policy,
    random_first_growth,
    remove,
    set_status,
    upsert,
)
from invoice_dashboard.lib import logs
from invoice_dashboard.models.forms import (
    FormErrors,
    InvoiceForm,
    apply_edit,
    create_invoice,
    validate_invoice_form,
)
from invoice_dashboard.models.invoice import (
    INVOICE_STATUSES,
    Invoice,
    deserialize_invoice,
    serialize_invoice,
)
from invoice_dashboard.models.period import CUSTOM, THREE_MONTHS, PeriodSelector
from invoice_dashboard.models.reflex_models import (
    ChartBarModel,
    InvoiceRowModel,
    buckets_to_bars,
    visible_rows,
)
from invoice_dashboard.services import get_invoice_service
from invoice_dashboard.utils import STATUS_ALL, format_currency

LOG = logs.logger(__file__)

# Configuration from environment
FIRST_GROWTH_POLICY = os.getenv("INVOICE_DASHBOARD_FIRST_GROWTH", "random").lower()

APP_TITLE = "Dashboard"
CHART_SUBTITLE = "Your monthly income and growth for the selected period."

STATUS_FILTER_OPTIONS = [STATUS_ALL, *INVOICE_STATUSES]


def _first_growth() -> FirstGrowth:
    """Return the configured policy for the first chart bucket."""
    try:
        return first_growth_policy(FIRST_GROWTH_POLICY)
    except ValueError as e:
        LOG.warning("%s, using random", e)
        return random_first_growth()


def _now() -> datetime:
    return datetime.now()


def _form_to_dict(form: InvoiceForm) -> dict[str, str]:
    return {
        "client_name": form.client_name,
        "amount": form.amount,
        "description": form.description,
        "due_date": form.due_date,
    }


def _dict_to_form(data: dict[str, str]) -> InvoiceForm:
    return InvoiceForm(
        client_name=data.get("client_name", ""),
        amount=data.get("amount", ""),
        description=data.get("description", ""),
        due_date=data.get("due_date", ""),
    )


class DashboardState(rx.State):
    """
    Main application state for the dashboard.

    Handles period selection, invoice list filtering, status changes and
    the create/edit invoice modals.
    """

    # Full collection, serialized
    all_invoices: list[dict] = []

    # Period selection
    selected_period: str = THREE_MONTHS
    show_custom_range: bool = False
    custom_start: str = ""
    custom_end: str = ""
    date_range_start: str = ""
    date_range_end: str = ""

    # Presentation filters
    search_term: str = ""
    status_filter: str = STATUS_ALL

    # Engine output
    period_invoices: list[dict] = []
    rows: list[InvoiceRowModel] = []
    period_invoice_count: int = 0
    chart: list[ChartBarModel] = []
    income_ticks: list[str] = []
    growth_ticks: list[str] = []
    growth_line: str = ""
    earnings_total: str = "$0"
    earnings_awaited: str = "$0"
    earnings_overdue: str = "$0"
    awaited_count: int = 0
    overdue_count: int = 0

    # Modals
    show_create_modal: bool = False
    show_edit_modal: bool = False
    editing_id: str = ""
    form: dict[str, str] = _form_to_dict(InvoiceForm())
    form_errors: dict[str, str] = FormErrors().to_dict()

    is_loading: bool = True

    @rx.var
    def list_title(self) -> str:
        """Heading of the invoice list with the visible count."""
        return f"Your Invoices ({len(self.rows)})"

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.rows) == 0

    @rx.event
    def on_load(self):
        """Load the full collection from the configured service."""
        self.is_loading = True
        try:
            invoices = get_invoice_service().list_invoices(_now())
            self.all_invoices = [serialize_invoice(inv) for inv in invoices]
        except Exception as e:
            LOG.error("Loading invoices failed: %s", e, exc_info=True)
            self.all_invoices = []
        finally:
            self.is_loading = False
        self._recompute()

    # Period selection

    @rx.event
    def set_period(self, period: str):
        """Select a preset window, or open the custom range inputs."""
        if period == CUSTOM:
            self.show_custom_range = True
            return
        self.selected_period = period
        self.show_custom_range = False
        self._recompute()

    @rx.event
    def set_custom_start(self, value: str):
        self.custom_start = value

    @rx.event
    def set_custom_end(self, value: str):
        self.custom_end = value

    @rx.event
    def apply_custom_range(self):
        """Switch to the custom range once both bounds are filled in."""
        if not self.custom_start or not self.custom_end:
            return
        self.selected_period = CUSTOM
        self.show_custom_range = False
        self._recompute()

    @rx.event
    def clear_custom_range(self):
        self.custom_start = ""
        self.custom_end = ""
        self.show_custom_range = False
        if self.selected_period == CUSTOM:
            self.selected_period = THREE_MONTHS
        self._recompute()

    # Presentation filters

    @rx.event
    def set_search_term(self, value: str):
        self.search_term = value
        self._apply_filters()

    @rx.event
    def set_status_filter(self, value: str):
        self.status_filter = value
        self._apply_filters()

    # Collection edits

    @rx.event
    def update_status(self, invoice_id: str, status: str):
        """Change one invoice's status."""
        try:
            self._store(set_status(self._invoices(), invoice_id, status))
        except ValueError as e:
            LOG.error("Status update failed: %s", e, exc_info=True)
            return
        self._recompute()

    @rx.event
    def delete_invoice(self, invoice_id: str):
        self._store(remove(self._invoices(), invoice_id))
        self._recompute()

    # Create / edit modals

    @rx.event
    def open_create_modal(self):
        self._reset_form()
        self.show_create_modal = True

    @rx.event
    def open_edit_modal(self, invoice_id: str):
        invoice = find(self._invoices(), invoice_id)
        if invoice is None:
            LOG.warning("open_edit_modal - unknown invoice:%s", invoice_id)
            return
        self.form = _form_to_dict(InvoiceForm.from_invoice(invoice))
        self.form_errors = FormErrors().to_dict()
        self.editing_id = invoice_id
        self.show_edit_modal = True

    @rx.event
    def close_modals(self):
        self._close_modals()

    @rx.event
    def set_form_field(self, field_name: str, value: str):
        """Update one form input and clear its error message."""
        form = _dict_to_form(self.form).with_value(field_name, value)
        self.form = _form_to_dict(form)
        self.form_errors = {**self.form_errors, field_name: ""}

    @rx.event
    def submit_create(self):
        form = _dict_to_form(self.form)
        today = _now().date()
        errors = validate_invoice_form(form, today)
        if errors.has_errors:
            self.form_errors = errors.to_dict()
            return
        invoice = create_invoice(form, today, invoice_id=str(time.time_ns() // 1_000_000))
        LOG.info("submit_create - id:%s amount:%s", invoice.id, invoice.amount)
        self._store(upsert(self._invoices(), invoice))
        self._close_modals()
        self._recompute()

    @rx.event
    def submit_edit(self):
        invoices = self._invoices()
        invoice = find(invoices, self.editing_id)
        if invoice is None:
            self._close_modals()
            return
        form = _dict_to_form(self.form)
        today = _now().date()
        errors = validate_invoice_form(form, today)
        if errors.has_errors:
            self.form_errors = errors.to_dict()
            return
        self._store(upsert(invoices, apply_edit(invoice, form, today)))
        self._close_modals()
        self._recompute()

    # Helpers

    def _invoices(self) -> list[Invoice]:
        return [deserialize_invoice(payload) for payload in self.all_invoices]

    def _store(self, invoices: list[Invoice]) -> None:
        self.all_invoices = [serialize_invoice(inv) for inv in invoices]

    def _close_modals(self) -> None:
        self.show_create_modal = False
        self.show_edit_modal = False
        self.editing_id = ""
        self._reset_form()

    def _reset_form(self) -> None:
        self.form = _form_to_dict(InvoiceForm())
        self.form_errors = FormErrors().to_dict()

    def _selector(self) -> PeriodSelector:
        return PeriodSelector.from_value(
            self.selected_period, self.custom_start, self.custom_end
        )

    def _recompute(self) -> None:
        """Re-run the engine for the current period and collection."""
        snapshot = build_dashboard(
            self._invoices(), self._selector(), _now(), _first_growth()
        )
        scale = chart_scale(snapshot.buckets)

        self.date_range_start, self.date_range_end = snapshot.formatted_range
        self.period_invoices = [serialize_invoice(inv) for inv in snapshot.invoices]
        self.period_invoice_count = len(snapshot.invoices)
        self._apply_filters()

        self.chart = buckets_to_bars(list(snapshot.buckets), scale)
        self.income_ticks = [format_currency(value) for value in scale.income_ticks]
        self.growth_ticks = [f"{round(value)}%" for value in scale.growth_ticks]
        self.growth_line = scale.svg_path()

        earnings = snapshot.earnings
        self.earnings_total = format_currency(earnings.total)
        self.earnings_awaited = format_currency(earnings.awaited)
        self.earnings_overdue = format_currency(earnings.overdue)
        self.awaited_count = earnings.awaited_count
        self.overdue_count = earnings.overdue_count

    def _apply_filters(self) -> None:
        """Narrow the period-filtered invoices to the visible rows."""
        self.rows = visible_rows(self.period_invoices, self.search_term, self.status_filter)
