"""
Create and edit invoice modals.

Both share one form; each input clears its own error message as the user
types, and submit runs validation before the collection is touched.
"""

import reflex as rx

from invoice_dashboard.state import DashboardState


def invoice_modals() -> rx.Component:
    """Build the create and edit dialogs."""
    return rx.fragment(
        _dialog(
            "Create New Invoice",
            DashboardState.show_create_modal,
            "Create Invoice",
            DashboardState.submit_create,
        ),
        _dialog(
            "Edit Invoice",
            DashboardState.show_edit_modal,
            "Save Changes",
            DashboardState.submit_edit,
        ),
    )


def _dialog(title: str, is_open, submit_label: str, on_submit) -> rx.Component:
    return rx.dialog.root(
        rx.dialog.content(
            rx.dialog.title(title),
            _field("Client Name", "client_name", "text"),
            _field("Amount", "amount", "number"),
            _field("Description", "description", "text"),
            _field("Due Date", "due_date", "date"),
            rx.box(
                rx.button("Cancel", variant="soft", on_click=DashboardState.close_modals),
                rx.button(submit_label, on_click=on_submit),
                class_name="modal-actions",
            ),
        ),
        open=is_open,
        on_open_change=lambda _: DashboardState.close_modals(),
    )


def _field(label: str, name: str, input_type: str) -> rx.Component:
    """Build one labelled input with its error message."""
    error = DashboardState.form_errors[name]
    return rx.box(
        rx.text(label, as_="label"),
        rx.input(
            type=input_type,
            value=DashboardState.form[name],
            on_change=lambda value: DashboardState.set_form_field(name, value),
            class_name=rx.cond(error != "", "form-input error", "form-input"),
        ),
        rx.cond(error != "", rx.text(error, class_name="form-error")),
        class_name="form-field",
    )
