"""Unit tests for pure collection edits"""

from datetime import date

import pytest

from invoice_dashboard.engine.collection import find, remove, set_status, upsert


@pytest.fixture
def invoices(make_invoice):
    return [
        make_invoice(date(2024, 2, 1), status="draft", invoice_id="a"),
        make_invoice(date(2024, 1, 1), status="awaited", invoice_id="b"),
        make_invoice(date(2023, 12, 1), status="paid", invoice_id="c"),
    ]


def test_set_status_changes_exactly_one(invoices):
    updated = set_status(invoices, "b", "paid")

    assert [inv.id for inv in updated] == ["a", "b", "c"]
    assert [inv.status for inv in updated] == ["draft", "paid", "paid"]
    assert updated[0] is invoices[0]
    assert updated[2] is invoices[2]


def test_set_status_leaves_input_untouched(invoices):
    set_status(invoices, "a", "overdue")
    assert invoices[0].status == "draft"


def test_set_status_unknown_id_returns_copy(invoices):
    updated = set_status(invoices, "missing", "paid")
    assert updated == invoices
    assert updated is not invoices


def test_set_status_rejects_unknown_status(invoices):
    with pytest.raises(ValueError, match="Unknown invoice status"):
        set_status(invoices, "a", "cancelled")


def test_upsert_replaces_in_place(invoices, make_invoice):
    replacement = make_invoice(date(2024, 1, 5), amount=999, status="awaited", invoice_id="b")

    updated = upsert(invoices, replacement)

    assert [inv.id for inv in updated] == ["a", "b", "c"]
    assert updated[1].amount == 999
    assert invoices[1].amount == 100


def test_upsert_inserts_new_invoice_first(invoices, make_invoice):
    new = make_invoice(date(2024, 2, 15), invoice_id="d")

    updated = upsert(invoices, new)

    assert [inv.id for inv in updated] == ["d", "a", "b", "c"]
    assert len(invoices) == 3


def test_remove_deletes_at_most_one(invoices, make_invoice):
    duplicated = invoices + [make_invoice(date(2023, 1, 1), invoice_id="a")]

    updated = remove(duplicated, "a")

    assert [inv.id for inv in updated] == ["b", "c", "a"]
    assert len(duplicated) == 4


def test_remove_unknown_id(invoices):
    assert remove(invoices, "zzz") == invoices


def test_find(invoices):
    assert find(invoices, "c") is invoices[2]
    assert find(invoices, "zzz") is None
