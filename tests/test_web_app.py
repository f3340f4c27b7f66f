"""Mini README: Tests for the FastAPI JSON interface.

Structure:
    * test_create_transaction_returns_created_record - 201 with the stored record.
    * test_create_transaction_reports_validation_reason - amount and label rejections.
    * test_create_transaction_rejects_unknown_kind_and_bad_date - same 400 payload shape.
    * test_list_and_delete_flow - newest-first listing and identity deletes.
    * test_remove_displayed_uses_newest_first_positions - position deletes.
    * test_summary_reports_balance_breakdown_and_chart - monthly summary payload.
    * test_seeded_application_starts_with_demo_data - demo seeding toggle.

Each test builds an application around its own LedgerStore so requests never
share state.
"""

from __future__ import annotations

from datetime import date

import pytest
from fastapi.testclient import TestClient

from ledgerbook.configuration import LedgerSettings
from ledgerbook.interface import create_application
from ledgerbook.ledger import LedgerStore, TransactionKind


@pytest.fixture()
def store() -> LedgerStore:
    return LedgerStore()


@pytest.fixture()
def client(store: LedgerStore) -> TestClient:
    settings = LedgerSettings(currency_symbol="$")
    return TestClient(create_application(store=store, settings=settings))


def test_create_transaction_returns_created_record(client, store) -> None:
    """A valid form post creates one transaction and echoes it back."""

    response = client.post(
        "/transactions",
        data={"amount": "12.5", "label": "Lunch", "occurred_on": "2024-05-02", "kind": "expense"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["label"] == "Lunch"
    assert body["amount"] == 12.5
    assert body["occurred_on"] == "2024-05-02"
    assert len(store) == 1


@pytest.mark.parametrize(
    "amount,label,reason",
    [("-3", "Lunch", "invalid_amount"), ("abc", "Lunch", "invalid_amount"), ("3", "  ", "empty_label")],
)
def test_create_transaction_reports_validation_reason(client, store, amount, label, reason) -> None:
    """Rejected input returns 400 with a machine-readable reason and stores nothing."""

    response = client.post(
        "/transactions",
        data={"amount": amount, "label": label, "occurred_on": "2024-05-02", "kind": "expense"},
    )

    assert response.status_code == 400
    assert response.json()["detail"]["reason"] == reason
    assert len(store) == 0


@pytest.mark.parametrize(
    "kind,occurred_on,reason",
    [
        ("refund", "2024-05-02", "invalid_kind"),
        ("expense", "02/05/2024", "invalid_date"),
        ("expense", "", "invalid_date"),
    ],
)
def test_create_transaction_rejects_unknown_kind_and_bad_date(
    client, store, kind, occurred_on, reason
) -> None:
    """Kind and date problems use the same reason/message payload as other rejections."""

    response = client.post(
        "/transactions",
        data={"amount": "3", "label": "x", "occurred_on": occurred_on, "kind": kind},
    )

    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["reason"] == reason
    assert detail["message"]
    assert len(store) == 0


def test_list_and_delete_flow(client, store) -> None:
    """Listing is newest first and deleting an absent id reports false."""

    old = store.add("5", "Old", date(2024, 1, 1), TransactionKind.EXPENSE)
    store.add("6", "New", date(2024, 2, 1), TransactionKind.EXPENSE)

    listed = client.get("/transactions").json()["transactions"]
    assert [entry["label"] for entry in listed] == ["New", "Old"]

    assert client.delete(f"/transactions/{old.transaction_id}").json() == {"removed": True}
    assert client.delete(f"/transactions/{old.transaction_id}").json() == {"removed": False}


def test_remove_displayed_uses_newest_first_positions(client, store) -> None:
    """Position zero of the rendered list is the newest transaction."""

    store.add("5", "Old", date(2024, 1, 1), TransactionKind.EXPENSE)
    newest = store.add("6", "New", date(2024, 2, 1), TransactionKind.EXPENSE)

    response = client.post("/transactions/remove-displayed", json={"indices": [0]})

    assert response.json() == {"removed": [newest.transaction_id]}
    assert [t.label for t in store.list()] == ["Old"]


def test_summary_reports_balance_breakdown_and_chart(client, store) -> None:
    """The summary carries totals, formatted balance, breakdown and chart sectors."""

    store.add("1000", "Salary", date(2024, 5, 1), TransactionKind.INCOME)
    store.add("1000", "rent", date(2024, 5, 2), TransactionKind.EXPENSE)
    store.add("300", "food", date(2024, 5, 3), TransactionKind.EXPENSE)
    store.add("200", "food", date(2024, 5, 4), TransactionKind.EXPENSE)

    body = client.get("/summary", params={"reference_date": "2024-05-20"}).json()

    assert body["income_total"] == 1000.0
    assert body["expense_total"] == 1500.0
    assert body["balance"] == -500.0
    assert body["formatted_balance"] == "Deficit: $500.00"
    assert body["breakdown"] == [
        {"label": "rent", "total": 1000.0},
        {"label": "food", "total": 500.0},
    ]
    assert [sector["label"] for sector in body["chart"]] == ["rent", "food"]
    assert sum(sector["sweep_degrees"] for sector in body["chart"]) == pytest.approx(360.0)


def test_seeded_application_starts_with_demo_data() -> None:
    """Enabling demo seeding gives a fresh store some transactions."""

    app = create_application(settings=LedgerSettings(seed_demo_data=True))
    client = TestClient(app)

    assert len(client.get("/transactions").json()["transactions"]) == len(app.state.store)
    assert len(app.state.store) > 0
