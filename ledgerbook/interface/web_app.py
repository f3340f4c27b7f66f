"""Mini README: FastAPI-powered JSON interface for the ledger.

Structure:
    * create_application - application factory wiring routes to a LedgerStore.
    * DisplayedIndices - request body for position-based deletes.
    * _rejected - the shared 400 payload for refused form submissions.

Each route performs one store operation and then re-reads whatever the
client needs, so list and summary payloads always reflect the latest
mutation. Routes are plain functions, so FastAPI runs them on its worker
threads and the store lock serialises mutations. Every refused submission
(bad amount, blank label, unknown kind, malformed date) comes back as HTTP
400 with a machine-readable reason, leaving the client free to keep the
user's typed input.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from fastapi import FastAPI, Form, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..configuration import LedgerSettings, get_settings
from ..ledger import (
    LedgerStore,
    LedgerValidationError,
    TransactionKind,
    chart_sectors,
    expense_breakdown,
    format_balance,
    monthly_balance,
    seed_demo_transactions,
)
from ..ledger.models import parse_date
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

INVALID_KIND = "invalid_kind"
INVALID_DATE = "invalid_date"


class DisplayedIndices(BaseModel):
    indices: List[int]


def _rejected(reason: str, message: str) -> HTTPException:
    """Build the 400 response shared by every rejected form submission."""

    LOGGER.warning("Rejected form submission (%s): %s", reason, message)
    return HTTPException(status_code=400, detail={"reason": reason, "message": message})


def create_application(
    store: Optional[LedgerStore] = None, settings: Optional[LedgerSettings] = None
) -> FastAPI:
    """Create the FastAPI application with routes bound to ``store``."""

    settings = settings or get_settings()
    if store is None:
        store = LedgerStore()
        if settings.seed_demo_data:
            seed_demo_transactions(store)
    app = FastAPI(title="Ledgerbook", version="0.1.0")
    app.state.store = store

    @app.get("/transactions")
    def list_transactions() -> JSONResponse:
        """Return transactions newest first, as the list view shows them."""

        transactions = [transaction.as_dict() for transaction in store.sorted_transactions()]
        LOGGER.debug("Returning %s transactions", len(transactions))
        return JSONResponse({"transactions": transactions})

    @app.post("/transactions")
    def create_transaction(
        occurred_on: str = Form(""),
        kind: str = Form(""),
        amount: str = Form(""),
        label: str = Form(""),
    ) -> JSONResponse:
        """Validate submitted fields and record a new transaction."""

        try:
            transaction_kind = TransactionKind.from_str(kind)
        except ValueError as error:
            raise _rejected(INVALID_KIND, str(error)) from error
        try:
            day = parse_date(occurred_on)
        except ValueError as error:
            raise _rejected(INVALID_DATE, f"Date '{occurred_on}' is not YYYY-MM-DD.") from error
        try:
            transaction = store.add(amount, label, day, transaction_kind)
        except LedgerValidationError as error:
            raise _rejected(error.reason.value, error.message) from error
        return JSONResponse(transaction.as_dict(), status_code=201)

    @app.delete("/transactions/{transaction_id}")
    def delete_transaction(transaction_id: str) -> JSONResponse:
        """Remove by identity; unknown identities report ``removed: false``."""

        return JSONResponse({"removed": store.remove(transaction_id)})

    @app.post("/transactions/remove-displayed")
    def delete_displayed(payload: DisplayedIndices) -> JSONResponse:
        """Remove the rows at the given positions of the newest-first list."""

        removed = store.remove_by_displayed_indices(payload.indices)
        return JSONResponse(
            {"removed": [transaction.transaction_id for transaction in removed]}
        )

    @app.get("/summary")
    def summary(reference_date: Optional[date] = None) -> JSONResponse:
        """Return the month's balance, formatted balance and expense chart data."""

        reference = reference_date or date.today()
        snapshot = store.list()
        balance = monthly_balance(snapshot, reference)
        breakdown = expense_breakdown(snapshot, reference)
        LOGGER.debug(
            "Summary for %s -> balance %.2f across %s expense labels",
            reference.isoformat(),
            balance.balance,
            len(breakdown),
        )
        return JSONResponse(
            {
                "reference_date": reference.isoformat(),
                **balance.as_dict(),
                "formatted_balance": format_balance(
                    balance.balance, settings.currency_symbol
                ),
                "breakdown": [
                    {"label": entry.label, "total": entry.total} for entry in breakdown
                ],
                "chart": [sector.as_dict() for sector in chart_sectors(breakdown)],
            }
        )

    return app
