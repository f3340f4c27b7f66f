"""Mini README: Deterministic demo data for trying the ledger interactively."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from ..logging_utils import get_logger
from .models import Transaction, TransactionKind
from .store import LedgerStore

LOGGER = get_logger(__name__)

_DEMO_ENTRIES = (
    # (day of month, kind, label, amount)
    (1, TransactionKind.INCOME, "Salary", 3200.0),
    (1, TransactionKind.EXPENSE, "Rent", 1150.0),
    (3, TransactionKind.EXPENSE, "Groceries", 86.4),
    (7, TransactionKind.EXPENSE, "Transport", 42.0),
    (9, TransactionKind.EXPENSE, "Groceries", 64.15),
    (12, TransactionKind.INCOME, "Freelance invoice", 450.0),
    (14, TransactionKind.EXPENSE, "Utilities", 120.75),
)


def seed_demo_transactions(
    store: LedgerStore, reference_date: Optional[date] = None
) -> List[Transaction]:
    """Add the demo entries to ``store``, dated within the reference month."""

    reference = reference_date or date.today()
    created = [
        store.add(amount, label, date(reference.year, reference.month, day), kind)
        for day, kind, label, amount in _DEMO_ENTRIES
    ]
    LOGGER.info(
        "Seeded %s demo transactions for %04d-%02d",
        len(created),
        reference.year,
        reference.month,
    )
    return created
