"""Mini README: Personal ledger core for Ledgerbook.

This package groups the in-memory transaction store and the pure
aggregations that turn a snapshot of it into a monthly balance and an
expense breakdown. Presentation layers re-read these after every mutation;
nothing here depends on how the results are rendered.
"""

from .aggregation import (
    BreakdownEntry,
    ChartSector,
    MonthlyBalance,
    chart_sectors,
    expense_breakdown,
    format_balance,
    monthly_balance,
)
from .demo import seed_demo_transactions
from .models import (
    EmptyLabelError,
    InvalidAmountError,
    LedgerValidationError,
    Transaction,
    TransactionKind,
    ValidationReason,
)
from .store import LedgerStore, display_order

__all__ = [
    "BreakdownEntry",
    "ChartSector",
    "EmptyLabelError",
    "InvalidAmountError",
    "LedgerStore",
    "LedgerValidationError",
    "MonthlyBalance",
    "Transaction",
    "TransactionKind",
    "ValidationReason",
    "chart_sectors",
    "display_order",
    "expense_breakdown",
    "format_balance",
    "monthly_balance",
    "seed_demo_transactions",
]
