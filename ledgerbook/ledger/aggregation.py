"""Mini README: Read-side aggregations feeding the balance and chart views.

Structure:
    * MonthlyBalance / monthly_balance - income, expense and net for a month.
    * format_balance - surplus/deficit text for a net balance.
    * BreakdownEntry / expense_breakdown - per-label expense totals, largest first.
    * ChartSector / chart_sectors - proportional pie sectors for a breakdown.

Every function is pure and works on whatever snapshot it is handed, usually
``LedgerStore.list()``. The reference month defaults to today's date, so
tests and reproducible reports should always pass ``reference_date``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Dict, Iterable, List, NamedTuple, Optional

from ..logging_utils import get_logger
from .models import Transaction

LOGGER = get_logger(__name__)

SURPLUS_LABEL = "Surplus"
DEFICIT_LABEL = "Deficit"


@dataclass(frozen=True, slots=True)
class MonthlyBalance:
    """Totals for a single calendar month."""

    income_total: float = 0.0
    expense_total: float = 0.0
    balance: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            "income_total": self.income_total,
            "expense_total": self.expense_total,
            "balance": self.balance,
        }


class BreakdownEntry(NamedTuple):
    label: str
    total: float


@dataclass(frozen=True, slots=True)
class ChartSector:
    """A breakdown entry expressed as a slice of the whole."""

    label: str
    total: float
    share: float
    sweep_degrees: float

    def as_dict(self) -> Dict[str, object]:
        return {
            "label": self.label,
            "total": self.total,
            "share": self.share,
            "sweep_degrees": self.sweep_degrees,
        }


def _resolve_reference(reference_date: Optional[date]) -> date:
    if reference_date is None:
        return date.today()
    if isinstance(reference_date, datetime):
        return reference_date.date()
    return reference_date


def _in_month(transactions: Iterable[Transaction], reference: date) -> List[Transaction]:
    return [
        transaction
        for transaction in transactions
        if transaction.occurred_on.year == reference.year
        and transaction.occurred_on.month == reference.month
    ]


def monthly_balance(
    transactions: Iterable[Transaction], reference_date: Optional[date] = None
) -> MonthlyBalance:
    """Sum income and expenses dated in the month of ``reference_date``."""

    reference = _resolve_reference(reference_date)
    income_total = 0.0
    expense_total = 0.0
    for transaction in _in_month(transactions, reference):
        if not transaction.is_expense:
            income_total += transaction.amount
        else:
            expense_total += transaction.amount
    result = MonthlyBalance(
        income_total=income_total,
        expense_total=expense_total,
        balance=income_total - expense_total,
    )
    LOGGER.debug("Monthly balance for %04d-%02d: %s", reference.year, reference.month, result)
    return result


def format_balance(balance: float, currency_symbol: str = "") -> str:
    """Render a net balance as surplus (>= 0) or deficit (< 0) text."""

    # Decide the sign at the displayed precision so near-zero never reads "Deficit: 0.00".
    balance = round(balance, 2)
    label = SURPLUS_LABEL if balance >= 0 else DEFICIT_LABEL
    return f"{label}: {currency_symbol}{abs(balance):,.2f}"


def expense_breakdown(
    transactions: Iterable[Transaction], reference_date: Optional[date] = None
) -> List[BreakdownEntry]:
    """Group this month's expenses by label, largest total first.

    Labels with equal totals keep the order in which they were first seen.
    An empty list means there is nothing to chart.
    """

    reference = _resolve_reference(reference_date)
    totals: Dict[str, float] = {}
    for transaction in _in_month(transactions, reference):
        if not transaction.is_expense:
            continue
        totals[transaction.label] = totals.get(transaction.label, 0.0) + transaction.amount
    breakdown = [
        BreakdownEntry(label, total)
        for label, total in sorted(totals.items(), key=lambda item: item[1], reverse=True)
    ]
    LOGGER.debug(
        "Expense breakdown for %04d-%02d has %s labels",
        reference.year,
        reference.month,
        len(breakdown),
    )
    return breakdown


def chart_sectors(breakdown: Iterable[BreakdownEntry]) -> List[ChartSector]:
    """Convert breakdown totals into proportional pie sectors."""

    entries = list(breakdown)
    grand_total = sum(entry.total for entry in entries)
    if grand_total <= 0:
        return []
    return [
        ChartSector(
            label=entry.label,
            total=entry.total,
            share=entry.total / grand_total,
            sweep_degrees=360.0 * entry.total / grand_total,
        )
        for entry in entries
    ]
