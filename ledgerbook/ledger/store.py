"""Mini README: In-memory ledger store owning every recorded transaction.

Structure:
    * display_order - the newest-first projection used by lists and deletes.
    * LedgerStore - validated add, identity and display-index removal, snapshots.

The store keeps transactions in insertion order and never exposes its list
directly. Views sort a snapshot with ``display_order``; deletes that arrive
as positions in such a view are resolved against a fresh projection taken
under the same lock that guards the removal.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..logging_utils import get_logger
from .models import (
    LedgerValidationError,
    Transaction,
    TransactionKind,
    parse_amount,
    parse_date,
    validate_label,
)

LOGGER = get_logger(__name__)

Ordering = Callable[[Sequence[Transaction]], List[Transaction]]


def display_order(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Sort newest first; equal dates keep insertion order."""

    # sorted() is stable with reverse=True, so ties are not flipped.
    return sorted(transactions, key=lambda transaction: transaction.occurred_on, reverse=True)


class LedgerStore:
    """Hold the authoritative, ordered set of transactions."""

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None) -> None:
        self._lock = threading.Lock()
        self._transactions: List[Transaction] = []
        self._ids: set = set()
        self._sequence = 0
        for transaction in transactions or ():
            self._register(transaction)
        LOGGER.debug("Ledger store initialised with %s transactions", len(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def __contains__(self, transaction_id: object) -> bool:
        return transaction_id in self._ids

    def _next_id(self) -> str:
        self._sequence += 1
        return f"txn_{self._sequence:04d}"

    def _register(self, transaction: Transaction) -> None:
        """Append a transaction ensuring identifiers remain unique."""

        if transaction.transaction_id in self._ids:
            raise ValueError(f"Transaction {transaction.transaction_id} already exists.")
        self._transactions.append(transaction)
        self._ids.add(transaction.transaction_id)
        suffix = transaction.transaction_id.rsplit("_", 1)[-1]
        if suffix.isdigit():
            self._sequence = max(self._sequence, int(suffix))

    def add(
        self,
        amount: Union[str, int, float],
        label: str,
        occurred_on: object,
        kind: Union[TransactionKind, str],
    ) -> Transaction:
        """Validate raw input and append a new transaction.

        Raises ``InvalidAmountError`` or ``EmptyLabelError`` (both
        ``LedgerValidationError``) without touching the store. Resetting the
        caller's input fields on success is left to the caller.
        """

        try:
            parsed_amount = parse_amount(amount)
            checked_label = validate_label(label)
        except LedgerValidationError as error:
            LOGGER.warning("Rejected transaction input (%s): %s", error.reason.value, error)
            raise
        if not isinstance(kind, TransactionKind):
            kind = TransactionKind.from_str(kind)
        day = parse_date(occurred_on)

        with self._lock:
            transaction = Transaction(
                transaction_id=self._next_id(),
                amount=parsed_amount,
                label=checked_label,
                occurred_on=day,
                kind=kind,
            )
            self._register(transaction)
        LOGGER.info(
            "Recorded %s %s of %.2f on %s",
            transaction.kind.value,
            transaction.transaction_id,
            transaction.amount,
            transaction.occurred_on.isoformat(),
        )
        return transaction

    def remove(self, transaction_id: str) -> bool:
        """Remove a transaction by identity; absent identities are a no-op."""

        with self._lock:
            removed = self._remove_ids({transaction_id})
        if removed:
            LOGGER.info("Removed transaction %s", transaction_id)
        else:
            LOGGER.debug("Transaction %s not present; nothing removed", transaction_id)
        return bool(removed)

    def remove_by_displayed_indices(
        self, indices: Iterable[int], order: Ordering = display_order
    ) -> List[Transaction]:
        """Remove the transactions shown at ``indices`` of a sorted view.

        The view is recomputed with ``order`` while holding the lock, so the
        positions resolve against the same projection the caller rendered.
        Out of range positions are ignored and negative ones never wrap.
        """

        wanted = set(indices)
        with self._lock:
            view = order(list(self._transactions))
            targets = [
                transaction
                for position, transaction in enumerate(view)
                if position in wanted
            ]
            self._remove_ids({transaction.transaction_id for transaction in targets})
        LOGGER.info(
            "Removed %s transactions at displayed positions %s",
            len(targets),
            sorted(wanted),
        )
        return targets

    def _remove_ids(self, transaction_ids: set) -> List[Transaction]:
        removed = [t for t in self._transactions if t.transaction_id in transaction_ids]
        if removed:
            self._transactions = [
                t for t in self._transactions if t.transaction_id not in transaction_ids
            ]
            self._ids.difference_update(t.transaction_id for t in removed)
        return removed

    def list(self) -> Tuple[Transaction, ...]:
        """Return an immutable snapshot in store (insertion) order."""

        with self._lock:
            return tuple(self._transactions)

    def sorted_transactions(self, order: Ordering = display_order) -> List[Transaction]:
        """Return the projection used for display, newest first by default."""

        return order(self.list())

    def get(self, transaction_id: str) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self.list():
            if transaction.transaction_id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def export_snapshot(self) -> Dict[str, List[Dict[str, object]]]:
        """Export transactions grouped by kind for JSON responses."""

        income: List[Dict[str, object]] = []
        expenses: List[Dict[str, object]] = []
        for transaction in self.sorted_transactions():
            if transaction.kind is TransactionKind.INCOME:
                income.append(transaction.as_dict())
            else:
                expenses.append(transaction.as_dict())
        return {"income": income, "expenses": expenses}
