"""Mini README: Transaction record and input validation for the ledger.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - frozen dataclass storing a single recorded event; it
      re-checks amount, label and kind on construction.
    * ValidationReason / LedgerValidationError - typed rejection reasons.
    * parse_amount / validate_label / parse_date - input coercion helpers.

Raw form input (amount text, label text, a picked date and kind) is turned
into a Transaction only after ``parse_amount`` and ``validate_label`` accept
it. Rejections raise subclasses of ``LedgerValidationError`` so callers can
tell an invalid amount from an empty label without parsing messages.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Dict, Union


class TransactionKind(str, Enum):
    """Closed classification of a ledger entry."""

    EXPENSE = "expense"
    INCOME = "income"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction kind: {value}") from error


class ValidationReason(str, Enum):
    INVALID_AMOUNT = "invalid_amount"
    EMPTY_LABEL = "empty_label"


class LedgerValidationError(ValueError):
    """Raised when raw input cannot become a Transaction."""

    reason: ValidationReason

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidAmountError(LedgerValidationError):
    reason = ValidationReason.INVALID_AMOUNT


class EmptyLabelError(LedgerValidationError):
    reason = ValidationReason.EMPTY_LABEL


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent one immutable ledger entry."""

    transaction_id: str
    amount: float
    label: str
    occurred_on: date
    kind: TransactionKind

    def __post_init__(self) -> None:
        # Records built outside ``LedgerStore.add`` must meet the same rules.
        object.__setattr__(self, "amount", parse_amount(self.amount))
        validate_label(self.label)
        if not isinstance(self.kind, TransactionKind):
            raise ValueError(f"Unsupported transaction kind: {self.kind!r}")

    @property
    def is_expense(self) -> bool:
        return self.kind is TransactionKind.EXPENSE

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "transaction_id": self.transaction_id,
            "kind": self.kind.value,
            "label": self.label,
            "amount": self.amount,
            "occurred_on": self.occurred_on.isoformat(),
        }


def parse_amount(value: Union[str, int, float]) -> float:
    """Return ``value`` as a finite positive float or raise InvalidAmountError."""

    if isinstance(value, bool):
        raise InvalidAmountError("Amount must be a number.")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidAmountError("Amount is required.")
        try:
            amount = float(text)
        except ValueError as error:
            raise InvalidAmountError(f"Amount '{value}' is not a number.") from error
    elif isinstance(value, (int, float)):
        amount = float(value)
    else:
        raise InvalidAmountError("Amount must be a number.")
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError("Amount must be a finite number greater than zero.")
    return amount


def validate_label(value: str) -> str:
    """Reject labels with no visible content; return the label unchanged."""

    if not isinstance(value, str) or not value.strip():
        raise EmptyLabelError("Label is required.")
    return value


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")
