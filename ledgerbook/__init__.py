"""Mini README: Core package initializer for Ledgerbook.

Ledgerbook is a personal ledger: an in-memory transaction store with monthly
balance and expense breakdown aggregations, plus a thin JSON interface. The
ledger API itself lives in :mod:`ledgerbook.ledger`; this module only
re-exports the logging helper so callers share one configuration.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
